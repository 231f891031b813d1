#!/usr/bin/env python3
import aws_cdk as cdk

from infra.copierstack import (
    DEFAULT_FUNCTION_NAME,
    DEFAULT_MEMORY_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
    FileCopierStack,
)


app = cdk.App()


def context(key, default=None):
    value = app.node.try_get_context(key)
    return default if value is None else value


FileCopierStack(
    app,
    "FileCopierStack",
    source_bucket_name=context("source_bucket"),
    destination_bucket_name=context("destination_bucket"),
    source_prefix=context("source_prefix", ""),
    destination_prefix=context("destination_prefix", ""),
    function_name=context("function_name", DEFAULT_FUNCTION_NAME),
    timeout_seconds=int(context("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
    memory_size=int(context("memory_size", DEFAULT_MEMORY_SIZE)),
)

app.synth()
