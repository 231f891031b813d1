from unittest import mock

import pytest

from file_copier.config import CopierConfig
from file_copier.service import FileCopierService
from tests.helpers import FIXED_NOW


@pytest.fixture
def config():
    return CopierConfig(
        source_bucket="bucket-a",
        destination_bucket="bucket-b",
        source_prefix="incoming/",
        destination_prefix="processed/",
    )


@pytest.fixture
def s3_client():
    client = mock.MagicMock()
    client.copy_object.return_value = {"CopyObjectResult": {"ETag": '"abc123"'}}
    return client


@pytest.fixture
def service(s3_client, config):
    return FileCopierService(s3_client, config, clock=lambda: FIXED_NOW)
