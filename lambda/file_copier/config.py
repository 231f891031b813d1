import os
from dataclasses import dataclass
from typing import Mapping, Optional

from file_copier.exceptions import InitializationError


DEFAULT_REGION = "us-east-1"
DEFAULT_FUNCTION_NAME = "s3-file-copier"
DEFAULT_TIMEOUT_SECONDS = 300
DEFAULT_MEMORY_SIZE = 512


@dataclass(frozen=True)
class CopierConfig:
    source_bucket: str
    destination_bucket: str
    source_prefix: str = ""
    destination_prefix: str = ""
    region: str = DEFAULT_REGION
    function_name: str = DEFAULT_FUNCTION_NAME
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    memory_size: int = DEFAULT_MEMORY_SIZE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CopierConfig":
        """Build the configuration from Lambda environment variables.

        SOURCE_BUCKET and DESTINATION_BUCKET are required, everything else
        falls back to the defaults above.
        """
        env = os.environ if environ is None else environ

        source_bucket = env.get("SOURCE_BUCKET", "")
        destination_bucket = env.get("DESTINATION_BUCKET", "")
        if not source_bucket or not destination_bucket:
            raise InitializationError("SOURCE_BUCKET and DESTINATION_BUCKET must be set")

        return cls(
            source_bucket=source_bucket,
            destination_bucket=destination_bucket,
            source_prefix=env.get("SOURCE_PREFIX", ""),
            destination_prefix=env.get("DESTINATION_PREFIX", ""),
            region=env.get("AWS_REGION") or DEFAULT_REGION,
            function_name=env.get("FUNCTION_NAME") or DEFAULT_FUNCTION_NAME,
            timeout_seconds=_int_setting(env, "TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            memory_size=_int_setting(env, "MEMORY_SIZE", DEFAULT_MEMORY_SIZE),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as err:
        raise InitializationError(f"{name} must be an integer, got {value!r}") from err
