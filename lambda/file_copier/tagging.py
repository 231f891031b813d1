from datetime import datetime, timezone
from typing import Optional

from file_copier.config import CopierConfig


COPIED_BY = "S3LambdaFileCopier"
PROCESSING_TYPE = "Copy"
ENVIRONMENT = "Production"


def build_tags(config: CopierConfig, now: datetime) -> dict[str, str]:
    return {
        "CopiedBy": COPIED_BY,
        "CopiedAt": format_timestamp(now),
        "SourceBucket": config.source_bucket,
        "DestinationBucket": config.destination_bucket,
        "ProcessingType": PROCESSING_TYPE,
        "Environment": ENVIRONMENT,
    }


def serialize_tags(tags: dict[str, str]) -> str:
    # values are not URL-encoded, a value containing "&" or "=" breaks the pairs
    return "&".join(f"{name}={value}" for name, value in tags.items())


def build_tagging_string(config: CopierConfig, now: Optional[datetime] = None) -> str:
    """Tag set for a single copy, in the form expected by CopyObject's Tagging."""
    if now is None:
        now = datetime.now(timezone.utc)
    return serialize_tags(build_tags(config, now))


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC instant, e.g. ``2024-01-01T00:00:00Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    timespec = "milliseconds" if moment.microsecond else "seconds"
    return moment.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"
