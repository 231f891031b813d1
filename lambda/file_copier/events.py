import logging
import urllib.parse
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationRecord:
    bucket: str
    key: str


def parse_records(event: dict[str, Any]) -> list[NotificationRecord]:
    """Extract bucket/key pairs from an S3 event notification.

    Keys are URL-encoded in S3 notifications, so they are decoded here.
    Records without an ``s3`` section are ignored.
    """
    records = []
    for record in event.get("Records", []):
        s3 = record.get("s3")
        if not s3:
            logger.info("Ignoring record without S3 data: %s", record.get("eventSource"))
            continue

        bucket = s3["bucket"]["name"]
        key = urllib.parse.unquote_plus(s3["object"]["key"], encoding="utf-8")
        records.append(NotificationRecord(bucket=bucket, key=key))

    return records
