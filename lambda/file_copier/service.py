import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from file_copier.config import CopierConfig
from file_copier.events import NotificationRecord, parse_records
from file_copier.exceptions import CopyError, MetadataError
from file_copier.mapping import build_destination_key, should_copy
from file_copier.tagging import build_tagging_string

logger = logging.getLogger(__name__)


SUCCESS_MESSAGE = "Successfully processed S3 event"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileCopierService:
    """Copies newly created objects from the source bucket to the destination bucket."""

    def __init__(self, s3_client, config: CopierConfig, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.s3_client = s3_client
        self.config = config
        self.clock = clock or utc_now

    def process_event(self, event: dict[str, Any]) -> str:
        return self.process_records(parse_records(event))

    def process_records(self, records: Iterable[NotificationRecord]) -> str:
        """Copy every accepted record, in order.

        The first failed copy aborts the batch; records after it are not
        processed.
        """
        for record in records:
            logger.info("Processing file: s3://%s/%s", record.bucket, record.key)

            if not should_copy(record.bucket, record.key, self.config):
                if record.bucket != self.config.source_bucket:
                    logger.info("Skipping file from bucket %s (not the configured source bucket)", record.bucket)
                else:
                    logger.info(
                        "Skipping file %s (doesn't match source prefix: %s)",
                        record.key, self.config.source_prefix,
                    )
                continue

            destination_key = build_destination_key(record.key, self.config)
            self.copy_file(record.bucket, record.key, destination_key)

            logger.info(
                "Successfully copied file from s3://%s/%s to s3://%s/%s",
                record.bucket, record.key, self.config.destination_bucket, destination_key,
            )

        return SUCCESS_MESSAGE

    def copy_file(self, source_bucket: str, source_key: str, destination_key: str) -> None:
        destination_bucket = self.config.destination_bucket
        tagging = build_tagging_string(self.config, self.clock())

        logger.debug(
            "Copying object from s3://%s/%s to s3://%s/%s with tags %s",
            source_bucket, source_key, destination_bucket, destination_key, tagging,
        )

        try:
            response = self.s3_client.copy_object(
                CopySource={"Bucket": source_bucket, "Key": source_key},
                Bucket=destination_bucket,
                Key=destination_key,
                Tagging=tagging,
                TaggingDirective="REPLACE",
            )
        except (ClientError, BotoCoreError) as err:
            logger.error("S3 error while copying file: %s", err)
            raise CopyError(source_bucket, source_key, destination_bucket, destination_key) from err

        logger.debug("Copy response: %s", response.get("CopyObjectResult"))
        logger.info("File copied successfully with tags")

    def get_file_metadata(self, bucket: str, key: str) -> dict[str, Any]:
        try:
            return self.s3_client.head_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as err:
            logger.error("Error getting file metadata for s3://%s/%s: %s", bucket, key, err)
            raise MetadataError(bucket, key) from err
