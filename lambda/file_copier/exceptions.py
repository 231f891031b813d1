class FileCopierError(Exception):
    """Base class for errors raised by the file copier."""


class InitializationError(FileCopierError):
    """Configuration or S3 client could not be constructed."""


class CopyError(FileCopierError):

    def __init__(self, source_bucket: str, source_key: str, destination_bucket: str, destination_key: str) -> None:
        self.source_bucket = source_bucket
        self.source_key = source_key
        self.destination_bucket = destination_bucket
        self.destination_key = destination_key
        super().__init__(
            f"Failed to copy s3://{source_bucket}/{source_key} "
            f"to s3://{destination_bucket}/{destination_key}"
        )


class MetadataError(FileCopierError):

    def __init__(self, bucket: str, key: str) -> None:
        self.bucket = bucket
        self.key = key
        super().__init__(f"Failed to get file metadata for s3://{bucket}/{key}")
