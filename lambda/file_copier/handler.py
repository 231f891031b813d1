import json
import logging
import os
import threading
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError

from file_copier.config import DEFAULT_FUNCTION_NAME, CopierConfig
from file_copier.exceptions import InitializationError
from file_copier.service import FileCopierService

logger = logging.getLogger(__name__)

logging.getLogger(__package__).setLevel(os.environ.get("LOG_LEVEL", "INFO"))


# shared across invocations of a warm container, built on first use
_service: Optional[FileCopierService] = None
_service_lock = threading.Lock()


def _create_service() -> FileCopierService:
    config = CopierConfig.from_env()
    try:
        s3_client = boto3.client("s3", region_name=config.region)
    except BotoCoreError as err:
        raise InitializationError("Failed to create S3 client") from err
    return FileCopierService(s3_client, config)


def get_service() -> FileCopierService:
    global _service

    if _service is None:
        with _service_lock:
            if _service is None:
                logger.info("Initializing S3 client and configuration")
                _service = _create_service()
                logger.info("S3 client and configuration initialized")

    return _service


def lambda_handler(event, context) -> str:
    logger.info("Processing S3 event")

    try:
        return get_service().process_event(event)
    except Exception:
        logger.exception("Error processing S3 event")
        raise


def health_handler(event, context) -> dict[str, Any]:
    logger.info("Health check")

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({
            "status": "UP",
            "service": os.environ.get("FUNCTION_NAME") or DEFAULT_FUNCTION_NAME,
        }),
    }
