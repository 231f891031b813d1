from datetime import datetime, timezone


FIXED_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def s3_event(*records):
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {
                    "bucket": {"name": bucket},
                    "object": {"key": key},
                },
            }
            for bucket, key in records
        ]
    }
