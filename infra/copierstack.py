import os
from typing import Optional

from aws_cdk import (
    CfnOutput,
    Duration,
    Stack,
    aws_lambda as lambda_,
    aws_s3,
    aws_s3_notifications as s3n,
    aws_iam as iam,
    RemovalPolicy,
)
from constructs import Construct


DEFAULT_FUNCTION_NAME = "s3-file-copier"
DEFAULT_TIMEOUT_SECONDS = 300
DEFAULT_MEMORY_SIZE = 512

dirname = os.path.dirname(__file__)


class FileCopierStack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        source_bucket_name: Optional[str] = None,
        destination_bucket_name: Optional[str] = None,
        source_prefix: str = "",
        destination_prefix: str = "",
        function_name: str = DEFAULT_FUNCTION_NAME,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        memory_size: int = DEFAULT_MEMORY_SIZE,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        source_bucket = self._bucket("SourceBucket", source_bucket_name)
        destination_bucket = self._bucket("DestinationBucket", destination_bucket_name)

        read_from_source_bucket_policy = iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=["s3:GetObject", "s3:GetObjectTagging"],
            resources=[source_bucket.bucket_arn + "/*"],
        )
        write_to_destination_bucket_policy = iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=["s3:PutObject", "s3:PutObjectTagging"],
            resources=[destination_bucket.bucket_arn + "/*"],
        )

        code = lambda_.Code.from_asset(
            os.path.join(dirname, "../lambda"),
            exclude=["**/__pycache__", "*.pyc"],
        )

        copy_file_function = lambda_.Function(
            self,
            "CopyFileFunction",
            function_name=function_name,
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="file_copier.handler.lambda_handler",
            code=code,
            environment={
                "SOURCE_BUCKET": source_bucket.bucket_name,
                "DESTINATION_BUCKET": destination_bucket.bucket_name,
                "SOURCE_PREFIX": source_prefix,
                "DESTINATION_PREFIX": destination_prefix,
                "FUNCTION_NAME": function_name,
                "TIMEOUT_SECONDS": str(timeout_seconds),
                "MEMORY_SIZE": str(memory_size),
            },
            timeout=Duration.seconds(timeout_seconds),
            memory_size=memory_size,
        )
        copy_file_function.add_to_role_policy(read_from_source_bucket_policy)
        copy_file_function.add_to_role_policy(write_to_destination_bucket_policy)

        health_function = lambda_.Function(
            self,
            "HealthCheckFunction",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="file_copier.handler.health_handler",
            code=code,
            environment={
                "FUNCTION_NAME": function_name,
            },
            timeout=Duration.seconds(10),
            memory_size=128,
        )
        health_url = health_function.add_function_url(
            auth_type=lambda_.FunctionUrlAuthType.AWS_IAM,
        )

        # only object created events under the source prefix reach the copier
        key_filters = [aws_s3.NotificationKeyFilter(prefix=source_prefix)] if source_prefix else []
        source_bucket.add_event_notification(
            aws_s3.EventType.OBJECT_CREATED,
            s3n.LambdaDestination(copy_file_function),
            *key_filters,
        )

        CfnOutput(self, "Source bucket", value=source_bucket.bucket_name)
        CfnOutput(self, "Destination bucket", value=destination_bucket.bucket_name)
        CfnOutput(self, "Health check URL", value=health_url.url)

        self.source_bucket = source_bucket
        self.destination_bucket = destination_bucket
        self.copy_file_function = copy_file_function
        self.health_function = health_function

    def _bucket(self, construct_id: str, bucket_name: Optional[str]) -> aws_s3.IBucket:
        if bucket_name:
            return aws_s3.Bucket.from_bucket_name(self, construct_id, bucket_name)

        return aws_s3.Bucket(
            self,
            construct_id,
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )
