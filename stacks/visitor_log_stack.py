# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from aws_cdk import (
    Stack,
    aws_dynamodb as dynamodb_,
    aws_lambda as lambda_,
    aws_apigateway as apigw_,
    aws_logs as logs_,
    Duration,
    RemovalPolicy,
)
from constructs import Construct

TABLE_NAME = "VisitorLogs"


class VisitorLogStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Create DynamoDb Table
        visitor_table = dynamodb_.Table(
            self,
            TABLE_NAME,
            table_name=TABLE_NAME,
            partition_key=dynamodb_.Attribute(
                name="id", type=dynamodb_.AttributeType.STRING
            ),
            billing_mode=dynamodb_.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # Create the Lambda function to receive the request
        visitor_handler = lambda_.Function(
            self,
            "VisitorLogHandler",
            function_name="visitor_log_handler",
            runtime=lambda_.Runtime.PYTHON_3_12,
            code=lambda_.Code.from_asset(
                "functions", exclude=["**/__pycache__", "*.pyc"]
            ),
            handler="visitor_log.index.handler",
            memory_size=256,
            timeout=Duration.seconds(10),
            log_retention=logs_.RetentionDays.SIX_MONTHS,
        )

        # grant permission to lambda to write to visitor table
        visitor_table.grant_write_data(visitor_handler)

        # Create log group for API Gateway access logs
        api_log_group = logs_.LogGroup(
            self,
            "ApiGatewayAccessLogs",
            retention=logs_.RetentionDays.SIX_MONTHS,
        )

        # Create API Gateway
        apigw_.LambdaRestApi(
            self,
            "Endpoint",
            handler=visitor_handler,
            default_cors_preflight_options=apigw_.CorsOptions(
                allow_origins=apigw_.Cors.ALL_ORIGINS,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
            deploy_options=apigw_.StageOptions(
                access_log_destination=apigw_.LogGroupLogDestination(api_log_group),
                access_log_format=apigw_.AccessLogFormat.json_with_standard_fields(
                    caller=True,
                    http_method=True,
                    ip=True,
                    protocol=True,
                    request_time=True,
                    resource_path=True,
                    response_length=True,
                    status=True,
                    user=True,
                ),
            ),
        )
