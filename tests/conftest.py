"""Shared fixtures for the visitor log function."""
import os
from unittest.mock import patch

import boto3
import pytest
from moto import mock_aws

from visitor_log.client import reset_dynamodb_client
from visitor_log.settings import REGION, TABLE_NAME


@pytest.fixture(autouse=True)
def aws_credentials():
    """Fake credentials so nothing can reach a real account"""
    env = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": REGION,
    }
    with patch.dict(os.environ, env):
        os.environ.pop("AWS_ENDPOINT_URL", None)
        reset_dynamodb_client()
        yield
        reset_dynamodb_client()


@pytest.fixture
def dynamodb():
    with mock_aws():
        yield boto3.client("dynamodb", region_name=REGION)


@pytest.fixture
def visitor_table(dynamodb):
    dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[
            {"AttributeName": "id", "KeyType": "HASH"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "id", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    return dynamodb


@pytest.fixture
def context():
    return type("Context", (), {"aws_request_id": "test-request-id", "function_name": "visitor_log_handler"})
