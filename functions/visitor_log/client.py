# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import os
import threading

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from visitor_log.errors import InternalError
from visitor_log.settings import REGION, TABLE_NAME

_lock = threading.Lock()
_dynamodb_client = None


def get_dynamodb_client():
    """Return the DynamoDB client shared by every invocation in this process.

    boto3 clients are thread safe, so only construction is guarded.
    """
    global _dynamodb_client
    if _dynamodb_client is None:
        with _lock:
            if _dynamodb_client is None:
                _dynamodb_client = boto3.client(
                    "dynamodb",
                    region_name=REGION,
                    endpoint_url=os.environ.get("AWS_ENDPOINT_URL"),
                )
    return _dynamodb_client


def reset_dynamodb_client():
    global _dynamodb_client
    with _lock:
        _dynamodb_client = None


def put_visitor_log(item, client=None):
    client = client or get_dynamodb_client()
    try:
        return client.put_item(TableName=TABLE_NAME, Item=item)
    except (ClientError, BotoCoreError) as e:
        raise InternalError(cause=f"failed to put item in DynamoDB: {e}") from e
