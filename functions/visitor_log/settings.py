# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

TABLE_NAME = "VisitorLogs"
REGION = "us-east-1"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
