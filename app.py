#!/usr/bin/env python3
# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import os

import aws_cdk as cdk

from stacks.visitor_log_stack import VisitorLogStack


app = cdk.App()
VisitorLogStack(app, "VisitorLogStack",
    env=cdk.Environment(
        account=os.getenv('CDK_DEFAULT_ACCOUNT'),
        region='us-east-1'
    )
)

app.synth()
