# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from visitor_log.client import put_visitor_log
from visitor_log.errors import VisitorLogError
from visitor_log.logs import log_structured
from visitor_log.models import VisitorLog
from visitor_log.response import SUCCESS
from visitor_log.settings import TABLE_NAME

log_structured("info", "Lambda Execution Started")


def handler(event, context):
    request_id = getattr(context, "aws_request_id", None)
    log_structured("info", "Processing request", request_id=request_id, table_name=TABLE_NAME)

    try:
        body = event.get("body") if isinstance(event, dict) else None
        visitor = VisitorLog.from_body(body).stamp()
        item = visitor.to_item()
        put_visitor_log(item)
    except VisitorLogError as e:
        log_structured(
            "error",
            e.message,
            request_id=request_id,
            error_type=type(e).__name__,
            cause=e.cause,
        )
        raise

    log_structured(
        "info",
        "Visitor log stored",
        request_id=request_id,
        ip=visitor.IP,
        timestamp=visitor.Timestamp,
    )
    return SUCCESS.build()
