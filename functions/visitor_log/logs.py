# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def log_structured(level, message, **kwargs):
    """Helper function for structured JSON logging"""
    log_entry = {
        "level": level,
        "message": message,
        **kwargs
    }
    getattr(logger, level)(json.dumps(log_entry, default=str))
