# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0


class VisitorLogError(Exception):
    """Base error. The public message never carries the underlying cause."""

    message = "error"

    def __init__(self, cause=None):
        super().__init__(self.message)
        self.cause = cause


class InvalidRequest(VisitorLogError):
    message = "invalid request body"


class InternalError(VisitorLogError):
    # Misspelling is part of the observed error text.
    message = "intenal server error"
