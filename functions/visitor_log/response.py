# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from dataclasses import dataclass, field
from typing import Dict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@dataclass(frozen=True)
class ResponseConfig:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

    def build(self) -> dict:
        return {
            "statusCode": self.status_code,
            "body": self.body,
            "headers": dict(self.headers),
        }


SUCCESS = ResponseConfig(
    status_code=200,
    body="Visitor log stored successfully",
    headers=CORS_HEADERS,
)
