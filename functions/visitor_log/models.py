# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime

from boto3.dynamodb.types import TypeSerializer

from visitor_log.errors import InternalError, InvalidRequest
from visitor_log.settings import TIMESTAMP_FORMAT

_serializer = TypeSerializer()


@dataclass
class VisitorLog:
    IP: str
    Timestamp: str = ""

    @classmethod
    def from_body(cls, body):
        """Parse a request body of the form {"IP": "<string>"}.

        Extra keys are ignored, including any client supplied Timestamp.
        """
        if not isinstance(body, str):
            raise InvalidRequest(cause="no body found in the event")
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise InvalidRequest(cause=f"error decoding JSON: {e}") from e

        if not isinstance(payload, dict):
            raise InvalidRequest(cause="body is not a JSON object")
        ip = payload.get("IP")
        if not isinstance(ip, str):
            raise InvalidRequest(cause="IP is missing or not a string")
        return cls(IP=ip)

    def stamp(self, now=None):
        self.Timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        return self

    def to_item(self):
        """Attribute map for put_item, keyed by a server generated id."""
        record = {"id": str(uuid.uuid4()), **asdict(self)}
        try:
            return {k: _serializer.serialize(v) for k, v in record.items()}
        except TypeError as e:
            raise InternalError(cause=f"failed to marshal visitor log: {e}") from e
