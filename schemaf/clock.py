"""Endpoint that reports the current time from the clock sidecar service."""

from __future__ import annotations

import json
import os
import re
import urllib.error
import urllib.request
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar

DEFAULT_CLOCK_URL = "http://clock:8080"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


class ClockServiceError(Exception):
    """The clock service could not be reached or answered unreadably."""


@dataclass
class GetServerTimeRequest:
    pass


@dataclass
class GetServerTimeResponse:
    time: datetime


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 time: {text!r}")
    base, fraction, offset = match.groups()
    micros = (fraction or "").ljust(6, "0")[:6]
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(f"{base.replace('t', 'T')}.{micros}{offset}")


def _decode(body: bytes) -> datetime:
    payload = json.loads(body)
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object")
    value = payload.get("time")
    if value is None:
        return _ZERO_TIME
    if not isinstance(value, str):
        raise ValueError("time must be a string")
    return _parse_rfc3339(value)


class GetServerTimeEndpoint:
    """Returns the current time reported by the clock sidecar."""

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = "/api/time"
    auth: ClassVar[bool] = False

    def handle(self, req: GetServerTimeRequest) -> GetServerTimeResponse:
        url = os.environ.get("CLOCK_URL") or DEFAULT_CLOCK_URL
        try:
            with urllib.request.urlopen(url) as resp:
                body = resp.read()
        except urllib.error.HTTPError as exc:
            with exc:
                body = exc.read()
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise ClockServiceError(f"calling clock service: {exc}") from exc

        try:
            moment = _decode(body)
        except ValueError as exc:
            raise ClockServiceError(f"decoding clock response: {exc}") from exc
        return GetServerTimeResponse(time=moment)