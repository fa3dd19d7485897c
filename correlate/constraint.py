"""
Time window and result limits applied to a correlation search, with a lossless wire mapping.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from correlate.exceptions import InvalidConstraint


def _utc(dt: datetime) -> datetime:
    # naive datetimes are taken to be UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _to_millis(dt: datetime) -> datetime:
    # the wire carries millisecond precision
    return _utc(dt).replace(microsecond=dt.microsecond // 1000 * 1000)


def format_time(dt: datetime) -> str:
    text = _utc(dt).astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_time(field: str, value: Any) -> datetime:
    try:
        return _utc(datetime.fromisoformat(str(value).replace("Z", "+00:00")))
    except ValueError as e:
        raise InvalidConstraint(f"invalid constraint {field}: {value}") from e


def epoch_millis(dt: datetime) -> int:
    return int(_utc(dt).timestamp() * 1000)


@dataclass(frozen=True)
class Constraint:
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    limit: Optional[int] = None
    timeout_ns: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _to_millis(value))

    @classmethod
    def from_api(cls, wire: Optional[Dict[str, Any]]) -> Constraint:
        wire = wire or {}
        start = parse_time("start", wire["start"]) if wire.get("start") is not None else None
        end = parse_time("end", wire["end"]) if wire.get("end") is not None else None

        limit: Optional[int] = None
        if wire.get("limit") is not None:
            try:
                limit = int(wire["limit"])
            except (TypeError, ValueError) as e:
                raise InvalidConstraint(f"invalid constraint limit: {wire['limit']}") from e

        timeout_ns: Optional[int] = None
        if wire.get("timeout") is not None:
            try:
                timeout_ns = int(str(wire["timeout"]))
            except ValueError as e:
                raise InvalidConstraint(f"invalid constraint timeout: {wire['timeout']}") from e

        return cls(start=start, end=end, limit=limit, timeout_ns=timeout_ns)

    def to_api(self) -> Dict[str, Any]:
        wire: Dict[str, Any] = {}
        if self.start is not None:
            wire["start"] = format_time(self.start)
        if self.end is not None:
            wire["end"] = format_time(self.end)
        if self.limit is not None:
            wire["limit"] = self.limit
        if self.timeout_ns is not None:
            wire["timeout"] = str(self.timeout_ns)
        return wire
