"""
URI references: a path, ordered query parameters and a fragment that re-serialize to the parsed string.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

import httpx

_ORIGIN_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://[^/?#]*")


def join_path(first: str, *rest: str) -> str:
    return first.rstrip("/") + "".join("/" + part.strip("/") for part in rest)


class SearchParams:
    """Ordered multimap of query parameters; duplicate keys are kept."""

    def __init__(self, pairs: Optional[List[Tuple[str, str]]] = None) -> None:
        self._pairs: List[Tuple[str, str]] = list(pairs or [])

    @classmethod
    def parse(cls, query: str) -> SearchParams:
        return cls(parse_qsl(query, keep_blank_values=True))

    def get(self, key: str) -> Optional[str]:
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def get_all(self, key: str) -> List[str]:
        return [v for k, v in self._pairs if k == key]

    def append(self, key: str, value: str) -> None:
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        out: List[Tuple[str, str]] = []
        found = False
        for k, v in self._pairs:
            if k != key:
                out.append((k, v))
            elif not found:
                out.append((key, value))
                found = True
        if not found:
            out.append((key, value))
        self._pairs = out

    def delete(self, key: str) -> None:
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def items(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def keys(self) -> List[str]:
        return [k for k, _ in self._pairs]

    def to_dict(self) -> Dict[str, str]:
        # last value wins for duplicate keys
        return dict(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __str__(self) -> str:
        return urlencode(self._pairs)

    def __repr__(self) -> str:
        return f"SearchParams({self._pairs!r})"


class URIRef:
    def __init__(self, uri: str = "", params: Optional[Mapping[str, Any]] = None) -> None:
        rest, sep, fragment = (uri or "").partition("#")
        self.hash = f"#{fragment}" if sep else ""
        self.pathname, _, query = rest.partition("?")
        self.search_params = SearchParams.parse(query)
        for key, value in (params or {}).items():
            if value is not None:
                self.search_params.set(key, str(value))

    @property
    def origin(self) -> str:
        m = _ORIGIN_RE.match(self.pathname)
        return m.group(0) if m else ""

    @property
    def path(self) -> str:
        """Pathname without any ``scheme://host`` prefix."""
        return self.pathname[len(self.origin):]

    def segments(self) -> List[str]:
        return [s for s in self.path.split("/") if s]

    def resolve(self, base: str) -> URIRef:
        base_url = httpx.URL(base)
        if not self.origin and not self.pathname.startswith("/") and not base_url.path.endswith("/"):
            base_url = base_url.copy_with(path=base_url.path + "/")
        return URIRef(str(base_url.join(str(self))))

    def __str__(self) -> str:
        query = str(self.search_params)
        return self.pathname + (f"?{query}" if query else "") + self.hash

    def __repr__(self) -> str:
        return f"URIRef({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URIRef):
            return NotImplemented
        return str(self) == str(other)
