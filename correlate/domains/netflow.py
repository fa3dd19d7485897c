"""
Network flow domain: ``{Key="value",...}`` selectors linked to the netflow traffic page filters.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from correlate.constraint import Constraint, epoch_millis
from correlate.domain import Domain
from correlate.domains.selectors import format_matchers, parse_matchers
from correlate.exceptions import InvalidClass
from correlate.query import Class, Query
from correlate.uri import URIRef

TRAFFIC_PATH = "netflow-traffic"
NETWORK_CLASS = "network"


class NetflowDomain(Domain):
    name = "netflow"
    prefixes = (TRAFFIC_PATH,)

    def class_(self, name: str) -> Class:
        if name != NETWORK_CLASS:
            raise InvalidClass(f"invalid class for domain {self.name}: {name}")
        return Class(self.name, name)

    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef:
        self.check_query(query)
        if query.class_.name != NETWORK_CLASS:
            raise self.bad_query(query)
        try:
            matchers = parse_matchers(query.selector)
        except ValueError as e:
            raise self.bad_query(query) from e
        if any(";" in v for _, v in matchers):
            raise self.bad_query(query)

        params: Dict[str, Any] = {"filters": ";".join(f"{k}={v}" for k, v in matchers)}
        if constraint is not None:
            if constraint.start is not None:
                params["startTime"] = epoch_millis(constraint.start) // 1000
            if constraint.end is not None:
                params["endTime"] = epoch_millis(constraint.end) // 1000
        return URIRef(TRAFFIC_PATH, params)

    def link_to_query(self, link: URIRef) -> Query:
        if link.path.strip("/") != TRAFFIC_PATH:
            raise self.bad_link(link)
        matchers: List[Tuple[str, str]] = []
        for item in filter(None, (link.search_params.get("filters") or "").split(";")):
            key, sep, value = item.partition("=")
            if not sep or not key:
                raise self.bad_link(link)
            matchers.append((key, value))
        return Class(self.name, NETWORK_CLASS).query(format_matchers(matchers))
