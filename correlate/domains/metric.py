"""
Metric domain: PromQL selectors linked to the console query browser.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from correlate.constraint import Constraint, epoch_millis
from correlate.domain import Domain
from correlate.exceptions import InvalidClass
from correlate.query import Class, Query
from correlate.uri import URIRef

QUERY_BROWSER_PATH = "monitoring/query-browser"
METRIC_CLASS = "metric"


class MetricDomain(Domain):
    name = "metric"
    prefixes = ("monitoring",)

    def class_(self, name: str) -> Class:
        if name != METRIC_CLASS:
            raise InvalidClass(f"invalid class for domain {self.name}: {name}")
        return Class(self.name, name)

    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef:
        self.check_query(query)
        if query.class_.name != METRIC_CLASS or not query.selector:
            raise self.bad_query(query)

        params: Dict[str, Any] = {"query0": query.selector}
        if constraint is not None and constraint.end is not None:
            end = epoch_millis(constraint.end)
            params["endTime"] = end
            if constraint.start is not None:
                params["timeRange"] = end - epoch_millis(constraint.start)
        return URIRef(QUERY_BROWSER_PATH, params)

    def link_to_query(self, link: URIRef) -> Query:
        if link.path.strip("/") != QUERY_BROWSER_PATH:
            raise self.bad_link(link)
        promql = link.search_params.get("query0")
        if not promql:
            raise self.bad_link(link)
        return Class(self.name, METRIC_CLASS).query(promql)
