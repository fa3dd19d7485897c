"""
Alert domain: selectors are JSON label sets, links are the console alert list or a single alert/rule page.

Single-alert pages are addressed by an opaque rule id, so the domain is built
with the current id to alert name mapping.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional

from correlate.constraint import Constraint
from correlate.domain import Domain
from correlate.domains.selectors import dump_json, load_json_object
from correlate.exceptions import InvalidClass
from correlate.query import Class, Query
from correlate.uri import URIRef

ALERTS_PATH = "monitoring/alerts"
ALERT_CLASS = "alert"

_DETAIL_RE = re.compile(r"^monitoring/(?:alerts|alertrules)/([^/]+)/?$")


def _plain(s: str) -> bool:
    # the alerts parameter is a comma separated list of key=value pairs
    return "," not in s and "=" not in s


class AlertDomain(Domain):
    name = "alert"
    prefixes = ("monitoring",)

    def __init__(self, alert_ids: Optional[Mapping[str, str]] = None) -> None:
        super().__init__()
        self.alert_ids: Dict[str, str] = dict(alert_ids or {})

    def class_(self, name: str) -> Class:
        if name != ALERT_CLASS:
            raise InvalidClass(f"invalid class for domain {self.name}: {name}")
        return Class(self.name, name)

    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef:
        self.check_query(query)
        if query.class_.name != ALERT_CLASS:
            raise self.bad_query(query)
        try:
            labels = load_json_object(query.selector)
        except ValueError as e:
            raise self.bad_query(query) from e
        if not all(k and _plain(k) and isinstance(v, str) and _plain(v) for k, v in labels.items()):
            raise self.bad_query(query)
        if not labels:
            return URIRef(ALERTS_PATH)
        return URIRef(ALERTS_PATH, {"alerts": ",".join(f"{k}={v}" for k, v in labels.items())})

    def link_to_query(self, link: URIRef) -> Query:
        path = link.path.strip("/")

        m = _DETAIL_RE.match(path)
        if m:
            alertname = self.alert_ids.get(m.group(1))
            if alertname is None:
                raise self.bad_link(link)
            return Class(self.name, ALERT_CLASS).query(dump_json({"alertname": alertname}))

        if path != ALERTS_PATH:
            raise self.bad_link(link)
        labels: Dict[str, str] = {}
        for item in filter(None, (link.search_params.get("alerts") or "").split(",")):
            key, sep, value = item.partition("=")
            if not sep or not key:
                raise self.bad_link(link)
            labels[key] = value
        return Class(self.name, ALERT_CLASS).query(dump_json(labels))
