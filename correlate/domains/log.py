"""
Log domain: LogQL selectors over the application, infrastructure and audit tenants.

There are two kinds of console link: the log search page, which carries the
LogQL and the tenant in its parameters, and the aggregated logs tab of a pod.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Optional

from correlate.constraint import Constraint, epoch_millis
from correlate.domain import Domain
from correlate.domains.selectors import format_matchers
from correlate.exceptions import InvalidClass
from correlate.query import Class, Query
from correlate.uri import URIRef

SEARCH_PATH = "monitoring/logs"

_AGGREGATED_RE = re.compile(r"^k8s/ns/([^/]+)/pods/([^/]+)/aggregated-logs/?$")
_LOG_TYPE_RE = re.compile(r'{[^}]*log_type=~?"([^"]+)"')
_INFRA_NAMESPACE_RE = re.compile(r"^kube|^openshift-")


class LogClass(str, Enum):
    application = "application"
    infrastructure = "infrastructure"
    audit = "audit"

    @classmethod
    def for_namespace(cls, namespace: str) -> LogClass:
        if _INFRA_NAMESPACE_RE.match(namespace):
            return cls.infrastructure
        return cls.application


class LogDomain(Domain):
    name = "log"
    prefixes = ("monitoring", "k8s")

    def class_(self, name: str) -> Class:
        if name not in LogClass._value2member_map_:
            raise InvalidClass(f"invalid class for domain {self.name}: {name}")
        return Class(self.name, name)

    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef:
        self.check_query(query)
        if query.class_.name not in LogClass._value2member_map_ or not query.selector:
            raise self.bad_query(query)

        params: Dict[str, Any] = {"q": query.selector, "tenant": query.class_.name}
        if constraint is not None:
            if constraint.start is not None:
                params["start"] = epoch_millis(constraint.start)
            if constraint.end is not None:
                params["end"] = epoch_millis(constraint.end)
        return URIRef(SEARCH_PATH, params)

    def link_to_query(self, link: URIRef) -> Query:
        path = link.path.strip("/")

        m = _AGGREGATED_RE.match(path)
        if m:
            namespace, pod = m.groups()
            selector = format_matchers([
                ("kubernetes_namespace_name", namespace),
                ("kubernetes_pod_name", pod),
            ])
            return Class(self.name, LogClass.for_namespace(namespace).value).query(selector)

        if path != SEARCH_PATH:
            raise self.bad_link(link)
        logql = link.search_params.get("q")
        if not logql:
            raise self.bad_link(link)
        tenant = link.search_params.get("tenant")
        if not tenant:
            found = _LOG_TYPE_RE.search(logql)
            tenant = found.group(1) if found else None
        if tenant not in LogClass._value2member_map_:
            raise self.bad_link(link)
        return Class(self.name, tenant).query(logql)
