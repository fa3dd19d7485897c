"""
Kubernetes object domain: classes are ``Kind.version[.group]``, selectors are JSON ``{"namespace", "name"}``,
links are console resource pages under ``k8s/``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from correlate.constraint import Constraint
from correlate.domain import Domain
from correlate.domains.selectors import dump_json, load_json_object
from correlate.exceptions import InvalidClass
from correlate.query import Class, Query
from correlate.uri import URIRef, join_path

# (kind, version, group) for plural resource names the console uses in paths
PLURALS: Dict[str, Tuple[str, str, str]] = {
    "pods": ("Pod", "v1", ""),
    "services": ("Service", "v1", ""),
    "configmaps": ("ConfigMap", "v1", ""),
    "secrets": ("Secret", "v1", ""),
    "events": ("Event", "v1", ""),
    "nodes": ("Node", "v1", ""),
    "namespaces": ("Namespace", "v1", ""),
    "serviceaccounts": ("ServiceAccount", "v1", ""),
    "persistentvolumes": ("PersistentVolume", "v1", ""),
    "persistentvolumeclaims": ("PersistentVolumeClaim", "v1", ""),
    "deployments": ("Deployment", "v1", "apps"),
    "statefulsets": ("StatefulSet", "v1", "apps"),
    "daemonsets": ("DaemonSet", "v1", "apps"),
    "replicasets": ("ReplicaSet", "v1", "apps"),
    "jobs": ("Job", "v1", "batch"),
    "cronjobs": ("CronJob", "v1", "batch"),
    "routes": ("Route", "v1", "route.openshift.io"),
}

CLUSTER_SCOPED = frozenset({
    "Node",
    "Namespace",
    "PersistentVolume",
    "ClusterRole",
    "ClusterRoleBinding",
    "StorageClass",
    "CustomResourceDefinition",
})

_CLASS_RE = re.compile(r"^([A-Z][A-Za-z0-9]*)\.(v[0-9][a-z0-9]*)(?:\.([a-z0-9.-]*))?$")
_LINK_RE = re.compile(
    r"^k8s/(?:ns/(?P<namespace>[^/]+)|cluster|all-namespaces)"
    r"/(?P<resource>[^/]+)(?:/(?P<name>[^/]+))?/?$"
)


def _split_class(name: str) -> Optional[Tuple[str, str, str]]:
    m = _CLASS_RE.match(name)
    if not m:
        return None
    kind, version, group = m.groups()
    return kind, version, group or ""


def _class_name(kind: str, version: str, group: str) -> str:
    return f"{kind}.{version}.{group}" if group else f"{kind}.{version}"


def _resource(kind: str, version: str, group: str) -> str:
    return f"{group or 'core'}~{version}~{kind}"


def _parse_resource(resource: str) -> Optional[Tuple[str, str, str]]:
    if "~" not in resource:
        return PLURALS.get(resource)
    parts = resource.split("~")
    if len(parts) != 3 or not all(parts):
        return None
    group, version, kind = parts
    return kind, version, "" if group == "core" else group


class K8sDomain(Domain):
    name = "k8s"

    def class_(self, name: str) -> Class:
        if _split_class(name or "") is None:
            raise InvalidClass(f"invalid class for domain {self.name}: {name}")
        return Class(self.name, name)

    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef:
        self.check_query(query)
        gvk = _split_class(query.class_.name)
        if gvk is None:
            raise self.bad_query(query)
        try:
            selector = load_json_object(query.selector)
        except ValueError as e:
            raise self.bad_query(query) from e

        kind = gvk[0]
        namespace = selector.get("namespace")
        name = selector.get("name")
        if namespace:
            path = join_path("k8s", "ns", str(namespace), _resource(*gvk))
        elif kind in CLUSTER_SCOPED:
            path = join_path("k8s", "cluster", _resource(*gvk))
        else:
            path = join_path("k8s", "all-namespaces", _resource(*gvk))
        if name:
            path = join_path(path, str(name))
        return URIRef(path)

    def link_to_query(self, link: URIRef) -> Query:
        m = _LINK_RE.match(link.path.lstrip("/"))
        if not m:
            raise self.bad_link(link)
        gvk = _parse_resource(m.group("resource"))
        if gvk is None:
            raise self.bad_link(link)

        selector: Dict[str, str] = {}
        if m.group("namespace"):
            selector["namespace"] = m.group("namespace")
        if m.group("name"):
            selector["name"] = m.group("name")
        return Class(self.name, _class_name(*gvk)).query(dump_json(selector))
