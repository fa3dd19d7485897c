"""
Correlation graph: classes as nodes, rule relationships as edges, and lookup of the rule that produced a query.

Construction from API data degrades instead of failing: a node whose class
does not parse becomes an ``ErrorNode`` carrying the parse error, a query
that does not parse is kept as a ``QueryCount`` with its error, and an edge
whose endpoint is not among the nodes is dropped. Only data that is not a
graph object at all raises ``InvalidGraph``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from correlate.exceptions import InvalidClass, InvalidGraph, InvalidQuery
from correlate.query import Class, Query

log = logging.getLogger(__name__)


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _same_error(a: Optional[Exception], b: Optional[Exception]) -> bool:
    if a is None or b is None:
        return False
    return type(a) is type(b) and a.args == b.args


class QueryCount:
    def __init__(self, query: str, count: int) -> None:
        self.raw = "" if query is None else str(query)
        self.count = count
        self.query: Optional[Query] = None
        self.error: Optional[InvalidQuery] = None
        try:
            self.query = Query.parse(self.raw)
        except InvalidQuery as exc:
            self.error = exc

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> QueryCount:
        if not isinstance(raw, Mapping):
            return cls(raw, 0)
        return cls(raw.get("query"), raw.get("count", 0))

    def to_api(self) -> Dict[str, Any]:
        return {"query": str(self.query) if self.query is not None else self.raw, "count": self.count}

    def equals(self, other: QueryCount) -> bool:
        if not isinstance(other, QueryCount):
            raise TypeError(f"cannot compare QueryCount with {other!r}")
        if self.count != other.count:
            return False
        if self.error is not None or other.error is not None:
            return _same_error(self.error, other.error)
        return str(self.query) == str(other.query)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryCount):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        if self.error is not None:
            return f"QueryCount(error={self.error!r}, count={self.count})"
        return f"QueryCount(query={str(self.query)!r}, count={self.count})"


@dataclass
class Node:
    id: str
    count: int

    @staticmethod
    def from_api(raw: Mapping[str, Any]) -> Node:
        if not isinstance(raw, Mapping):
            return ErrorNode(id=str(raw), count=0, error=InvalidClass(f"invalid class: {raw}"))
        node_id = str(raw.get("class") or "")
        count = raw.get("count", 0)
        try:
            cls = Class.parse(node_id)
        except InvalidClass as exc:
            return ErrorNode(id=node_id, count=count, error=exc)
        queries = [QueryCount.from_api(q) for q in _list(raw.get("queries"))]
        return ClassNode(id=node_id, count=count, class_=cls, queries=queries)

    def to_api(self) -> Dict[str, Any]:
        return {"class": self.id, "count": self.count, "queries": []}


@dataclass
class ClassNode(Node):
    class_: Class
    queries: List[QueryCount] = field(default_factory=list)

    def to_api(self) -> Dict[str, Any]:
        return {"class": self.id, "count": self.count, "queries": [q.to_api() for q in self.queries]}


@dataclass(eq=False)
class ErrorNode(Node):
    error: Exception
    queries: List[QueryCount] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorNode):
            return NotImplemented
        return (
            self.id == other.id
            and self.count == other.count
            and self.queries == other.queries
            and _same_error(self.error, other.error)
        )


@dataclass
class Rule:
    name: str
    queries: List[QueryCount] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Rule:
        if not isinstance(raw, Mapping):
            return cls(name="")
        return cls(name=str(raw.get("name") or ""), queries=[QueryCount.from_api(q) for q in _list(raw.get("queries"))])

    def to_api(self) -> Dict[str, Any]:
        return {"name": self.name, "queries": [q.to_api() for q in self.queries]}


@dataclass
class Edge:
    start: Node
    goal: Node
    rules: List[Rule] = field(default_factory=list)

    def to_api(self) -> Dict[str, Any]:
        wire: Dict[str, Any] = {"start": self.start.id, "goal": self.goal.id}
        if self.rules:
            wire["rules"] = [r.to_api() for r in self.rules]
        return wire


class Graph:
    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()) -> None:
        self._nodes: Dict[str, Node] = {}
        for node in nodes:
            self._nodes[node.id] = node
        self.edges: List[Edge] = list(edges)

    @classmethod
    def from_api(cls, raw: Optional[Mapping[str, Any]]) -> Graph:
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise InvalidGraph(f"invalid graph: expected an object, got {type(raw).__name__}")
        nodes, edges = raw.get("nodes") or [], raw.get("edges") or []
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise InvalidGraph("invalid graph: nodes and edges must be lists")

        graph = cls(Node.from_api(n) for n in nodes)
        for e in edges:
            if not isinstance(e, Mapping):
                log.warning("dropping malformed edge %r", e)
                continue
            start, goal = graph.node(str(e.get("start", ""))), graph.node(str(e.get("goal", "")))
            if start is None or goal is None:
                log.warning("dropping edge %s -> %s: endpoint not in graph", e.get("start"), e.get("goal"))
                continue
            graph.edges.append(Edge(start, goal, [Rule.from_api(r) for r in _list(e.get("rules"))]))
        return graph

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def find_rule(self, query_count: QueryCount) -> Optional[Rule]:
        if query_count.error is not None or query_count.query is None:
            return None
        goal_id = str(query_count.query.class_)
        if self.node(goal_id) is None:
            return None

        for edge in self.edges:
            if edge.goal.id != goal_id:
                continue
            for rule in edge.rules:
                for qc in rule.queries:
                    if qc.equals(query_count):
                        return rule
        return None

    def to_api(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_api() for n in self.nodes],
            "edges": [e.to_api() for e in self.edges],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.nodes == other.nodes and self.edges == other.edges

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self.edges)})"
