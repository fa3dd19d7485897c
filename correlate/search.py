"""
Search parameters for a correlation request and the result shown for it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from config import settings
from correlate.constraint import Constraint
from correlate.domain import Domains
from correlate.exceptions import CorrelationError
from correlate.graph import Graph
from correlate.query import Query


class SearchType(str, Enum):
    depth = "depth"
    goal = "goal"


@dataclass(frozen=True)
class Search:
    query_str: str = ""
    search_type: SearchType = SearchType.depth
    depth: Optional[int] = None
    goal: Optional[str] = None
    constraint: Optional[Constraint] = None

    @property
    def effective_depth(self) -> int:
        depth = self.depth if self.depth is not None else settings.default_depth
        return max(settings.min_depth, min(settings.max_depth, depth))

    def focus(self, query: Query) -> Search:
        """A default depth search on ``query`` that keeps this search's time constraint."""
        return Search(query_str=str(query), constraint=self.constraint)

    def with_constraint(self, constraint: Optional[Constraint]) -> Search:
        return replace(self, constraint=constraint)

    def to_request(self) -> Dict[str, Any]:
        start: Dict[str, Any] = {}
        query_str = (self.query_str or "").strip()
        if query_str:
            start["queries"] = [query_str]
        if self.constraint is not None:
            start["constraint"] = self.constraint.to_api()

        if self.search_type == SearchType.goal:
            return {"start": start, "goals": [(self.goal or "").strip()]}
        return {"start": start, "depth": self.effective_depth}

    def validate(self, domains: Domains) -> List[str]:
        errors: List[str] = []
        try:
            domains.query_to_link(Query.parse((self.query_str or "").strip()))
        except CorrelationError as exc:
            errors.append(str(exc))
        if self.search_type == SearchType.goal:
            try:
                domains.class_((self.goal or "").strip())
            except CorrelationError as exc:
                errors.append(str(exc))
        return errors


@dataclass
class Result:
    graph: Optional[Graph] = None
    title: Optional[str] = None
    message: Optional[str] = None
    is_error: bool = False

    @classmethod
    def failure(cls, title: str, message: str) -> Result:
        return cls(title=title, message=message[: settings.message_limit], is_error=True)

    @property
    def is_empty(self) -> bool:
        return not self.is_error and (self.graph is None or not self.graph.nodes)
