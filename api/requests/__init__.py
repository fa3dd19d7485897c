from __future__ import annotations

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from correlate.constraint import Constraint
from correlate.search import Search, SearchType


class ConstraintModel(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=0)
    timeout: Optional[str] = None

    def to_constraint(self) -> Constraint:
        return Constraint.from_api(self.model_dump(exclude_none=True))


class QueryToLinkRequest(BaseModel):
    query: str
    constraint: Optional[ConstraintModel] = None
    alert_ids: Dict[str, str] = Field(default_factory=dict)


class LinkToQueryRequest(BaseModel):
    link: str
    alert_ids: Dict[str, str] = Field(default_factory=dict)


class SearchRequest(BaseModel):
    query: str = ""
    search_type: SearchType = SearchType.depth
    # clamped to the configured depth range by Search.effective_depth
    depth: Optional[int] = Field(default=None, ge=1)
    goal: Optional[str] = None
    constraint: Optional[ConstraintModel] = None
    alert_ids: Dict[str, str] = Field(default_factory=dict)

    def to_search(self) -> Search:
        return Search(
            query_str=self.query,
            search_type=self.search_type,
            depth=self.depth,
            goal=self.goal,
            constraint=self.constraint.to_constraint() if self.constraint else None,
        )


class RuleRequest(BaseModel):
    graph: Dict[str, Any]
    query: str
    count: int = Field(ge=0)
