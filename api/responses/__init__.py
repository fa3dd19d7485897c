"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from correlate.search import Result


class LinkResponse(BaseModel):
    link: str


class QueryResponse(BaseModel):
    query: str


class SearchResponse(BaseModel):
    graph: Optional[Dict[str, Any]] = None
    title: Optional[str] = None
    message: Optional[str] = None
    is_error: bool = False

    @classmethod
    def from_result(cls, result: Result) -> SearchResponse:
        return cls(
            graph=result.graph.to_api() if result.graph is not None else None,
            title=result.title,
            message=result.message,
            is_error=result.is_error,
        )


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)


class RuleResponse(BaseModel):
    rule: Optional[Dict[str, Any]] = None
