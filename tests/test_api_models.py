import pytest

from api.requests import ConstraintModel, QueryToLinkRequest, RuleRequest, SearchRequest
from config import settings
from correlate.search import SearchType
from pydantic import ValidationError


def test_query_to_link_request_requires_query():
    req = QueryToLinkRequest(query="k8s:Pod.v1:{}")
    assert req.alert_ids == {}
    with pytest.raises(ValidationError):
        QueryToLinkRequest()


def test_search_request_depth_bounds(monkeypatch):
    assert SearchRequest(query="a:b:c", depth=10).depth == 10
    with pytest.raises(ValidationError):
        SearchRequest(query="a:b:c", depth=0)

    deep = SearchRequest(query="a:b:c", depth=50).to_search()
    assert deep.effective_depth == settings.max_depth
    monkeypatch.setattr(settings, "max_depth", 50)
    assert deep.effective_depth == 50


def test_search_request_to_search():
    req = SearchRequest(
        query="a:b:c",
        search_type="goal",
        goal="x:y",
        constraint=ConstraintModel(limit=5, timeout="1000"),
    )
    search = req.to_search()
    assert search.search_type == SearchType.goal
    assert search.goal == "x:y"
    assert search.constraint.limit == 5
    assert search.constraint.timeout_ns == 1000


def test_constraint_model_rejects_negative_limit():
    with pytest.raises(ValidationError):
        ConstraintModel(limit=-1)


def test_rule_request_count_non_negative():
    with pytest.raises(ValidationError):
        RuleRequest(graph={}, query="a:b:c", count=-1)
