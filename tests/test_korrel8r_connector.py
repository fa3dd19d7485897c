import pytest

import connectors.korrel8r as korrel8r_mod
from config import Settings
from connectors.korrel8r import GRAPH_PARAMS, Korrel8rConnector
from correlate.search import Search, SearchType


@pytest.fixture
def recorded(monkeypatch):
    calls = []

    async def fake_post_json(url, body, params=None, headers=None, timeout=30, **kwargs):
        calls.append({"url": url, "body": body, "params": params, "headers": headers, "timeout": timeout})
        return {"nodes": [{"class": "log:application", "count": 2}], "edges": []}

    async def fake_fetch_json(url, params=None, headers=None, timeout=30, **kwargs):
        calls.append({"url": url, "headers": headers, "timeout": timeout})
        return [{"name": "k8s"}, {"name": "log"}]

    monkeypatch.setattr(korrel8r_mod, "post_json", fake_post_json)
    monkeypatch.setattr(korrel8r_mod, "fetch_json", fake_fetch_json)
    return calls


def test_urls():
    c = Korrel8rConnector("http://korrel8r:8080/", timeout=5)
    assert c.base_url == "http://korrel8r:8080"
    assert c.health_url == "http://korrel8r:8080/api/v1alpha1/domains"


def test_from_settings():
    c = Korrel8rConnector.from_settings(Settings(korrel8r_url="http://k:1", korrel8r_timeout=7))
    assert c.base_url == "http://k:1"
    assert c.timeout == 7


@pytest.mark.asyncio
async def test_neighbours_search(recorded):
    c = Korrel8rConnector("http://k", timeout=5, headers={"Authorization": "Bearer t"})
    graph = await c.graph(Search(query_str="k8s:Pod.v1:{}", depth=2))
    assert graph.node("log:application").count == 2
    [call] = recorded
    assert call["url"] == "http://k/api/v1alpha1/graphs/neighbours"
    assert call["body"] == {"start": {"queries": ["k8s:Pod.v1:{}"]}, "depth": 2}
    assert call["params"] == GRAPH_PARAMS
    assert call["headers"] == {"Authorization": "Bearer t"}
    assert call["timeout"] == 5


@pytest.mark.asyncio
async def test_goals_search(recorded):
    c = Korrel8rConnector("http://k")
    await c.graph(Search(query_str="k8s:Pod.v1:{}", search_type=SearchType.goal, goal="log:application"))
    [call] = recorded
    assert call["url"] == "http://k/api/v1alpha1/graphs/goals"
    assert call["body"]["goals"] == ["log:application"]


@pytest.mark.asyncio
async def test_list_domains(recorded):
    domains = await Korrel8rConnector("http://k").list_domains()
    assert [d["name"] for d in domains] == ["k8s", "log"]
    assert recorded[0]["url"] == "http://k/api/v1alpha1/domains"
