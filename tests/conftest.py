import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def reset_connector():
    """Drop the cached korrel8r connector so each test builds its own."""
    import api.routes.common as common

    common._connector = None
    yield
    common._connector = None


@pytest.fixture
def rules_graph():
    return {
        "nodes": [
            {"class": "k8s:Pod.v1", "count": 3, "queries": []},
            {"class": "log:application", "count": 5, "queries": []},
            {"class": "metric:metric", "count": 2, "queries": []},
        ],
        "edges": [
            {
                "start": "k8s:Pod.v1",
                "goal": "log:application",
                "rules": [
                    {
                        "name": "PodToLog",
                        "queries": [
                            {"query": "log:application:{name=test-pod}", "count": 3},
                            {"query": "log:application:{namespace=default}", "count": 1},
                        ],
                    }
                ],
            },
            {
                "start": "k8s:Pod.v1",
                "goal": "metric:metric",
                "rules": [
                    {"name": "PodToMetric", "queries": [{"query": "metric:metric:instance=pod1", "count": 2}]},
                    {"name": "AlternativeRule", "queries": [{"query": "metric:metric:job=monitoring", "count": 1}]},
                ],
            },
        ],
    }
