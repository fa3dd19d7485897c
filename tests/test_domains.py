"""
Tests for the concrete console domains and the default registry routing between them.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timezone

import pytest

from correlate.constraint import Constraint
from correlate.domains import (
    AlertDomain,
    K8sDomain,
    LogClass,
    LogDomain,
    MetricDomain,
    NetflowDomain,
    default_domains,
)
from correlate.exceptions import BadLink, BadQuery, InvalidClass, UnknownDomain
from correlate.query import Class, Query
from correlate.uri import URIRef

T0 = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 1, 0, 1, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("query,link", [
    ('k8s:Pod.v1:{"namespace":"x","name":"y"}', "k8s/ns/x/core~v1~Pod/y"),
    ('k8s:Deployment.v1.apps:{"namespace":"ns"}', "k8s/ns/ns/apps~v1~Deployment"),
    ('k8s:Node.v1:{"name":"n1"}', "k8s/cluster/core~v1~Node/n1"),
    ("k8s:Pod.v1:{}", "k8s/all-namespaces/core~v1~Pod"),
])
def test_k8s_query_to_link_and_back(query, link):
    d = K8sDomain()
    q = Query.parse(query)
    assert str(d.query_to_link(q)) == link
    assert d.link_to_query(URIRef(link)) == q


def test_k8s_console_plural_links():
    d = K8sDomain()
    assert d.link_to_query(URIRef("/k8s/ns/default/pods/web-1")) == Query.parse(
        'k8s:Pod.v1:{"namespace":"default","name":"web-1"}'
    )
    assert d.link_to_query(URIRef("k8s/ns/default/deployments")) == Query.parse(
        'k8s:Deployment.v1.apps:{"namespace":"default"}'
    )


def test_k8s_errors():
    d = K8sDomain()
    with pytest.raises(BadQuery):
        d.query_to_link(Query.parse("k8s:Pod.v1:notjson"))
    with pytest.raises(BadQuery):
        d.query_to_link(Query.parse("k8s:pod:{}"))
    with pytest.raises(BadLink):
        d.link_to_query(URIRef("k8s/ns/x/unknowns"))
    with pytest.raises(BadLink):
        d.link_to_query(URIRef("k8s/ns/x/pods/y/aggregated-logs"))
    with pytest.raises(InvalidClass):
        d.class_("pod")
    assert d.class_("Route.v1.route.openshift.io") == Class("k8s", "Route.v1.route.openshift.io")


def test_log_query_to_link_and_back():
    d = LogDomain()
    q = Query.parse('log:application:{kubernetes_namespace_name="ns"}')
    link = d.query_to_link(q)
    assert link.path == "monitoring/logs"
    assert link.search_params.get("q") == '{kubernetes_namespace_name="ns"}'
    assert link.search_params.get("tenant") == "application"
    assert d.link_to_query(URIRef(str(link))) == q


def test_log_constraint_adds_millisecond_range():
    link = LogDomain().query_to_link(
        Query.parse('log:audit:{log_type="audit"}'), Constraint(start=T0, end=T1)
    )
    assert link.search_params.get("start") == str(int(T0.timestamp() * 1000))
    assert link.search_params.get("end") == str(int(T1.timestamp() * 1000))


def test_log_tenant_from_log_type():
    link = URIRef("monitoring/logs", {"q": '{log_type="infrastructure"} |= "error"'})
    q = LogDomain().link_to_query(link)
    assert q.class_ == Class("log", "infrastructure")
    with pytest.raises(BadLink):
        LogDomain().link_to_query(URIRef("monitoring/logs", {"q": '{app="x"}'}))
    with pytest.raises(BadLink):
        LogDomain().link_to_query(URIRef("monitoring/logs"))


@pytest.mark.parametrize("namespace,tenant", [
    ("default", "application"),
    ("openshift-monitoring", "infrastructure"),
    ("kube-system", "infrastructure"),
])
def test_log_aggregated_pod_logs(namespace, tenant):
    link = URIRef(f"k8s/ns/{namespace}/pods/web-1/aggregated-logs")
    q = LogDomain().link_to_query(link)
    assert q.class_ == Class("log", tenant)
    assert q.selector == f'{{kubernetes_namespace_name="{namespace}",kubernetes_pod_name="web-1"}}'
    assert LogClass.for_namespace(namespace).value == tenant


def test_metric_query_to_link_and_back():
    d = MetricDomain()
    q = Query.parse("metric:metric:rate(http_requests_total[5m])")
    link = d.query_to_link(q, Constraint(start=T0, end=T1))
    assert link.path == "monitoring/query-browser"
    assert link.search_params.get("query0") == "rate(http_requests_total[5m])"
    assert link.search_params.get("timeRange") == "60000"
    assert link.search_params.get("endTime") == str(int(T1.timestamp() * 1000))
    assert d.link_to_query(URIRef(str(link))) == q
    with pytest.raises(BadQuery):
        d.query_to_link(Query.parse("metric:metric:"))
    with pytest.raises(BadLink):
        d.link_to_query(URIRef("monitoring/query-browser"))


def test_alert_query_to_link_and_back():
    d = AlertDomain()
    q = Query.parse('alert:alert:{"alertname":"KubePodCrashLooping","namespace":"ns"}')
    link = d.query_to_link(q)
    assert link.search_params.get("alerts") == "alertname=KubePodCrashLooping,namespace=ns"
    assert d.link_to_query(URIRef(str(link))) == q
    assert str(d.query_to_link(Query.parse("alert:alert:{}"))) == "monitoring/alerts"
    assert d.link_to_query(URIRef("monitoring/alerts")) == Query.parse("alert:alert:{}")


def test_alert_detail_links_use_alert_ids():
    d = AlertDomain({"1234": "Watchdog"})
    want = Query.parse('alert:alert:{"alertname":"Watchdog"}')
    assert d.link_to_query(URIRef("monitoring/alertrules/1234")) == want
    assert d.link_to_query(URIRef("/monitoring/alerts/1234")) == want
    with pytest.raises(BadLink):
        d.link_to_query(URIRef("monitoring/alertrules/9999"))


def test_netflow_query_to_link_and_back():
    d = NetflowDomain()
    q = Query.parse('netflow:network:{SrcK8S_Namespace="ns",DstK8S_Name="web"}')
    link = d.query_to_link(q, Constraint(start=T0, end=T1))
    assert link.path == "netflow-traffic"
    assert link.search_params.get("filters") == "SrcK8S_Namespace=ns;DstK8S_Name=web"
    assert link.search_params.get("startTime") == str(int(T0.timestamp()))
    assert link.search_params.get("endTime") == str(int(T1.timestamp()))
    assert d.link_to_query(URIRef(str(link))) == q
    with pytest.raises(BadQuery):
        d.query_to_link(Query.parse("netflow:network:SrcK8S_Namespace=ns"))


@pytest.mark.parametrize("link,domain", [
    ("monitoring/alerts?alerts=alertname%3DWatchdog", "alert"),
    ("monitoring/logs?q=%7Blog_type%3D%22audit%22%7D", "log"),
    ("monitoring/query-browser?query0=up", "metric"),
    ("netflow-traffic?filters=SrcK8S_Namespace%3Dns", "netflow"),
    ("k8s/ns/default/pods/web-1", "k8s"),
    ("k8s/ns/default/pods/web-1/aggregated-logs", "log"),
    ("https://console.example.com/monitoring/query-browser?query0=up", "metric"),
])
def test_default_domains_route_links(link, domain):
    assert default_domains().link_to_query(link).class_.domain == domain


def test_default_domains_errors():
    domains = default_domains()
    assert domains.names == ["alert", "k8s", "log", "metric", "netflow"]
    with pytest.raises(UnknownDomain):
        domains.link_to_query("dashboards/foo")
    # the last candidate's rejection is reported
    with pytest.raises(BadLink, match="domain metric"):
        domains.link_to_query("monitoring/dashboards")
    with pytest.raises(UnknownDomain):
        domains.query_to_link(Query.parse("trace:span:{}"))


@pytest.mark.parametrize("domain,query", [
    (LogDomain(), "log:application:"),
    (AlertDomain(), 'alert:alert:{"alertname":"A,B"}'),
    (AlertDomain(), 'alert:alert:{"alertname":"a=b"}'),
    (AlertDomain(), 'alert:alert:{"severity":1}'),
    (AlertDomain(), 'alert:alert:{"":"x"}'),
    (NetflowDomain(), 'netflow:network:{SrcK8S_Name="a;b"}'),
    (NetflowDomain(), 'netflow:network:{SrcK8S_Namespace!="ns"}'),
    (NetflowDomain(), 'netflow:network:{SrcK8S_Namespace="ns" junk}'),
    (NetflowDomain(), "netflow:network:{,}"),
])
def test_selectors_without_a_readable_link_are_rejected(domain, query):
    with pytest.raises(BadQuery):
        domain.query_to_link(Query.parse(query))


@pytest.mark.parametrize("domain,query", [
    (AlertDomain(), 'alert:alert:{"alertname":"Watchdog","severity":""}'),
    (NetflowDomain(), 'netflow:network:{SrcK8S_Name="a=b"}'),
    (NetflowDomain(), "netflow:network:{}"),
])
def test_edge_case_selectors_round_trip(domain, query):
    q = Query.parse(query)
    assert domain.link_to_query(URIRef(str(domain.query_to_link(q)))) == q
