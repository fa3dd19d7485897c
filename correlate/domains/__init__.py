"""
Console domain package exports.

One ``Domain`` per signal type the console can display: alerts, Kubernetes
objects, logs, metrics and network flows.
"""

from __future__ import annotations

from typing import Mapping, Optional

from correlate.domain import Domains
from correlate.domains.alert import AlertDomain
from correlate.domains.k8s import K8sDomain
from correlate.domains.log import LogClass, LogDomain
from correlate.domains.metric import MetricDomain
from correlate.domains.netflow import NetflowDomain


def default_domains(alert_ids: Optional[Mapping[str, str]] = None) -> Domains:
    """Registry of every console domain; ``alert_ids`` maps alert rule ids to alert names."""
    return Domains(
        AlertDomain(alert_ids),
        K8sDomain(),
        LogDomain(),
        MetricDomain(),
        NetflowDomain(),
    )


__all__ = [
    "AlertDomain",
    "K8sDomain",
    "LogClass",
    "LogDomain",
    "MetricDomain",
    "NetflowDomain",
    "default_domains",
]
