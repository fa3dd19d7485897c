"""
Shared utilities and dependencies for API route modules.

Provides the korrel8r connector and the domain registry used by the routers,
so that individual route files stay thin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Mapping, Optional

from config import settings
from connectors.korrel8r import Korrel8rConnector
from correlate.domain import Domains
from correlate.domains import default_domains

_connector: Optional[Korrel8rConnector] = None


def get_connector() -> Korrel8rConnector:
    global _connector
    if _connector is None:
        _connector = Korrel8rConnector.from_settings(settings)
    return _connector


def get_domains(alert_ids: Optional[Mapping[str, str]] = None) -> Domains:
    # alert rule ids change at runtime, so the registry is rebuilt per request
    return default_domains(alert_ids)


def as_absolute(link: str) -> str:
    return link if link.startswith("/") else "/" + link
