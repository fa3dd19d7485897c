"""
Search service that runs a correlation search against korrel8r and turns the outcome into a displayable result.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging

from config import KORREL8R_ERROR_TITLE, REQUEST_FAILED_TITLE, UNKNOWN_ERROR_MESSAGE
from connectors.korrel8r import Korrel8rConnector
from correlate.exceptions import CorrelationError
from correlate.search import Result, Search
from datasources.exceptions import Korrel8rError, Korrel8rRequestError

log = logging.getLogger(__name__)


async def run_search(connector: Korrel8rConnector, search: Search) -> Result:
    try:
        graph = await connector.graph(search)
    except Korrel8rRequestError as exc:
        log.warning("search %r failed: %s", search.query_str, exc)
        if exc.server_error:
            return Result.failure(KORREL8R_ERROR_TITLE, exc.server_error)
        return Result.failure(REQUEST_FAILED_TITLE, str(exc) or UNKNOWN_ERROR_MESSAGE)
    except (Korrel8rError, CorrelationError) as exc:
        log.warning("search %r failed: %s", search.query_str, exc)
        return Result.failure(REQUEST_FAILED_TITLE, str(exc) or UNKNOWN_ERROR_MESSAGE)
    return Result(graph=graph)


async def is_reachable(connector: Korrel8rConnector) -> bool:
    try:
        await connector.list_domains()
    except Korrel8rError as exc:
        log.debug("korrel8r not reachable: %s", exc)
        return False
    return True
