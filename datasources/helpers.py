"""
Shared helper functions for talking JSON to the korrel8r REST API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from datasources.exceptions import Korrel8rRequestError, Korrel8rTimeout, Korrel8rUnavailable


def _server_error(response: Any) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


def _status_error(e: httpx.HTTPStatusError, invalid_msg: str) -> Korrel8rRequestError:
    server_error = _server_error(e.response)
    detail = server_error or e.response.text
    return Korrel8rRequestError(
        f"{invalid_msg} [{e.response.status_code}]: {detail}",
        status_code=e.response.status_code,
        server_error=server_error,
    )


async def fetch_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    invalid_msg: str = "korrel8r request failed",
    timeout_msg: str = "korrel8r request timed out",
    unavailable_msg: str = "Cannot reach korrel8r at",
) -> Any:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            return resp.json()
    except httpx.HTTPStatusError as e:
        raise _status_error(e, invalid_msg) from e
    except httpx.TimeoutException as e:
        raise Korrel8rTimeout(timeout_msg) from e
    except httpx.RequestError as e:
        raise Korrel8rUnavailable(f"{unavailable_msg} {url}") from e
    except ValueError as e:
        raise Korrel8rRequestError(f"{invalid_msg}: response is not JSON") from e


async def post_json(
    url: str,
    body: Dict[str, Any],
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    invalid_msg: str = "korrel8r request failed",
    timeout_msg: str = "korrel8r request timed out",
    unavailable_msg: str = "Cannot reach korrel8r at",
) -> Any:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.post(url, json=body, params=params, headers=headers)
            resp.raise_for_status()
            return resp.json()
    except httpx.HTTPStatusError as e:
        raise _status_error(e, invalid_msg) from e
    except httpx.TimeoutException as e:
        raise Korrel8rTimeout(timeout_msg) from e
    except httpx.RequestError as e:
        raise Korrel8rUnavailable(f"{unavailable_msg} {url}") from e
    except ValueError as e:
        raise Korrel8rRequestError(f"{invalid_msg}: response is not JSON") from e
