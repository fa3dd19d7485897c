"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and
translates uncaught exceptions into :class:`fastapi.HTTPException` responses:

* parse and domain errors from the correlation layer become ``400``;
* korrel8r transport errors become ``502``;
* anything else becomes ``500`` with the exception message as detail.

HTTPExceptions raised by the handler are propagated untouched.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from correlate.exceptions import CorrelationError
from datasources.exceptions import Korrel8rError

F = TypeVar("F", bound=Callable[..., Any])


def to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, CorrelationError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, Korrel8rError):
        return HTTPException(status_code=502, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    Works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise to_http_exception(exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise to_http_exception(exc) from exc

    return cast(F, sync_wrapper)
