"""
Health check route to verify the service and korrel8r connectivity.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict

from fastapi import APIRouter

from api.routes.common import get_connector
from api.routes.exception import handle_exceptions
from services.search_service import is_reachable

router = APIRouter(tags=["Health"])


@router.get("/health")
@handle_exceptions
async def health() -> Dict[str, Any]:
    reachable = await is_reachable(get_connector())
    return {
        "status": "ok",
        "korrel8r": "reachable" if reachable else "unreachable",
    }
