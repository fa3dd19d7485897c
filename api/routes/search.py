from fastapi import APIRouter

from api.requests import SearchRequest
from api.responses import SearchResponse, ValidationResponse
from api.routes.common import get_connector, get_domains
from api.routes.exception import handle_exceptions
from services.search_service import run_search

router = APIRouter(tags=["Search"])


@router.post("/search", summary="Correlation graph for a neighbourhood or goal search")
@handle_exceptions
async def search(req: SearchRequest) -> SearchResponse:
    result = await run_search(get_connector(), req.to_search())
    return SearchResponse.from_result(result)


@router.post("/search/validate", summary="Check a search's query and goal class against the known domains")
@handle_exceptions
async def validate(req: SearchRequest) -> ValidationResponse:
    errors = req.to_search().validate(get_domains(req.alert_ids))
    return ValidationResponse(valid=not errors, errors=errors)
