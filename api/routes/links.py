import logging

from fastapi import APIRouter

from api.requests import LinkToQueryRequest, QueryToLinkRequest
from api.responses import LinkResponse, QueryResponse
from api.routes.common import as_absolute, get_domains
from api.routes.exception import handle_exceptions
from correlate.query import Query
from correlate.uri import URIRef

log = logging.getLogger(__name__)

router = APIRouter(tags=["Links"])


@router.post("/links/from-query", summary="Console link that displays a correlation query")
@handle_exceptions
async def query_to_link(req: QueryToLinkRequest) -> LinkResponse:
    constraint = req.constraint.to_constraint() if req.constraint else None
    link = get_domains(req.alert_ids).query_to_link(Query.parse(req.query.strip()), constraint)
    log.debug("navigate %s => %s", req.query, link)
    return LinkResponse(link=as_absolute(str(link)))


@router.post("/links/to-query", summary="Correlation query for a console link")
@handle_exceptions
async def link_to_query(req: LinkToQueryRequest) -> QueryResponse:
    query = get_domains(req.alert_ids).link_to_query(URIRef(req.link))
    return QueryResponse(query=str(query))
