from fastapi import APIRouter

from api.requests import RuleRequest
from api.responses import RuleResponse
from api.routes.exception import handle_exceptions
from correlate.graph import Graph, QueryCount

router = APIRouter(tags=["Graphs"])


@router.post("/graphs/rule", summary="Name of the rule that produced a query in a correlation graph")
@handle_exceptions
async def find_rule(req: RuleRequest) -> RuleResponse:
    rule = Graph.from_api(req.graph).find_rule(QueryCount(req.query, req.count))
    return RuleResponse(rule=rule.to_api() if rule is not None else None)
