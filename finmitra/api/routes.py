import json
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from finmitra import actions
from finmitra.api.types import ActionResult
from finmitra.db.repo import recent_traces
from finmitra.db.session import SessionLocal
from finmitra.flows.concept_simplification import SUGGESTED_TERMS
from finmitra.flows.registry import get_flow, list_flows
from finmitra.llm.router import LLMError


"""
FastAPI routes for the JSON API.
What it provides:
- One endpoint per feature form (guidance, plans, dictionary)
- Dictionary suggestions
- Direct flow runs and recent flow traces for development

And, the main purpose:
Expose the assistant over HTTP.
"""

router = APIRouter()


def _respond(result: ActionResult) -> JSONResponse:
    if result.ok:
        status = 200
    elif result.error == actions.INVALID_INPUT:
        status = 400
    else:
        status = 503
    return JSONResponse(result.model_dump(exclude_none=True), status_code=status)


@router.post("/guidance")
async def api_guidance(body: dict):
    return _respond(await actions.get_investment_guidance(body))

@router.post("/plans")
async def api_plans(body: dict):
    return _respond(await actions.generate_investment_plan(body))

@router.post("/dictionary")
async def api_dictionary(body: dict):
    return _respond(await actions.get_simplified_concept(body))

@router.get("/dictionary/suggestions")
async def api_dictionary_suggestions():
    return {"terms": SUGGESTED_TERMS}


@router.get("/flows")
async def api_list_flows():
    return {"flows": list_flows()}

@router.post("/flows/{name}")
async def api_run_flow(name: str, body: dict):
    try:
        spec = get_flow(name)
    except KeyError:
        raise HTTPException(404, "flow not found")

    try:
        data = spec.input_model.model_validate(body)
    except ValidationError as e:
        raise HTTPException(422, json.loads(e.json(include_url=False)))

    try:
        result = await spec.fn(data)
    except (LLMError, ValidationError) as e:
        raise HTTPException(503, f"flow failed: {e}")
    return {"flow": name, "output": result.wire()}


@router.get("/traces")
async def api_traces(limit: int = Query(20, ge=1, le=200), flow: str | None = None):
    async with SessionLocal() as db:
        traces = await recent_traces(db, limit=limit, flow=flow)
        return [
            {
                "id": tr.id,
                "flow": tr.flow,
                "status": tr.status,
                "input": json.loads(tr.input) if tr.input else None,
                "output": json.loads(tr.output) if tr.output else None,
                "error": tr.error or None,
                "duration_ms": tr.duration_ms,
                "at": tr.created_at.isoformat(),
            }
            for tr in traces
        ]
