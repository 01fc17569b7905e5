"""
Page routes for the web interface.
Each form posts back to the page, which re-renders with the result,
the per-field messages, or the generic error banner.
"""
from datetime import date
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from finmitra import actions
from finmitra.api.types import ActionResult
from finmitra.core.config import settings
from finmitra.core.templates import render_template
from finmitra.flows.concept_simplification import SUGGESTED_TERMS

router = APIRouter(tags=["pages"])

TABS = [
    ("guidance", "Personalized Guidance"),
    ("plans", "Starter Plans"),
    ("dictionary", "Finance 101"),
]

RISK_PROFILES = [
    ("conservative", "Conservative", "Protect what you have. Low-risk options with steady returns."),
    ("moderate", "Moderate", "Balance growth and safety with a mix of assets."),
    ("aggressive", "Aggressive", "Maximize long-term growth and accept bigger swings."),
]

GUIDANCE_DEFAULTS = {"riskTolerance": "Moderate", "dependents": "0", "debt": "0"}


def _panel(values: dict | None = None, result: ActionResult | None = None) -> dict[str, Any]:
    panel: dict[str, Any] = {"form": values or {}, "errors": {}, "error": None, "data": None}
    if result is None:
        return panel
    if result.ok:
        panel["data"] = result.data
    elif result.details:
        panel["errors"] = result.details.get("fieldErrors", {})
        # field messages are shown inline; banner only for form-level problems
        if result.details.get("formErrors"):
            panel["error"] = result.error
    else:
        panel["error"] = result.error
    return panel


def _render(request: Request, active: str, **panels: dict):
    context = {
        "app_name": settings.APP_NAME,
        "year": date.today().year,
        "tabs": TABS,
        "active": active,
        "risk_profiles": RISK_PROFILES,
        "suggested_terms": SUGGESTED_TERMS,
        "guidance": panels.get("guidance") or _panel(dict(GUIDANCE_DEFAULTS)),
        "plans": panels.get("plans") or _panel(),
        "dictionary": panels.get("dictionary") or _panel(),
    }
    return render_template("index.html", context, request)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, tab: str = "guidance"):
    active = tab if tab in dict(TABS) else "guidance"
    return _render(request, active)


@router.post("/guidance", response_class=HTMLResponse)
async def submit_guidance(request: Request):
    values = dict(await request.form())
    result = await actions.get_investment_guidance(values)
    return _render(request, "guidance", guidance=_panel(values, result))


@router.post("/plans", response_class=HTMLResponse)
async def submit_plan(request: Request):
    values = dict(await request.form())
    result = await actions.generate_investment_plan(values)
    return _render(request, "plans", plans=_panel(values, result))


@router.post("/dictionary", response_class=HTMLResponse)
async def submit_concept(request: Request):
    values = dict(await request.form())
    result = await actions.get_simplified_concept(values)
    return _render(request, "dictionary", dictionary=_panel(values, result))
