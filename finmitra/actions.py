"""
Server actions behind the three forms.
What they do:
- Re-check the form rules on the server
- Hand validated input to the matching flow
- Collapse any flow failure into one user-facing message

And, the main purpose:
Keep the HTTP and HTML layers free of model plumbing.
"""


from typing import Any, Awaitable, Callable, Mapping, Type

from pydantic import ValidationError

from finmitra.api.types import (
    ActionResult,
    FormModel,
    InvestmentGuidanceForm,
    InvestmentPlanForm,
    SimplifyConceptForm,
    flatten_errors,
)
from finmitra.core.logging import get_logger
from finmitra.flows.concept_simplification import simplify_financial_concept
from finmitra.flows.investment_guidance import investment_guidance
from finmitra.flows.investment_plan import investment_plan_generator
from finmitra.llm.schemas import (
    FlowModel,
    InvestmentGuidanceInput,
    InvestmentPlanInput,
    SimplifyFinancialConceptInput,
)

log = get_logger("actions")

INVALID_INPUT = "Invalid input."
UNAVAILABLE = "Our AI assistant is currently unavailable. Please try again later."


async def _run_action(
    action: str,
    values: Mapping[str, Any],
    form_model: Type[FormModel],
    input_model: Type[FlowModel],
    flow: Callable[[Any], Awaitable[FlowModel]],
) -> ActionResult:
    try:
        form = form_model.model_validate(dict(values))
    except ValidationError as e:
        return ActionResult(error=INVALID_INPUT, details=flatten_errors(e))

    try:
        result = await flow(input_model.model_validate(form.model_dump()))
    except Exception:
        log.exception(f"AI flow error in {action}")
        return ActionResult(error=UNAVAILABLE)

    return ActionResult(data=result.wire())


async def get_investment_guidance(values: Mapping[str, Any]) -> ActionResult:
    return await _run_action(
        "get_investment_guidance",
        values,
        InvestmentGuidanceForm,
        InvestmentGuidanceInput,
        investment_guidance,
    )


async def generate_investment_plan(values: Mapping[str, Any]) -> ActionResult:
    return await _run_action(
        "generate_investment_plan",
        values,
        InvestmentPlanForm,
        InvestmentPlanInput,
        investment_plan_generator,
    )


async def get_simplified_concept(values: Mapping[str, Any]) -> ActionResult:
    return await _run_action(
        "get_simplified_concept",
        values,
        SimplifyConceptForm,
        SimplifyFinancialConceptInput,
        simplify_financial_concept,
    )
