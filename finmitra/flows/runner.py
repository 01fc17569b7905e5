"""
Runs one prompt-backed flow.
What it does:
- Renders the prompt template with the flow input
- Asks the model for JSON shaped like the output model
- Validates the reply (ValidationError propagates)
- Records a trace either way

And, the main purpose:
One code path shared by every flow.
"""


import time
from typing import Any, Type, TypeVar

from pydantic import ValidationError

from finmitra.flows.tracer import trace
from finmitra.llm.prompts import output_instructions, render
from finmitra.llm.router import LLMError, llm_json
from finmitra.llm.schemas import FlowModel

Out = TypeVar("Out", bound=FlowModel)


async def run_flow(
    name: str,
    *,
    system: str,
    template: str,
    data: FlowModel,
    output_model: Type[Out],
    mock: dict[str, Any] | None = None,
) -> Out:
    values = data.wire()
    schema_hint = output_instructions(output_model)
    user = render(template, values) + schema_hint

    started = time.perf_counter()
    try:
        raw = await llm_json(system, user, schema_hint=schema_hint, mock=mock)
        result = output_model.model_validate(raw)
    except (LLMError, ValidationError) as e:
        await trace(name, input=values, error=str(e), duration_ms=_elapsed_ms(started))
        raise

    await trace(name, input=values, output=result.wire(), duration_ms=_elapsed_ms(started))
    return result


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
