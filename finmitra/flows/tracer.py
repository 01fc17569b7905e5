"""
Stores flow run records.
What it records:
- Flow name
- Input sent to the prompt
- Parsed output or the error
- Latency

And, the main purpose:
Observability and debugging of prompt behavior.
"""


from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from finmitra.core.config import settings
from finmitra.core.ids import new_id
from finmitra.core.logging import get_logger
from finmitra.db.models import FlowTrace
from finmitra.db.repo import add_trace
from finmitra.db.session import SessionLocal

log = get_logger("flows.tracer")


async def trace(
    flow: str,
    *,
    input: dict,
    output: Any = None,
    error: str = "",
    duration_ms: int = 0,
) -> None:
    if not settings.TRACE_FLOWS:
        return
    tr = FlowTrace(
        id=new_id("tr"),
        flow=flow,
        status="error" if error else "ok",
        input=input,
        output=output,
        error=error,
        duration_ms=duration_ms,
    )
    try:
        async with SessionLocal() as db:
            await add_trace(db, tr)
    except SQLAlchemyError as e:
        log.warning(f"trace write failed for {flow}: {e}")
