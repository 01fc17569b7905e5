# finmitra/db/repo.py

import json
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from finmitra.core.config import settings
from finmitra.db.models import FlowTrace


def _serialize_sqlite_value(value: Any) -> Any:
    """
    SQLite cannot bind dict/list directly into TEXT parameters.
    Convert dict/list to JSON string so commit never fails.
    """
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, indent=2)
    return value


async def add_trace(db: AsyncSession, tr: FlowTrace) -> FlowTrace:
    tr.input = _serialize_sqlite_value(tr.input)
    tr.output = _serialize_sqlite_value(tr.output)

    db.add(tr)
    await db.commit()
    await db.refresh(tr)
    return tr


async def recent_traces(db: AsyncSession, limit: int = 20, flow: str | None = None) -> list[FlowTrace]:
    stmt = select(FlowTrace)
    if flow:
        stmt = stmt.where(FlowTrace.flow == flow)
    res = await db.execute(stmt.order_by(FlowTrace.created_at.desc()).limit(limit))
    return list(res.scalars().all())


async def purge_old_traces(db: AsyncSession) -> int:
    cutoff = datetime.utcnow() - timedelta(days=settings.TRACE_RETENTION_DAYS)
    res = await db.execute(delete(FlowTrace).where(FlowTrace.created_at < cutoff))
    await db.commit()
    return res.rowcount or 0
