from fastapi import FastAPI
from finmitra.api.pages import router as pages_router
from finmitra.api.routes import router
from finmitra.core.config import settings
from finmitra.core.logging import get_logger
from finmitra.db.repo import purge_old_traces
from finmitra.db.session import SessionLocal, init_db
import finmitra.flows.concept_simplification
import finmitra.flows.investment_guidance
import finmitra.flows.investment_plan

log = get_logger("main")


app = FastAPI(title=f"{settings.APP_NAME} API", version=settings.APP_VERSION)
app.include_router(router, prefix="/v1")
app.include_router(pages_router)

@app.on_event("startup")
async def on_startup():
    await init_db()
    async with SessionLocal() as db:
        purged = await purge_old_traces(db)
    if purged:
        log.info(f"purged {purged} flow traces older than {settings.TRACE_RETENTION_DAYS} days")
    log.info(f"LLM provider={settings.LLM_PROVIDER} model={settings.LLM_MODEL}")

@app.get("/health")
async def health():
    return {"status": "ok", "provider": settings.LLM_PROVIDER}
