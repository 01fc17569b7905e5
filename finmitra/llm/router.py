"""
LLM call wrapper and it does:
- Sends prompts to the model provider (OpenAI-compatible chat completions)
- Ensures JSON output
- Handles transient retries and JSON repair

Main purpose:
Central interface for all model calls.
"""


import asyncio
import httpx
from typing import Any

from finmitra.core.config import settings
from finmitra.core.logging import get_logger
from finmitra.llm.json_parse import extract_json

log = get_logger("llm.router")

TRANSIENT_STATUSES = (429, 500, 502, 503, 504)


class LLMError(RuntimeError):
    pass


def _safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


async def _groq_chat(system: str, user: str) -> str:
    if not settings.GROQ_API_KEY:
        raise LLMError("Missing GROQ_API_KEY. Put it in your .env")

    url = f"{settings.GROQ_BASE_URL.rstrip('/')}/chat/completions"
    headers = {"Authorization": f"Bearer {settings.GROQ_API_KEY}"}
    payload = {
        "model": settings.LLM_MODEL,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        "temperature": settings.LLM_TEMPERATURE,
    }

    timeout = httpx.Timeout(settings.LLM_TIMEOUT_SECONDS, connect=10.0)
    attempts = max(1, settings.LLM_MAX_ATTEMPTS)

    last_err: Exception | None = None
    for attempt in range(attempts):
        backoff = settings.LLM_BACKOFF_SECONDS * (2**attempt)
        last_attempt = attempt == attempts - 1
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                r = await client.post(url, headers=headers, json=payload)
        except httpx.TransportError as e:
            last_err = e
            if last_attempt:
                break
            log.warning(f"Groq call failed: {e!r}. retrying in {backoff:.1f}s (attempt {attempt+1}/{attempts})")
            await asyncio.sleep(backoff)
            continue
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # bad URL, undecodable body: retrying will not help
            raise LLMError(f"Groq call failed: {e!r}") from e

        if r.status_code in TRANSIENT_STATUSES:
            last_err = LLMError(f"Groq transient {r.status_code}: {_safe_snippet(r.text)}")
            if last_attempt:
                break
            log.warning(f"{last_err}. retrying in {backoff:.1f}s (attempt {attempt+1}/{attempts})")
            await asyncio.sleep(backoff)
            continue

        if r.status_code >= 400:
            raise LLMError(f"Groq error {r.status_code}: {_safe_snippet(r.text)}")

        try:
            data = r.json()
            return data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            raise LLMError(f"Unexpected Groq response: {_safe_snippet(r.text)}")

    raise LLMError(f"Groq call failed after {attempts} attempts: {last_err}")


def _as_object(text: str, label: str) -> dict:
    parsed = extract_json(text)
    if not isinstance(parsed, dict):
        raise ValueError(f"{label} JSON is not an object (got {type(parsed).__name__})")
    return parsed


async def llm_json(
    system: str,
    user: str,
    *,
    schema_hint: str | None = None,
    mock: dict[str, Any] | None = None,
) -> dict:
    """
    Calls the provider and returns a parsed JSON dict.
    Self-repairs once if the model emits non-JSON, then once more against
    schema_hint when given. Raises LLMError when nothing usable comes back.
    """
    provider = (settings.LLM_PROVIDER or "").lower().strip()

    if provider == "mock":
        if mock is None:
            raise LLMError("LLM_PROVIDER=mock but no canned reply is registered for this call")
        return dict(mock)

    if provider != "groq":
        raise LLMError(f"Unsupported LLM_PROVIDER={settings.LLM_PROVIDER}. Use groq or mock.")

    # Attempt 1
    text = await _groq_chat(system, user)
    try:
        return _as_object(text, "Reply")
    except ValueError as e:
        log.warning(f"JSON parse failed (attempt1): {e}. Snippet={_safe_snippet(text)}. Trying repair...")

    # Attempt 2: strict formatter
    repair_system = "You are a strict JSON formatter. Return ONLY a valid JSON object."
    repair_user = f"Fix and output ONLY a JSON object for this content:\n{text}\nReturn ONLY JSON."
    text2 = await _groq_chat(repair_system, repair_user)
    try:
        return _as_object(text2, "Repair")
    except ValueError as e2:
        log.warning(f"JSON parse failed (attempt2 repair): {e2}. Snippet={_safe_snippet(text2)}")

    if not schema_hint:
        raise LLMError("Model did not return a JSON object after repair")

    # Attempt 3: schema-forced
    schema_system = "Return ONLY valid JSON. You MUST match the provided schema exactly."
    schema_user = f"""
You must output a JSON object that matches this schema EXACTLY:

{schema_hint}

Convert the following into a valid object:

CONTENT:
{text2}
"""
    text3 = await _groq_chat(schema_system, schema_user)
    try:
        return _as_object(text3, "Schema repair")
    except ValueError as e3:
        log.error(f"Schema repair parsing failed: {e3}. Snippet={_safe_snippet(text3)}")
        raise LLMError("Model did not return a JSON object after schema repair") from e3
