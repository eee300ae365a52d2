"""FastAPI app exposing streamed translation, the model table and health checks."""

from __future__ import annotations

import logging

import httpx
import openai
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, StreamingResponse

from codeshift.diagnostics import check_startup_requirements
from codeshift.errors import InputTooLongError
from codeshift.models import MODELS, find_model
from codeshift.providers import ProviderConfig, ProviderRegistry, TranslateBody, build_registry, stream_body

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers={"Cache-Control": "no-store"})


def create_app(registry: ProviderRegistry | None = None) -> FastAPI:
    """Build the HTTP app around a provider registry.

    The registry is created once here (from the environment when not given)
    and shared read-only by every request.
    """
    if registry is None:
        registry = build_registry(ProviderConfig.from_env())

    app = FastAPI(title="codeshift")
    app.state.registry = registry

    @app.get("/api/models")
    async def models() -> dict:
        return {"models": [m.to_dict() for m in MODELS]}

    @app.get("/api/health")
    def health() -> dict:
        issues = check_startup_requirements(registry)
        return {
            "ok": not any(i.severity == "error" for i in issues),
            "issues": [i.to_dict() for i in issues],
        }

    @app.post("/api/translate")
    async def translate(request: Request):
        try:
            data = await request.json()
        except ValueError:
            return _error(400, "Request body must be valid JSON")

        try:
            body = TranslateBody.from_dict(data)
            model = find_model(body.model)
            if model is not None and len(body.input_code) > model.max_code_length:
                raise InputTooLongError(model.id, len(body.input_code), model.max_code_length)
            stream = await stream_body(registry, body)
        except ValueError as exc:
            logger.info("Rejected translation request: %s", exc)
            return _error(400, str(exc))
        except (openai.APIError, httpx.HTTPError) as exc:
            logger.error("Upstream completion call failed: %s", exc)
            return _error(502, str(exc))

        return StreamingResponse(
            stream,
            media_type="text/plain; charset=utf-8",
            headers={"Cache-Control": "no-store"},
        )

    return app
