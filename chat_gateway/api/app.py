"""HTTP 入口。

POST /api/ai 接收统一请求体，返回 {content} 或 {error}。
外呼是同步阻塞调用，放到线程池中执行，不阻塞事件循环。
"""

import json
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from chat_gateway.api.service import handle_chat
from chat_gateway.domain.models import CanonicalResponse, ProviderId
from chat_gateway.infrastructure.logging.logger import logger


def _parse_body(raw: bytes) -> Dict[str, Any]:
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def create_app() -> FastAPI:
    """创建并配置 FastAPI 应用。"""
    app = FastAPI(
        title="Chat Gateway",
        description="Unified chat-completion endpoint over multiple LLM providers",
        version="0.1.0",
    )

    @app.post("/api/ai")
    async def chat(request: Request) -> JSONResponse:
        raw = await request.body()
        try:
            payload = _parse_body(raw)
        except (ValueError, RecursionError) as e:
            logger.warning("Invalid request body", extra={"extra": {"error": str(e)}})
            resp = CanonicalResponse.failure(str(e) or "Invalid request body", status.HTTP_500_INTERNAL_SERVER_ERROR)
            return JSONResponse(resp.to_body(), status_code=resp.status_code)
        resp = await run_in_threadpool(handle_chat, payload)
        return JSONResponse(resp.to_body(), status_code=resp.status_code)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok", "providers": [p.value for p in ProviderId]}

    return app


app = create_app()
