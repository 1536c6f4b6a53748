"""请求分发核心模块。

一次分发的状态流转：

    PENDING -> DISPATCHED -> RESOLVED
                          \\-> FAILED

PENDING 阶段失败（未知 provider、归一化失败）时不会发出外部调用。
每次调用只发出一次外呼，不做重试；所有异常都在这里被捕获，
转换为 CanonicalResponse，不会向上抛出。
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import httpx

from chat_gateway.config.settings import settings
from chat_gateway.domain.exceptions import BusinessError, NetworkError, ProviderHttpError
from chat_gateway.domain.models import CanonicalResponse, OutboundCall
from chat_gateway.domain.normalizer import normalize
from chat_gateway.infrastructure.logging.logger import logger
from chat_gateway.providers import ADAPTERS, get_adapter
from chat_gateway.providers.base import ProviderAdapter


UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class DispatchState(str, Enum):
    PENDING = "pending"
    DISPATCHED = "dispatched"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class DispatchTrace:
    """单次分发的状态记录，只用于日志，不跨调用共享。"""

    provider: Optional[str] = None
    state: DispatchState = DispatchState.PENDING
    history: List[DispatchState] = field(default_factory=lambda: [DispatchState.PENDING])
    started_at: float = field(default_factory=time.monotonic)

    def advance(self, state: DispatchState) -> None:
        self.state = state
        self.history.append(state)

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started_at) * 1000)


class Dispatcher:
    """按 provider 选择适配器、执行外呼并归一化结果。

    Dispatcher 本身无状态，多个请求可以并发复用同一个实例。
    """

    def __init__(self, adapters: Mapping[Any, ProviderAdapter] = ADAPTERS, cfg=settings):
        self._adapters = adapters
        self._settings = cfg

    def dispatch(self, raw: Mapping[str, Any]) -> CanonicalResponse:
        trace = DispatchTrace()
        try:
            trace.provider = f"{raw.get('provider')}"
            req = normalize(raw)
            adapter = get_adapter(req.provider, self._adapters)
            call = adapter.build_call(req)
            trace.advance(DispatchState.DISPATCHED)
            self._log(
                logging.INFO,
                "Dispatching request",
                trace,
                url=call.redacted_url(),
                messages=len(req.messages),
            )
            data = self._send(adapter, call)
            content = adapter.extract_reply(data)
        except BusinessError as e:
            return self._fail(trace, e.message, e.http_status, code=e.code)
        except Exception as e:
            return self._fail(trace, str(e), 500, code=type(e).__name__)

        trace.advance(DispatchState.RESOLVED)
        self._log(logging.INFO, "Request resolved", trace, reply_chars=len(content))
        return CanonicalResponse.success(content)

    def _send(self, adapter: ProviderAdapter, call: OutboundCall) -> Any:
        """发出一次 POST，非 2xx 时保留原始响应文本抛出 ProviderHttpError。"""

        try:
            with httpx.Client(timeout=self._settings.http_timeout, trust_env=False) as client:
                resp = client.post(call.url, json=call.body, headers=call.headers)
        except httpx.RequestError as e:
            # 网络错误：DNS 失败、连接超时等
            raise NetworkError(code="NETWORK_ERROR", message=str(e) or type(e).__name__)
        if not 200 <= resp.status_code < 300:
            raise ProviderHttpError(
                provider=adapter.name,
                status_code=resp.status_code,
                status_text=resp.reason_phrase,
                body=resp.text,
            )
        return resp.json()

    def _fail(self, trace: DispatchTrace, message: str, status_code: int, **fields: Any) -> CanonicalResponse:
        trace.advance(DispatchState.FAILED)
        message = message or UNKNOWN_ERROR_MESSAGE
        self._log(logging.ERROR, "Request failed", trace, status_code=status_code, **fields)
        return CanonicalResponse.failure(message, status_code)

    @staticmethod
    def _log(level: int, message: str, trace: DispatchTrace, **fields: Any) -> None:
        payload: Dict[str, Any] = {
            "provider": trace.provider,
            "state": trace.state.value,
            "path": [s.value for s in trace.history],
            "elapsed_ms": trace.elapsed_ms(),
        }
        payload.update(fields)
        logger.log(level, message, extra={"extra": payload})
