"""Ollama Provider 适配器（本地 ollama 与 ollamaCloud）。

两者使用同一个 /api/chat 接口，差别只在认证：
本地实例不需要认证，云端实例使用 Authorization: Bearer <api_key>。
"""

from typing import Any, Dict

from chat_gateway.config.settings import settings
from chat_gateway.domain.models import OutboundCall, UnifiedRequest
from chat_gateway.providers.base import dig
from chat_gateway.providers.registry import (
    MAX_TOKENS,
    OLLAMA_CLOUD_CONFIG,
    OLLAMA_CONFIG,
    ProviderConfig,
    TEMPERATURE,
)


class OllamaAdapter:
    """Ollama /api/chat 适配器。

    - base_url: 请求未携带 ollamaUrl 时使用的默认地址。
    - authenticated: 是否携带 Bearer 认证头（ollamaCloud）。
    """

    def __init__(self, config: ProviderConfig = OLLAMA_CONFIG, authenticated: bool = False, cfg=settings):
        self._config = config
        self._authenticated = authenticated
        self._settings = cfg
        self.name = config.name

    def _base_url(self, req: UnifiedRequest) -> str:
        if req.credentials.base_url:
            return req.credentials.base_url.rstrip("/")
        if self._authenticated:
            return self._settings.ollama_cloud_base_url
        return self._settings.ollama_base_url

    def build_call(self, req: UnifiedRequest) -> OutboundCall:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self._authenticated:
            headers["Authorization"] = f"Bearer {req.credentials.api_key}"
        return OutboundCall(
            url=f"{self._base_url(req)}/api/chat",
            headers=headers,
            body={
                "model": req.credentials.model_override or self._config.model,
                "messages": [{"role": m.role, "content": m.content} for m in req.messages],
                "stream": False,
                "options": {
                    "temperature": TEMPERATURE,
                    "num_predict": MAX_TOKENS,
                },
            },
        )

    def extract_reply(self, data: Any) -> str:
        return dig(self.name, data, ["message", "content"])


def ollama_cloud_adapter(cfg=settings) -> OllamaAdapter:
    return OllamaAdapter(OLLAMA_CLOUD_CONFIG, authenticated=True, cfg=cfg)
