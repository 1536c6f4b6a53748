"""Gemini Provider 适配器。

- URL: .../models/gemini-2.5-flash:generateContent?key=<api_key>
- 认证: key 放在 query 参数中，不使用请求头
- 回复路径: candidates[0].content.parts[0].text

只发送 context message 一条文本，历史消息不会出现在请求体中。
这是该适配器现有的协议行为，保持不变。
"""

from typing import Any
from urllib.parse import quote

from chat_gateway.domain.models import OutboundCall, UnifiedRequest
from chat_gateway.providers.base import dig
from chat_gateway.providers.registry import GEMINI_CONFIG, MAX_TOKENS, TEMPERATURE


class GeminiAdapter:
    name = GEMINI_CONFIG.name

    def build_call(self, req: UnifiedRequest) -> OutboundCall:
        endpoint = GEMINI_CONFIG.endpoint.format(model=GEMINI_CONFIG.model)
        key = quote(f"{req.credentials.api_key}", safe="")
        return OutboundCall(
            url=f"{endpoint}?key={key}",
            headers={"Content-Type": "application/json"},
            body={
                "contents": [{"parts": [{"text": req.context_message}]}],
                "generationConfig": {
                    "maxOutputTokens": MAX_TOKENS,
                    "temperature": TEMPERATURE,
                },
            },
        )

    def extract_reply(self, data: Any) -> str:
        return dig(self.name, data, ["candidates", 0, "content", "parts", 0, "text"])
