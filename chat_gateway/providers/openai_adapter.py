"""OpenAI Provider 适配器。

- URL: https://api.openai.com/v1/chat/completions
- 认证: Authorization: Bearer <api_key>
- 回复路径: choices[0].message.content

发送完整的裁剪后历史，角色原样保留。
"""

from typing import Any

from chat_gateway.domain.models import OutboundCall, UnifiedRequest
from chat_gateway.providers.base import dig
from chat_gateway.providers.registry import MAX_TOKENS, OPENAI_CONFIG, TEMPERATURE


class OpenAIAdapter:
    name = OPENAI_CONFIG.name

    def build_call(self, req: UnifiedRequest) -> OutboundCall:
        return OutboundCall(
            url=OPENAI_CONFIG.endpoint,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {req.credentials.api_key}",
            },
            body={
                "model": OPENAI_CONFIG.model,
                "messages": [{"role": m.role, "content": m.content} for m in req.messages],
                "max_tokens": MAX_TOKENS,
                "temperature": TEMPERATURE,
            },
        )

    def extract_reply(self, data: Any) -> str:
        return dig(self.name, data, ["choices", 0, "message", "content"])
