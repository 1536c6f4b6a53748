"""Anthropic Provider 适配器（anthropic / claude 两个标识共用）。

- URL: https://api.anthropic.com/v1/messages
- 认证: x-api-key: <api_key>，并固定携带 anthropic-version 头
- 回复路径: content[0].text

Messages API 只区分 user/assistant 两种角色，发送前统一收敛。
"""

from typing import Any

from chat_gateway.domain.models import OutboundCall, UnifiedRequest
from chat_gateway.domain.normalizer import coerce_role
from chat_gateway.providers.base import dig
from chat_gateway.providers.registry import ANTHROPIC_CONFIG, MAX_TOKENS, TEMPERATURE


class AnthropicAdapter:
    name = ANTHROPIC_CONFIG.name

    def build_call(self, req: UnifiedRequest) -> OutboundCall:
        return OutboundCall(
            url=ANTHROPIC_CONFIG.endpoint,
            headers={
                "Content-Type": "application/json",
                "x-api-key": f"{req.credentials.api_key}",
                "anthropic-version": ANTHROPIC_CONFIG.api_version,
            },
            body={
                "model": ANTHROPIC_CONFIG.model,
                "messages": [{"role": coerce_role(m.role), "content": m.content} for m in req.messages],
                "max_tokens": MAX_TOKENS,
                "temperature": TEMPERATURE,
            },
        )

    def extract_reply(self, data: Any) -> str:
        return dig(self.name, data, ["content", 0, "text"])
