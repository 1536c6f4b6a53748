"""请求归一化。

把调用方的原始 JSON（provider/messages/contextMessage/apiKey/ollamaUrl/ollamaModel）
转换为 UnifiedRequest：

1. 历史消息只保留最近 MAX_HISTORY_MESSAGES 条，保持原有顺序。
2. 末尾追加一条 {role: user, content: contextMessage}。

这里不做内容校验，字段缺失或格式错误会在后续环节以异常形式暴露，
由 Dispatcher 统一转换为 500。
"""

from typing import Any, Iterable, List, Mapping, Tuple

from chat_gateway.domain.models import ChatMessage, Credentials, ProviderId, UnifiedRequest


MAX_HISTORY_MESSAGES = 10


def coerce_role(role: Any) -> str:
    """二元角色收敛：除 assistant 外一律视为 user。"""

    return "assistant" if role == "assistant" else "user"


def truncate_history(messages: Iterable[ChatMessage], context_message: str) -> Tuple[ChatMessage, ...]:
    history: List[ChatMessage] = list(messages)
    if len(history) > MAX_HISTORY_MESSAGES:
        history = history[-MAX_HISTORY_MESSAGES:]
    history.append(ChatMessage(role="user", content=context_message))
    return tuple(history)


def _to_message(item: Mapping[str, Any]) -> ChatMessage:
    return ChatMessage(role=item.get("role"), content=item.get("content"))


def normalize(raw: Mapping[str, Any]) -> UnifiedRequest:
    """原始请求 -> UnifiedRequest。provider 不合法时抛 UnsupportedProviderError。"""

    provider = ProviderId.parse(raw.get("provider"))
    # 缺失的 messages 视为空历史；非列表会在遍历时报错
    messages = [_to_message(m) for m in (raw.get("messages") or [])]
    context_message = raw.get("contextMessage")
    credentials = Credentials(
        api_key=raw.get("apiKey"),
        base_url=raw.get("ollamaUrl"),
        model_override=raw.get("ollamaModel"),
    )
    return UnifiedRequest(
        provider=provider,
        messages=truncate_history(messages, context_message),
        context_message=context_message,
        credentials=credentials,
    )
