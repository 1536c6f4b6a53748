"""Provider 适配器抽象接口。

Dispatcher 不直接依赖具体厂商的请求格式，而是依赖此协议：

- 每个厂商实现一个 ProviderAdapter（如 OpenAIAdapter）。
- build_call: 将 UnifiedRequest 转成具体 API 请求（url/headers/body）。
- extract_reply: 从响应 JSON 中取出助手回复文本。

这样接入新厂商只需新增一个适配器并登记到 ADAPTERS，不需要改动 Dispatcher。
"""

from typing import Any, Protocol, Sequence, Union

from chat_gateway.domain.exceptions import AdapterExtractionError
from chat_gateway.domain.models import OutboundCall, UnifiedRequest


class ProviderAdapter(Protocol):
    """LLM Provider 适配器协议。

    - name: Provider 展示名，用于错误信息与日志。
    - build_call(req): 构造一次外呼，不执行网络请求。
    - extract_reply(data): 解析响应 JSON，字段缺失时抛 AdapterExtractionError。
    """

    name: str

    def build_call(self, req: UnifiedRequest) -> OutboundCall:
        ...

    def extract_reply(self, data: Any) -> str:
        ...


PathStep = Union[str, int]


def dig(provider: str, data: Any, path: Sequence[PathStep]) -> str:
    """按字段路径取出回复文本。

    路径中的任一环节缺失、类型不符，或最终值不是字符串，都视为提取失败，
    不会静默返回空字符串。
    """

    label = _format_path(path)
    node = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or len(node) <= step:
                raise AdapterExtractionError(provider, label)
            node = node[step]
        else:
            if not isinstance(node, dict) or step not in node:
                raise AdapterExtractionError(provider, label)
            node = node[step]
    if not isinstance(node, str):
        raise AdapterExtractionError(provider, label, detail=f"expected string, got {type(node).__name__}")
    return node


def _format_path(path: Sequence[PathStep]) -> str:
    out = ""
    for step in path:
        if isinstance(step, int):
            out += f"[{step}]"
        else:
            out += f".{step}" if out else step
    return out
