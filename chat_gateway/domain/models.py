"""统一的请求与响应数据模型。

本模块定义了网关在不同 Provider 之间共享的标准数据结构：

- ChatMessage: 一条对话消息（user/assistant）。
- UnifiedRequest: 归一化后的请求，所有适配器只依赖它构造外呼。
- OutboundCall: 某个 Provider 的具体 HTTP 请求（url/headers/body）。
- CanonicalResponse: 返回给调用方的唯一响应形态（content 或 error）。

所有 Provider 适配器都只依赖这些模型，并负责在各自的 API JSON 与这些模型之间转换。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from chat_gateway.domain.exceptions import UnsupportedProviderError


# 消息角色；上游可能传入其他角色，由需要二元角色的适配器负责收敛
Role = Literal["user", "assistant"]


class ProviderId(str, Enum):
    """已支持的 provider 标识（封闭集合）。

    anthropic 与 claude 是同一个适配器的两个别名。
    """

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    CLAUDE = "claude"
    GEMINI = "gemini"
    OLLAMA = "ollama"
    OLLAMA_CLOUD = "ollamaCloud"

    @classmethod
    def parse(cls, raw: object) -> "ProviderId":
        """按精确值匹配（区分大小写），未知标识抛 UnsupportedProviderError。"""

        if isinstance(raw, str):
            for member in cls:
                if member.value == raw:
                    return member
        raise UnsupportedProviderError(raw)


@dataclass(frozen=True)
class ChatMessage:
    """一条对话消息，创建后不可变。"""

    role: Role
    content: str


@dataclass(frozen=True)
class Credentials:
    """随请求传入的凭据与端点信息。

    api_key 是不透明的敏感令牌，任何日志都不能输出它。
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model_override: Optional[str] = None

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return (
            f"Credentials(api_key={masked!r}, base_url={self.base_url!r}, "
            f"model_override={self.model_override!r})"
        )


@dataclass(frozen=True)
class UnifiedRequest:
    """一次归一化后的聊天请求。

    messages 已经过窗口裁剪，并在末尾追加了 context message，
    这就是每个适配器收到的完整历史。
    """

    provider: ProviderId
    messages: Tuple[ChatMessage, ...]
    context_message: str
    credentials: Credentials = field(default_factory=Credentials)


@dataclass
class OutboundCall:
    """某个 Provider 的一次 HTTP 调用描述，只在单次分发内存在。"""

    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]

    def redacted_url(self) -> str:
        """返回去除 key 参数值的 URL，仅用于日志。"""

        parts = urlsplit(self.url)
        if not parts.query:
            return self.url
        query = [(k, "***" if k == "key" else v) for k, v in parse_qsl(parts.query, keep_blank_values=True)]
        return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


@dataclass
class CanonicalResponse:
    """返回给调用方的统一响应。

    content 与 error 有且只有一个非空，status_code 为 200/400/500。
    """

    status_code: int
    content: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.error is None):
            raise ValueError("CanonicalResponse requires exactly one of content/error")

    @classmethod
    def success(cls, content: str) -> "CanonicalResponse":
        return cls(status_code=200, content=content)

    @classmethod
    def failure(cls, message: str, status_code: int = 500) -> "CanonicalResponse":
        return cls(status_code=status_code, error=message)

    def to_body(self) -> Dict[str, str]:
        if self.error is not None:
            return {"error": self.error}
        return {"content": self.content}
