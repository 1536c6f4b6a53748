"""Chat Gateway 顶层包。

该包把一次统一格式的聊天请求分发到不同的 LLM Provider
（OpenAI、Anthropic、Gemini、Ollama），并把各家响应归一化为
{content} 或 {error} 的单一形态。
"""

from chat_gateway.api.service import handle_chat
from chat_gateway.dispatch.dispatcher import Dispatcher

__all__ = ["Dispatcher", "handle_chat"]
