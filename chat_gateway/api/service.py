"""对外 API 服务模块。

提供简化的函数接口供上层应用（HTTP 路由、脚本）调用。
"""

from typing import Any, Mapping, Optional

from chat_gateway.dispatch.dispatcher import Dispatcher
from chat_gateway.domain.models import CanonicalResponse


_dispatcher: Optional[Dispatcher] = None


def get_default_dispatcher() -> Dispatcher:
    """获取默认的 Dispatcher 实例（单例，无可变状态）。"""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = Dispatcher()
    return _dispatcher


def handle_chat(payload: Mapping[str, Any]) -> CanonicalResponse:
    """处理一次聊天请求。

    Args:
        payload: 调用方的 JSON 请求体，包含 provider、messages、contextMessage、
            apiKey，以及可选的 ollamaUrl、ollamaModel

    Returns:
        CanonicalResponse，成功为 {content}（200），失败为 {error}（400/500）
    """
    return get_default_dispatcher().dispatch(payload)
