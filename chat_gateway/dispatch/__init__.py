"""请求分发层：选择适配器、执行外呼并映射为统一响应。"""

from chat_gateway.dispatch.dispatcher import Dispatcher, DispatchState

__all__ = ["Dispatcher", "DispatchState"]
