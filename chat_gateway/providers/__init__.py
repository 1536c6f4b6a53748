"""LLM Provider 集成层。

该包下的模块负责：
- 定义适配器抽象接口 (base)。
- 维护各厂商的线协议常量 (registry)。
- 提供各厂商的具体实现 (openai_adapter、anthropic_adapter 等)。

ADAPTERS 是 ProviderId 到适配器实例的固定映射，anthropic/claude 指向同一个实例。
"""

from types import MappingProxyType
from typing import Mapping

from chat_gateway.domain.exceptions import UnsupportedProviderError
from chat_gateway.domain.models import ProviderId
from chat_gateway.providers.anthropic_adapter import AnthropicAdapter
from chat_gateway.providers.base import ProviderAdapter
from chat_gateway.providers.gemini_adapter import GeminiAdapter
from chat_gateway.providers.ollama_adapter import OllamaAdapter, ollama_cloud_adapter
from chat_gateway.providers.openai_adapter import OpenAIAdapter


_anthropic = AnthropicAdapter()

ADAPTERS: Mapping[ProviderId, ProviderAdapter] = MappingProxyType({
    ProviderId.OPENAI: OpenAIAdapter(),
    ProviderId.ANTHROPIC: _anthropic,
    ProviderId.CLAUDE: _anthropic,
    ProviderId.GEMINI: GeminiAdapter(),
    ProviderId.OLLAMA: OllamaAdapter(),
    ProviderId.OLLAMA_CLOUD: ollama_cloud_adapter(),
})


def get_adapter(provider: ProviderId, adapters: Mapping[ProviderId, ProviderAdapter] = ADAPTERS) -> ProviderAdapter:
    """按 ProviderId 取适配器，映射表中不存在时抛 UnsupportedProviderError。"""

    try:
        return adapters[provider]
    except KeyError:
        raise UnsupportedProviderError(provider.value) from None
