"""Provider 线协议配置。

本模块集中登记各厂商的固定参数：端点、模型名、版本头与共享生成参数。
适配器只从这里读取常量，升级模型或切换端点时只需修改本文件。"""

from dataclasses import dataclass
from typing import Optional


# 各适配器共享的生成参数
MAX_TOKENS = 1000
TEMPERATURE = 0.7


@dataclass(frozen=True)
class ProviderConfig:
    """单个 Provider 的线协议配置。"""

    name: str
    endpoint: Optional[str]
    model: str
    api_version: Optional[str] = None


OPENAI_CONFIG = ProviderConfig(
    name="OpenAI",
    endpoint="https://api.openai.com/v1/chat/completions",
    model="gpt-4",
)

ANTHROPIC_CONFIG = ProviderConfig(
    name="Anthropic",
    endpoint="https://api.anthropic.com/v1/messages",
    model="claude-3-5-sonnet-20241022",
    api_version="2023-06-01",
)

# Gemini 的模型名写在 URL 路径里，key 以 query 参数传递
GEMINI_CONFIG = ProviderConfig(
    name="Gemini",
    endpoint="https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
    model="gemini-2.5-flash",
)

# Ollama 的地址由调用方（ollamaUrl）或配置决定
OLLAMA_CONFIG = ProviderConfig(
    name="Ollama",
    endpoint=None,
    model="llama3.3:latest",
)

OLLAMA_CLOUD_CONFIG = ProviderConfig(
    name="Ollama Cloud",
    endpoint=None,
    model="llama3.3:latest",
)
