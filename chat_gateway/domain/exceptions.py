"""统一业务异常模型。

所有在分发链路中抛出的业务级错误都继承自 BusinessError，
Dispatcher 在边界处统一捕获，并按 http_status 映射为 CanonicalResponse。
"""

from typing import Optional


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "UNSUPPORTED_PROVIDER"）。
        message: 用户可读错误信息，会原样写入 {error} 响应体。
        http_status: 映射到 HTTP 时使用的状态码，默认 500。
        extra: 其他补充字段（例如 provider、path 等）。
    """

    def __init__(self, code: str, message: str, http_status: int = 500, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class UnsupportedProviderError(BusinessError):
    """请求的 provider 标识不在已知集合内，不会发出任何外部调用。"""

    def __init__(self, provider: object):
        super().__init__(
            code="UNSUPPORTED_PROVIDER",
            message=f"Unsupported provider: {provider}",
            http_status=400,
            provider=provider,
        )


class ProviderHttpError(BusinessError):
    """Provider 返回非 2xx 状态码。

    body 保留原始响应文本，不做 JSON 解析，避免丢失厂商的错误信息。
    """

    def __init__(self, provider: str, status_code: int, status_text: str, body: str):
        self.provider = provider
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(
            code="PROVIDER_HTTP_ERROR",
            message=f"{provider} API error: {status_text} - {body}",
            http_status=500,
            provider=provider,
            status_code=status_code,
        )


class AdapterExtractionError(BusinessError):
    """响应体中缺少预期的回复字段路径。"""

    def __init__(self, provider: str, path: str, detail: Optional[str] = None):
        self.provider = provider
        self.path = path
        message = f"{provider} response missing {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(
            code="EXTRACTION_ERROR",
            message=message,
            http_status=500,
            provider=provider,
            path=path,
        )


class NetworkError(BusinessError):
    """网络层错误，例如 DNS 失败、连接被拒、超时等。"""
