"""领域层模型与协议。

包含：
- models: 统一的 ChatMessage / UnifiedRequest / CanonicalResponse 模型。
- normalizer: 原始请求到 UnifiedRequest 的归一化与历史窗口裁剪。
- exceptions: 业务异常类型定义。
"""
