# chat_backend/errors.py
"""
业务异常：路由层按 status_code / message 转成 JSON 响应
"""


class ChatServiceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(ChatServiceError):
    status_code = 400
    default_message = "All fields required"


class DuplicateUser(ChatServiceError):
    status_code = 400
    default_message = "User already exists"


class UserNotFound(ChatServiceError):
    status_code = 404
    default_message = "User not found"


class InvalidCredentials(ChatServiceError):
    status_code = 401
    default_message = "Incorrect password"


class PersistenceError(ChatServiceError):
    status_code = 500
    default_message = "Storage unavailable"


# =========================
# 模型服务失败（chat 内部吞掉并降级）
# =========================
class ProviderFailure(ChatServiceError):
    status_code = 502
    default_message = "Completion provider unavailable"


class ProviderError(ProviderFailure):
    def __init__(self, status: int | None, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"Provider error: {status}")


class EmptyReply(ProviderFailure):
    default_message = "Provider returned no content"


class TransportError(ProviderFailure):
    default_message = "Could not reach completion provider"
