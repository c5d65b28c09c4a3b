# chat_backend/service.py
import logging

from chat_backend.auth import CredentialStore
from chat_backend.errors import MissingField, ProviderFailure
from chat_backend.history import ConversationLog
from chat_backend.llm import CompletionClient

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I couldn't process that right now. Please try again later."


class ChatOrchestrator:
    """
    四个操作（register / login / chat / history）的编排层。

    不持有请求之间的状态；存储和模型客户端都从构造函数注入，
    测试里可以直接换成假对象。

    注意两种失败的处理不一样：
    - 模型服务失败：吞掉，用 FALLBACK_REPLY 代替
    - 存储失败：PersistenceError 继续往上抛，由路由返回 500
    """

    def __init__(
        self,
        credentials: CredentialStore,
        completions: CompletionClient,
        conversations: ConversationLog,
    ):
        self.credentials = credentials
        self.completions = completions
        self.conversations = conversations

    def register(
        self,
        full_name: str | None,
        username: str | None,
        password: str | None,
        email: str | None = None,
    ) -> dict:
        if not full_name or not username or not password:
            raise MissingField()

        self.credentials.register(full_name, username, password, email=email)
        return {"success": True, "message": "Registration successful"}

    def login(self, username: str | None, password: str | None) -> dict:
        if not username or not password:
            raise MissingField()

        user = self.credentials.login(username, password)
        return {"success": True, "message": "Login successful", "username": user.username}

    def chat(self, message: str | None, username: str | None = None) -> str:
        if not message:
            raise MissingField("Message required")

        try:
            reply = self.completions.complete(message)
        except ProviderFailure as exc:
            logger.warning("Chat degraded (%s): %s", type(exc).__name__, exc.message)
            reply = FALLBACK_REPLY

        if username:
            self.conversations.append(username, message, reply)

        return reply

    def history(self, username: str | None) -> list:
        if not username:
            return []
        return self.conversations.history(username)
