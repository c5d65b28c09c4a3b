# chat_backend/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from chat_backend.auth import CredentialStore
from chat_backend.db import get_db
from chat_backend.history import ConversationLog
from chat_backend.llm import CompletionClient, get_completion_client
from chat_backend.service import ChatOrchestrator


def get_orchestrator(
    db: Session = Depends(get_db),
    completions: CompletionClient = Depends(get_completion_client),
) -> ChatOrchestrator:
    """
    每个请求一个编排器：db session 按请求创建，模型客户端进程内共享
    """
    return ChatOrchestrator(
        credentials=CredentialStore(db),
        completions=completions,
        conversations=ConversationLog(db),
    )
