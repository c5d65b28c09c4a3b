# chat_backend/history.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chat_backend import models
from chat_backend.errors import PersistenceError

logger = logging.getLogger(__name__)


class ConversationLog:
    def __init__(self, db: Session):
        self.db = db

    def append(self, username: str, user_message: str, bot_reply: str) -> models.ChatEntry:
        entry = models.ChatEntry(
            username=username,
            user_message=user_message,
            bot_reply=bot_reply,
        )
        try:
            self.db.add(entry)
            self.db.commit()
        except SQLAlchemyError as exc:
            # 不重试、不回滚已生成的回复
            self.db.rollback()
            logger.exception("Failed to save chat entry: username=%s", username)
            raise PersistenceError() from exc
        return entry

    def history(self, username: str | None) -> list[models.ChatEntry]:
        if not username:
            return []

        try:
            return (
                self.db.query(models.ChatEntry)
                .filter(models.ChatEntry.username == username)
                .order_by(models.ChatEntry.created_at.asc(), models.ChatEntry.id.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            logger.exception("Failed to load chat history: username=%s", username)
            raise PersistenceError() from exc
