# chat_backend/auth.py
import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from chat_backend import models
from chat_backend.config import PASSWORD_HASH_ROUNDS
from chat_backend.errors import (
    DuplicateUser,
    InvalidCredentials,
    PersistenceError,
    UserNotFound,
)

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__default_rounds=PASSWORD_HASH_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


class CredentialStore:
    """
    用户表读写 + 密码哈希。不返回密码或哈希。
    """

    def __init__(self, db: Session):
        self.db = db

    def _find(self, **filters) -> models.User | None:
        try:
            return self.db.query(models.User).filter_by(**filters).first()
        except SQLAlchemyError as exc:
            logger.exception("User lookup failed")
            raise PersistenceError() from exc

    def register(
        self,
        full_name: str,
        username: str,
        password: str,
        email: str | None = None,
    ) -> models.User:
        # 预检查只是提前返回，真正的保证是唯一索引
        if self._find(username=username):
            raise DuplicateUser()
        if email and self._find(email=email):
            raise DuplicateUser("Email already registered")

        user = models.User(
            full_name=full_name,
            username=username,
            email=email or None,
            password_hash=hash_password(password),
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Concurrent registration rejected by unique index: username=%s", username)
            # 唯一索引的报错文本因数据库而异，回查是哪一列冲突
            if email and not self._find(username=username):
                raise DuplicateUser("Email already registered") from exc
            raise DuplicateUser() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Registration insert failed: username=%s", username)
            raise PersistenceError() from exc

        logger.info("Registered user: username=%s", username)
        return user

    def login(self, username: str, password: str) -> models.User:
        user = self._find(username=username)
        if not user:
            raise UserNotFound()

        if not verify_password(password, user.password_hash):
            logger.info("Login rejected: username=%s", username)
            raise InvalidCredentials()

        return user
