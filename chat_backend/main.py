# chat_backend/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_backend import models  # noqa: F401 关键：确保 ORM 模型被加载
from chat_backend.config import CORS_ORIGINS, LOG_LEVEL
from chat_backend.db import Base, engine
from chat_backend.routes.auth_routes import router as auth_router
from chat_backend.routes.chat_routes import router as chat_router

logging.basicConfig(level=LOG_LEVEL, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)

# =========================
# App 基本信息
# =========================
app = FastAPI(
    title="Chat Backend",
    version="0.1.0",
    description="用户注册/登录 + 代理大模型对话 + 按用户保存聊天记录",
)

# =========================
# 中间件
# =========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================
# 启动时建表
# =========================
@app.on_event("startup")
def on_startup() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready: %s", engine.url.render_as_string(hide_password=True))

# =========================
# 路由注册
# =========================
app.include_router(auth_router, tags=["auth"])
app.include_router(chat_router, prefix="/api", tags=["chat"])
