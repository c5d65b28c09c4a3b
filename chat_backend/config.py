# chat_backend/config.py
import os

from dotenv import find_dotenv, load_dotenv

# 先读当前工作目录的 .env，进程环境变量优先
load_dotenv(find_dotenv(usecwd=True))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data.db")

LLM_API_KEY = os.getenv("LLM_API_KEY") or os.getenv("AI21_API_KEY", "")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.ai21.com/studio/v1")
MODEL_NAME = os.getenv("MODEL_NAME", "jamba-mini")
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "256"))
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))

# 同一部署内必须保持一致，否则旧哈希无法校验
PASSWORD_HASH_ROUNDS = int(os.getenv("PASSWORD_HASH_ROUNDS", "29000"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
