# chat_backend/llm.py
import json
import logging
from functools import lru_cache

import openai
from openai import OpenAI

from chat_backend import config
from chat_backend.errors import EmptyReply, ProviderError, TransportError

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    单轮补全：只发一条 user 消息，取第一个 choice 的文本。

    任何失败都抛 ProviderFailure 的子类，由调用方决定是否降级。
    """

    def __init__(
        self,
        client: OpenAI,
        model: str = config.MODEL_NAME,
        max_tokens: int = config.LLM_MAX_TOKENS,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    def complete(self, message: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": message}],
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as exc:
            logger.warning(
                "Completion provider error: status=%s body=%s",
                exc.status_code,
                exc.response.text,
            )
            raise ProviderError(exc.status_code, exc.response.text) from exc
        except openai.APIConnectionError as exc:
            # APITimeoutError 也是 APIConnectionError
            logger.warning("Completion provider unreachable: %s", exc)
            raise TransportError() from exc
        except openai.APIError as exc:
            logger.warning("Completion provider returned an unusable response: %s", exc)
            raise ProviderError(getattr(exc, "status_code", None), str(exc.body or "")) from exc
        except json.JSONDecodeError as exc:
            # 2xx 但 body 不是 JSON
            logger.warning("Completion provider returned a non-JSON body: %s", exc.doc[:500])
            raise ProviderError(None, exc.doc) from exc

        choices = getattr(response, "choices", None)
        first = choices[0] if isinstance(choices, list) and choices else None
        message_obj = getattr(first, "message", None)
        content = getattr(message_obj, "content", None)
        reply = content.strip() if isinstance(content, str) else ""
        if not reply:
            logger.warning("Completion provider returned no content: %s", response)
            raise EmptyReply()

        return reply


@lru_cache(maxsize=1)
def get_completion_client() -> CompletionClient:
    """
    FastAPI 依赖：进程内共享一个 HTTP 客户端
    """
    client = OpenAI(
        api_key=config.LLM_API_KEY,
        base_url=config.LLM_BASE_URL,
        timeout=config.LLM_TIMEOUT_SECONDS,
        max_retries=0,
    )
    return CompletionClient(client)
