import httpx
import logging
from typing import Optional, Dict, Any

from app.core.config import settings


logger = logging.getLogger(__name__)


class LLMClientError(Exception):
    """LLM 호출 실패"""
    pass


class OpenAIClient:
    """OpenAI Chat Completions HTTP 클라이언트"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_url = settings.OPENAI_API_URL
        self.model = settings.OPENAI_MODEL
        self.max_tokens = settings.OPENAI_MAX_TOKENS
        self.client = httpx.AsyncClient(
            timeout=settings.OPENAI_TIMEOUT,
            transport=transport,
            headers={
                'Authorization': f'Bearer {settings.OPENAI_API_KEY}',
                'Content-Type': 'application/json'
            }
        )
        logger.info(f"OpenAI 클라이언트 초기화: model={self.model}")

    async def chat_completion(self, system_prompt: str, user_prompt: str) -> str:
        """시스템/사용자 프롬프트로 응답 텍스트 생성

        Returns:
            str: 첫 번째 choice 의 메시지 (없으면 빈 문자열)

        Raises:
            LLMClientError: 네트워크 오류, 2xx 이외 응답, 응답 형식 오류
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt}
            ],
            "max_tokens": self.max_tokens
        }

        try:
            response = await self.client.post(self.api_url, json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"OpenAI 호출 실패: HTTP {e.response.status_code} {e.response.text[:200]}")
            raise LLMClientError(f"OpenAI 응답 오류: HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"OpenAI 호출 실패: {e}")
            raise LLMClientError(str(e)) from e

        try:
            choices = result.get("choices") or []
            if not choices:
                return ""
            message = choices[0].get("message") or {}
            content = message.get("content") or ""
            return content.strip()
        except (AttributeError, TypeError) as e:
            raise LLMClientError(f"OpenAI 응답 형식 오류: {e}") from e

    async def close(self):
        await self.client.aclose()


_openai_client: Optional[OpenAIClient] = None


async def get_openai_client() -> OpenAIClient:
    """OpenAI 클라이언트 의존성 주입"""
    global _openai_client
    if _openai_client is None:
        _openai_client = OpenAIClient()
    return _openai_client


async def close_openai_client():
    global _openai_client
    if _openai_client:
        await _openai_client.close()
        _openai_client = None
