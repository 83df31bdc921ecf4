import logging

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.exceptions import (
    InvalidCredentialError,
    MissingCredentialError,
    RateLimitedError,
    UpstreamError,
)
from app.schemas.ai import ChatCompletionRequest, ChatCompletionResponse, ChatMessage

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your_openrouter_api_key_here"

QUIZ_PROMPT_TEMPLATE = """Based on the following YouTube video transcript, generate exactly 5 multiple-choice quiz questions to help users practice and test their understanding of the content.

IMPORTANT: Respond ONLY with valid JSON. Do not include any explanations, code blocks, or additional text.

Format your response as a JSON array with this exact structure:
[
  {{
    "question": "Question text here",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correct": 0
  }}
]

Requirements:
- "correct" is the index (0-3) of the correct answer
- Use simple, clear question text without special characters
- Avoid quotes within question text and options
- Make questions based directly on the transcript content
- Include varied difficulty levels
- Create plausible wrong answers

Transcript:
{transcript}"""


def get_api_key() -> str:
    """OpenRouter API 키 조회 (미설정 또는 placeholder면 MissingCredentialError)"""
    api_key = settings.openrouter_api_key
    if not api_key or api_key == PLACEHOLDER_API_KEY:
        raise MissingCredentialError()
    return api_key


def build_quiz_prompt(transcript: str) -> str:
    """자막 앞부분을 포함한 퀴즈 생성 프롬프트 (토큰 제한 대응)"""
    return QUIZ_PROMPT_TEMPLATE.format(
        transcript=transcript[: settings.prompt_transcript_chars],
    )


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return

    body = response.text
    logger.error(f"OpenRouter API 에러 응답: status_code={response.status_code}, body={body[:500]}")

    if response.status_code == 401:
        raise InvalidCredentialError()
    if response.status_code == 429:
        raise RateLimitedError()
    raise UpstreamError(upstream_status=response.status_code, upstream_body=body)


async def request_quiz_completion(
    transcript: str,
    client: httpx.AsyncClient | None = None,
) -> str:
    """OpenRouter에 퀴즈 생성 요청 후 모델 응답 텍스트 반환 (재시도 없음)"""
    api_key = get_api_key()

    payload = ChatCompletionRequest(
        model=settings.openrouter_model,
        messages=[ChatMessage(role="user", content=build_quiz_prompt(transcript))],
    )
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=settings.openrouter_timeout)

    try:
        response = await client.post(
            settings.openrouter_api_url,
            json=payload.model_dump(),
            headers=headers,
        )
    except httpx.HTTPError as e:
        logger.error(f"OpenRouter API 호출 실패: error_type={type(e).__name__}, error_message={str(e)[:200]}")
        raise UpstreamError(upstream_body=str(e)) from e
    finally:
        if owns_client:
            await client.aclose()

    _raise_for_status(response)

    try:
        completion = ChatCompletionResponse.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.error(f"OpenRouter 응답 형식 오류: {str(e)[:200]}")
        raise UpstreamError(upstream_status=response.status_code, upstream_body=response.text) from e

    content = completion.content
    logger.debug(f"AI 응답: {content}")
    return content
