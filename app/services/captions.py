import asyncio
import logging
from typing import Protocol

from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api._errors import CouldNotRetrieveTranscript

from app.exceptions import NoCaptionsFoundError
from app.schemas.transcript import CaptionFragment

logger = logging.getLogger(__name__)


class CaptionsProvider(Protocol):
    """자막 제공자 인터페이스"""

    async def fetch_captions(self, video_id: str, language: str) -> list[CaptionFragment]:
        ...


class YouTubeCaptionsProvider:
    """youtube-transcript-api 기반 자막 제공자"""

    def __init__(self, api: YouTubeTranscriptApi | None = None):
        self._api = api or YouTubeTranscriptApi()

    async def fetch_captions(self, video_id: str, language: str) -> list[CaptionFragment]:
        """지정 언어 자막 조각 목록 조회 (자막 없음/비활성화 시 NoCaptionsFoundError)"""
        # youtube-transcript-api는 동기 API이므로 executor로 실행
        loop = asyncio.get_running_loop()
        try:
            fetched = await loop.run_in_executor(
                None,
                lambda: self._api.fetch(video_id, languages=[language]),
            )
        except CouldNotRetrieveTranscript as e:
            logger.info(f"자막 조회 실패: video_id={video_id}, error_type={type(e).__name__}")
            raise NoCaptionsFoundError() from e

        return [CaptionFragment(**item) for item in fetched.to_raw_data()]


def get_captions_provider() -> CaptionsProvider:
    """기본 자막 제공자 (FastAPI 의존성)"""
    return YouTubeCaptionsProvider()
