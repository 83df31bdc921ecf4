import logging

from app.core.config import settings
from app.exceptions import (
    BaseAppError,
    InvalidVideoIdError,
    NoCaptionsFoundError,
    TranscriptExtractionError,
    TranscriptTooShortError,
)
from app.schemas.transcript import (
    CaptionFragment,
    TranscriptFailure,
    TranscriptResult,
    TranscriptSuccess,
)
from app.services.captions import CaptionsProvider, YouTubeCaptionsProvider

logger = logging.getLogger(__name__)

# 자막 추출 실패로 그대로 반환하는 에러 (그 외는 TranscriptExtractionError로 변환)
TRANSCRIPT_ERRORS = (InvalidVideoIdError, NoCaptionsFoundError, TranscriptTooShortError)


def join_captions(captions: list[CaptionFragment]) -> str:
    """자막 조각을 제공 순서대로 공백 하나로 연결"""
    return " ".join(caption.text for caption in captions)


def count_words(text: str) -> int:
    return len(text.split())


async def get_transcript(
    video_id: object,
    provider: CaptionsProvider | None = None,
) -> TranscriptResult:
    """YouTube 동영상 자막 추출

    예외를 던지지 않고 항상 TranscriptSuccess 또는 TranscriptFailure를 반환한다.
    단어 수가 기준 미만인 자막도 TranscriptFailure로 반환된다.
    """
    try:
        if not video_id or not isinstance(video_id, str):
            raise InvalidVideoIdError()

        provider = provider or YouTubeCaptionsProvider()
        captions = await provider.fetch_captions(video_id, settings.transcript_language)
        if not captions:
            raise NoCaptionsFoundError()

        transcript = join_captions(captions)

        word_count = count_words(transcript)
        if word_count < settings.min_transcript_words:
            raise TranscriptTooShortError()

        logger.info(f"자막 추출 완료: video_id={video_id}, 단어 수={word_count}")
        return TranscriptSuccess(transcript=transcript)

    except BaseAppError as e:
        if not isinstance(e, TRANSCRIPT_ERRORS):
            logger.warning(
                f"자막 추출 중 분류되지 않은 에러: video_id={video_id!r}, kind={e.kind.value}"
            )
            error = TranscriptExtractionError()
        else:
            error = e
        logger.warning(f"자막 추출 실패: video_id={video_id!r}, kind={error.kind.value}")
        return TranscriptFailure.from_error(error)
    except Exception as e:
        logger.error(
            f"자막 추출 중 예외 발생: video_id={video_id!r}, error_type={type(e).__name__}",
            exc_info=True,
        )
        return TranscriptFailure.from_error(TranscriptExtractionError())
