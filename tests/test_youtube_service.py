"""YouTube Service (자막 추출) 테스트"""
import pytest
from unittest.mock import AsyncMock

from app.core.config import settings
from app.exceptions import ErrorKind, NoCaptionsFoundError, UpstreamError
from app.schemas.transcript import TranscriptFailure, TranscriptSuccess
from app.services import youtube_service


@pytest.mark.asyncio
@pytest.mark.parametrize("video_id", [None, "", 123, ["abc"], {"id": "abc"}])
async def test_get_transcript_invalid_video_id(video_id, make_provider, long_captions):
    """문자열이 아니거나 빈 video_id는 제공자 호출 없이 실패"""
    provider = make_provider(long_captions)

    result = await youtube_service.get_transcript(video_id, provider)

    assert isinstance(result, TranscriptFailure)
    assert result.kind == ErrorKind.INVALID_VIDEO_ID
    assert result.error == "Invalid YouTube video ID provided"
    assert provider.calls == []


@pytest.mark.asyncio
async def test_get_transcript_no_captions(make_provider):
    """자막 조각이 없으면 자막 없음 실패"""
    result = await youtube_service.get_transcript("abc123", make_provider([]))

    assert not result.ok
    assert result.kind == ErrorKind.NO_CAPTIONS_FOUND
    assert "No captions" in result.error


@pytest.mark.asyncio
async def test_get_transcript_provider_no_captions_error(make_provider):
    """제공자의 자막 없음 예외도 같은 실패로 변환"""
    provider = make_provider(error=NoCaptionsFoundError())

    result = await youtube_service.get_transcript("abc123", provider)

    assert result.kind == ErrorKind.NO_CAPTIONS_FOUND


@pytest.mark.asyncio
async def test_get_transcript_too_short(make_provider, short_captions):
    """50단어 미만이면 예외 없이 신뢰 부족 실패 반환"""
    result = await youtube_service.get_transcript("abc123", make_provider(short_captions))

    assert isinstance(result, TranscriptFailure)
    assert result.kind == ErrorKind.TRANSCRIPT_TOO_SHORT
    assert result.error == "Not enough reliable information in the transcript"


@pytest.mark.asyncio
async def test_get_transcript_exactly_threshold(make_provider):
    """정확히 50단어면 성공"""
    texts = [f"w{i}" for i in range(50)]

    result = await youtube_service.get_transcript("abc123", make_provider(texts))

    assert isinstance(result, TranscriptSuccess)
    assert result.word_count == 50


@pytest.mark.asyncio
async def test_get_transcript_success_preserves_order(make_provider, long_captions):
    """자막 조각을 순서대로 공백 하나로 연결"""
    provider = make_provider(long_captions)

    result = await youtube_service.get_transcript("abc123", provider)

    assert isinstance(result, TranscriptSuccess)
    assert result.transcript == " ".join(long_captions)
    assert result.transcript.startswith("word0 word1 word2 word3")
    assert provider.calls == [("abc123", settings.transcript_language)]


@pytest.mark.asyncio
async def test_get_transcript_requests_configured_language(monkeypatch, make_provider, long_captions):
    """설정된 자막 언어로 제공자 호출"""
    monkeypatch.setattr(settings, "transcript_language", "ko")
    provider = make_provider(long_captions)

    await youtube_service.get_transcript("abc123", provider)

    assert provider.calls == [("abc123", "ko")]


@pytest.mark.asyncio
async def test_get_transcript_unexpected_error(make_provider):
    """분류되지 않은 예외는 일반 실패로 변환되고 전파되지 않음"""
    provider = make_provider(error=ConnectionError("network down"))

    result = await youtube_service.get_transcript("abc123", provider)

    assert result.kind == ErrorKind.TRANSCRIPT_EXTRACTION_FAILED
    assert result.error == "Failed to extract transcript. Please try another video."


@pytest.mark.asyncio
async def test_get_transcript_uses_default_provider(monkeypatch, long_captions):
    """제공자를 넘기지 않으면 YouTube 제공자 사용"""
    from app.schemas.transcript import CaptionFragment

    fetch = AsyncMock(return_value=[CaptionFragment(text=t) for t in long_captions])
    monkeypatch.setattr(youtube_service.YouTubeCaptionsProvider, "fetch_captions", fetch)

    result = await youtube_service.get_transcript("abc123")

    assert result.ok
    fetch.assert_awaited_once()


def test_failure_to_error_keeps_kind_and_message():
    """실패 결과를 HTTP 계층용 예외로 변환"""
    failure = TranscriptFailure(
        kind=ErrorKind.TRANSCRIPT_TOO_SHORT,
        error="Not enough reliable information in the transcript",
    )

    error = failure.to_error()

    assert error.kind == ErrorKind.TRANSCRIPT_TOO_SHORT
    assert error.message == failure.error
    assert error.status_code == 404


@pytest.mark.asyncio
async def test_get_transcript_folds_unrelated_app_error(make_provider):
    """자막과 무관한 앱 에러는 일반 추출 실패로 변환"""
    provider = make_provider(error=UpstreamError(502, "bad gateway"))

    result = await youtube_service.get_transcript("abc123", provider)

    assert result.kind == ErrorKind.TRANSCRIPT_EXTRACTION_FAILED
    error = result.to_error()
    assert error.status_code == 404
    assert error.message == "Failed to extract transcript. Please try another video."


def test_failure_to_error_unmapped_kind():
    """매핑 없는 종류도 KeyError 없이 추출 실패 예외로 변환"""
    failure = TranscriptFailure(kind=ErrorKind.UPSTREAM_ERROR, error="x")

    assert failure.to_error().kind == ErrorKind.TRANSCRIPT_EXTRACTION_FAILED
