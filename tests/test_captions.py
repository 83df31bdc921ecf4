"""YouTube 자막 제공자 테스트"""
import pytest
from unittest.mock import MagicMock

from youtube_transcript_api._errors import NoTranscriptFound, TranscriptsDisabled

from app.exceptions import NoCaptionsFoundError
from app.services.captions import YouTubeCaptionsProvider


@pytest.mark.asyncio
async def test_fetch_captions_converts_raw_data():
    """라이브러리 응답을 CaptionFragment 목록으로 변환"""
    api = MagicMock()
    api.fetch.return_value.to_raw_data.return_value = [
        {"text": "hello", "start": 0.0, "duration": 1.5},
        {"text": "world", "start": 1.5, "duration": 2.0},
    ]
    provider = YouTubeCaptionsProvider(api=api)

    captions = await provider.fetch_captions("abc123", "en")

    api.fetch.assert_called_once_with("abc123", languages=["en"])
    assert [c.text for c in captions] == ["hello", "world"]
    assert captions[1].start == 1.5


@pytest.mark.asyncio
async def test_fetch_captions_disabled():
    """자막 비활성화는 NoCaptionsFoundError"""
    api = MagicMock()
    api.fetch.side_effect = TranscriptsDisabled("abc123")
    provider = YouTubeCaptionsProvider(api=api)

    with pytest.raises(NoCaptionsFoundError):
        await provider.fetch_captions("abc123", "en")


@pytest.mark.asyncio
async def test_fetch_captions_not_found():
    """요청 언어 자막이 없으면 NoCaptionsFoundError"""
    api = MagicMock()
    api.fetch.side_effect = NoTranscriptFound("abc123", ["en"], MagicMock())
    provider = YouTubeCaptionsProvider(api=api)

    with pytest.raises(NoCaptionsFoundError):
        await provider.fetch_captions("abc123", "en")
