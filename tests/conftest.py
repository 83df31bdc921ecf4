"""공용 테스트 픽스처"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.schemas.transcript import CaptionFragment


class FakeCaptionsProvider:
    """고정 자막을 반환하는 테스트용 자막 제공자"""

    def __init__(self, texts: list[str] | None = None, error: Exception | None = None):
        self.texts = texts or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def fetch_captions(self, video_id: str, language: str) -> list[CaptionFragment]:
        self.calls.append((video_id, language))
        if self.error is not None:
            raise self.error
        return [
            CaptionFragment(text=text, start=float(i), duration=1.0)
            for i, text in enumerate(self.texts)
        ]


def make_words(count: int, prefix: str = "word") -> list[str]:
    """count개의 단어를 자막 조각 3개 단위로 나눈 목록"""
    words = [f"{prefix}{i}" for i in range(count)]
    return [" ".join(words[i : i + 3]) for i in range(0, count, 3)]


@pytest.fixture
def api_key(monkeypatch):
    """테스트용 OpenRouter API 키 설정"""
    monkeypatch.setattr(settings, "openrouter_api_key", "sk-or-test-key")
    return "sk-or-test-key"


@pytest.fixture
def client():
    """FastAPI 테스트 클라이언트"""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_provider():
    """FakeCaptionsProvider 생성 함수"""
    return FakeCaptionsProvider


@pytest.fixture
def long_captions():
    """60단어 자막 조각"""
    return make_words(60)


@pytest.fixture
def short_captions():
    """30단어 자막 조각"""
    return make_words(30)
