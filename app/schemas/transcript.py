from typing import Any, Literal

from pydantic import BaseModel, Field

from app.exceptions import BaseAppError, ErrorKind, error_for_kind


class CaptionFragment(BaseModel):
    """자막 조각 스키마 (외부 자막 제공자 응답)"""
    text: str = Field(..., description="자막 텍스트")
    start: float = Field(0.0, description="시작 시각 (초)")
    duration: float = Field(0.0, description="지속 시간 (초)")


class TranscriptSuccess(BaseModel):
    """자막 추출 성공 결과"""
    ok: Literal[True] = True
    transcript: str

    @property
    def word_count(self) -> int:
        return len(self.transcript.split())


class TranscriptFailure(BaseModel):
    """자막 추출 실패 결과 (예외 대신 반환)"""
    ok: Literal[False] = False
    kind: ErrorKind
    error: str

    def to_error(self) -> BaseAppError:
        """HTTP 계층용 예외로 변환"""
        return error_for_kind(self.kind, self.error)

    @classmethod
    def from_error(cls, exc: BaseAppError) -> "TranscriptFailure":
        return cls(kind=exc.kind, error=exc.message)


TranscriptResult = TranscriptSuccess | TranscriptFailure


class TranscriptRequest(BaseModel):
    """자막 추출 요청 스키마

    필드명만 videoId(camelCase)로 받는다. 경로는 /api/v1/transcript이고
    에러는 {"detail": ...} 형식이며 잘못된 ID는 400으로 응답한다.
    """
    video_id: Any = Field(None, alias="videoId", description="YouTube 동영상 ID (검증은 서비스에서 수행)")

    model_config = {"populate_by_name": True}


class TranscriptResponse(BaseModel):
    """자막 추출 응답 스키마"""
    success: bool = True
    message: str = "Transcript extracted successfully"
    video_id: str = Field(..., alias="videoId")
    transcript: str
    transcript_length: int = Field(..., alias="transcriptLength")
    word_count: int = Field(..., alias="wordCount")

    model_config = {"populate_by_name": True}
