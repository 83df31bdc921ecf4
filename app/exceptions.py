"""커스텀 예외 클래스 정의"""
from enum import Enum


class ErrorKind(str, Enum):
    """실패 지점에서 결정되는 에러 종류"""
    INVALID_VIDEO_ID = "invalid_video_id"
    NO_CAPTIONS_FOUND = "no_captions_found"
    TRANSCRIPT_TOO_SHORT = "transcript_too_short"
    TRANSCRIPT_EXTRACTION_FAILED = "transcript_extraction_failed"
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_ERROR = "upstream_error"
    NO_JSON_FOUND = "no_json_found"
    QUIZ_PARSE_FAILED = "quiz_parse_failed"
    INVALID_REQUEST = "invalid_request"


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    kind: ErrorKind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidRequestError(BaseAppError):
    """잘못된 요청일 때 발생하는 예외 (400)"""

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class InvalidVideoIdError(BaseAppError):
    """동영상 ID가 없거나 문자열이 아닐 때 (400)"""

    kind = ErrorKind.INVALID_VIDEO_ID

    def __init__(self, message: str = "Invalid YouTube video ID provided"):
        super().__init__(message, status_code=400)


class NoCaptionsFoundError(BaseAppError):
    """자막을 찾을 수 없을 때 (404)"""

    kind = ErrorKind.NO_CAPTIONS_FOUND

    def __init__(self, message: str = "No captions available for this video. Please try a video with subtitles."):
        super().__init__(message, status_code=404)


class TranscriptTooShortError(BaseAppError):
    """자막 단어 수가 신뢰 기준 미만일 때 (404)"""

    kind = ErrorKind.TRANSCRIPT_TOO_SHORT

    def __init__(self, message: str = "Not enough reliable information in the transcript"):
        super().__init__(message, status_code=404)


class TranscriptExtractionError(BaseAppError):
    """분류되지 않은 자막 추출 실패 (404)"""

    kind = ErrorKind.TRANSCRIPT_EXTRACTION_FAILED

    def __init__(self, message: str = "Failed to extract transcript. Please try another video."):
        super().__init__(message, status_code=404)


class MissingCredentialError(BaseAppError):
    """OpenRouter API 키가 설정되지 않았을 때 (400)"""

    kind = ErrorKind.MISSING_CREDENTIAL

    def __init__(self, message: str = "OpenRouter API key not configured. Please add your API key to the .env file."):
        super().__init__(message, status_code=400)


class InvalidCredentialError(BaseAppError):
    """OpenRouter가 401을 반환했을 때 (400)"""

    kind = ErrorKind.INVALID_CREDENTIAL

    def __init__(self, message: str = "Invalid OpenRouter API key. Please check your API key in the .env file."):
        super().__init__(message, status_code=400)


class RateLimitedError(BaseAppError):
    """OpenRouter가 429를 반환했을 때 (429)"""

    kind = ErrorKind.RATE_LIMITED

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message, status_code=429)


class UpstreamError(BaseAppError):
    """OpenRouter 호출 실패 (500)

    사용자 메시지는 고정이며, 상태 코드와 응답 본문은 별도 필드로 보관한다.
    """

    kind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, upstream_status: int | None = None, upstream_body: str = ""):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__("Failed to generate quiz questions. Please try again.", status_code=500)


class NoJsonFoundError(BaseAppError):
    """모델 응답에서 JSON 후보를 찾지 못함 (내부용, 폴백으로 흡수)"""

    kind = ErrorKind.NO_JSON_FOUND

    def __init__(self, message: str = "Could not find valid JSON in AI response"):
        super().__init__(message, status_code=500)


class QuizParseError(BaseAppError):
    """복구 후에도 JSON 파싱 실패 (내부용, 폴백으로 흡수)"""

    kind = ErrorKind.QUIZ_PARSE_FAILED

    def __init__(self, message: str = "Failed to parse quiz JSON from AI response"):
        super().__init__(message, status_code=500)


_ERRORS_BY_KIND: dict[ErrorKind, type[BaseAppError]] = {
    cls.kind: cls
    for cls in (
        InvalidRequestError,
        InvalidVideoIdError,
        NoCaptionsFoundError,
        TranscriptTooShortError,
        TranscriptExtractionError,
        MissingCredentialError,
        InvalidCredentialError,
        RateLimitedError,
        NoJsonFoundError,
        QuizParseError,
    )
}


def error_for_kind(kind: ErrorKind, message: str) -> BaseAppError:
    """에러 종류와 메시지로 예외 인스턴스 생성 (매핑 없는 종류는 TranscriptExtractionError)"""
    error_cls = _ERRORS_BY_KIND.get(kind)
    if error_cls is None:
        return TranscriptExtractionError()
    return error_cls(message)
