from app.schemas.ai import (
    ChatChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
)
from app.schemas.quiz import (
    QuizGenerateRequest,
    QuizGenerateResponse,
    QuizQuestion,
    QuizSynthesis,
)
from app.schemas.transcript import (
    CaptionFragment,
    TranscriptFailure,
    TranscriptRequest,
    TranscriptResponse,
    TranscriptResult,
    TranscriptSuccess,
)

__all__ = [
    "ChatMessage",
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "QuizQuestion",
    "QuizSynthesis",
    "QuizGenerateRequest",
    "QuizGenerateResponse",
    "CaptionFragment",
    "TranscriptSuccess",
    "TranscriptFailure",
    "TranscriptResult",
    "TranscriptRequest",
    "TranscriptResponse",
]
