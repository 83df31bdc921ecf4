from app.services.ai_service import build_quiz_prompt, request_quiz_completion
from app.services.captions import (
    CaptionsProvider,
    YouTubeCaptionsProvider,
    get_captions_provider,
)
from app.services.quiz_parser import (
    extract_json_candidate,
    find_bracketed_array,
    find_fenced_block,
    parse_quiz_json,
    repair_json,
)
from app.services.quiz_service import (
    build_quiz_from_text,
    get_fallback_quiz,
    synthesize_quiz,
    synthesize_quiz_with_provenance,
)
from app.services.youtube_service import get_transcript

__all__ = [
    "build_quiz_prompt",
    "request_quiz_completion",
    "CaptionsProvider",
    "YouTubeCaptionsProvider",
    "get_captions_provider",
    "extract_json_candidate",
    "find_bracketed_array",
    "find_fenced_block",
    "parse_quiz_json",
    "repair_json",
    "build_quiz_from_text",
    "get_fallback_quiz",
    "synthesize_quiz",
    "synthesize_quiz_with_provenance",
    "get_transcript",
]
