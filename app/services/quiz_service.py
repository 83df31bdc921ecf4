import copy
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.exceptions import NoJsonFoundError, QuizParseError
from app.schemas.quiz import QuizQuestion, QuizSynthesis
from app.services import ai_service, quiz_parser

logger = logging.getLogger(__name__)

QUIZ_QUESTION_COUNT = 5

# 모델 응답을 복구할 수 없을 때 반환하는 기본 문제 (자막 내용과 무관)
FALLBACK_QUIZ: list[dict[str, Any]] = [
    {
        "question": "Based on the transcript, what was the main topic discussed?",
        "options": ["Technology", "Education", "Entertainment", "Business"],
        "correct": 0,
    },
    {
        "question": "What key concept was emphasized in the content?",
        "options": ["Innovation", "Learning", "Growth", "Success"],
        "correct": 1,
    },
    {
        "question": "According to the transcript, what approach was recommended?",
        "options": ["Traditional methods", "Modern techniques", "Hybrid approach", "Custom solutions"],
        "correct": 2,
    },
    {
        "question": "What was the primary goal mentioned?",
        "options": ["Efficiency", "Quality", "Understanding", "Implementation"],
        "correct": 2,
    },
    {
        "question": "What conclusion can be drawn from the content?",
        "options": ["More research needed", "Goals achieved", "Progress made", "Challenges remain"],
        "correct": 2,
    },
]

_quiz_adapter = TypeAdapter(list[QuizQuestion])


def get_fallback_quiz() -> list[dict[str, Any]]:
    """기본 문제 사본 반환 (호출 간 상태 공유 방지)"""
    return copy.deepcopy(FALLBACK_QUIZ)


def validate_quiz(questions: list[Any]) -> list[dict[str, Any]]:
    """문제 수, 선택지 수, 정답 인덱스 검증

    Raises:
        QuizParseError: 구조가 맞지 않는 경우
    """
    if len(questions) != QUIZ_QUESTION_COUNT:
        raise QuizParseError(f"문제 수가 {QUIZ_QUESTION_COUNT}개가 아닙니다: {len(questions)}개")
    try:
        validated = _quiz_adapter.validate_python(questions)
    except ValidationError as e:
        raise QuizParseError(f"문제 형식 검증 실패: {e.error_count()}개 오류") from e
    return [question.model_dump() for question in validated]


def build_quiz_from_text(text: str, strict: bool | None = None) -> QuizSynthesis:
    """모델 응답 텍스트에서 퀴즈 생성 (실패 시 기본 문제로 대체)"""
    if strict is None:
        strict = settings.quiz_strict_validation

    try:
        questions = quiz_parser.parse_quiz_json(text)
        if strict:
            questions = validate_quiz(questions)
    except (NoJsonFoundError, QuizParseError) as e:
        logger.warning(f"퀴즈 JSON 추출 실패, 기본 문제로 대체: kind={e.kind.value}, message={e.message}")
        return QuizSynthesis(questions=get_fallback_quiz(), is_fallback=True)

    return QuizSynthesis(questions=questions)


async def synthesize_quiz_with_provenance(transcript: str) -> QuizSynthesis:
    """자막으로 퀴즈 생성 (폴백 여부 포함)

    API 키/HTTP 상태 관련 예외만 전파되고, JSON 추출/파싱 실패는 기본 문제로 흡수된다.
    """
    logger.info("자막으로 퀴즈 생성 시작")
    content = await ai_service.request_quiz_completion(transcript)
    synthesis = build_quiz_from_text(content)
    logger.info(f"퀴즈 생성 완료: 문제 수={len(synthesis.questions)}, 기본 문제 사용={synthesis.is_fallback}")
    return synthesis


async def synthesize_quiz(transcript: str) -> list[Any]:
    """자막으로 퀴즈 생성"""
    synthesis = await synthesize_quiz_with_provenance(transcript)
    return synthesis.questions
