"""모델 응답 텍스트에서 퀴즈 JSON 배열 추출 및 복구

LLM 응답은 설명 문장, 코드 블록, 후행 쉼표 등이 섞인 "JSON 비슷한" 텍스트인 경우가 많다.
추출 전략을 순서대로 시도해 JSON 후보 문자열을 찾고, 파싱에 실패하면 한 번 복구 후 재시도한다.
모든 함수는 입력에만 의존하므로 같은 텍스트에 대해 항상 같은 결과를 낸다.
"""
import json
import logging
import re
from typing import Any, Callable

from app.exceptions import NoJsonFoundError, QuizParseError

logger = logging.getLogger(__name__)

# 첫 '['부터 마지막 ']'까지 (greedy)
_BRACKETED_ARRAY_RE = re.compile(r"\[[\s\S]*\]")
# ``` 또는 ```json 코드 블록 내부 (태그 뒤 줄바꿈 필수, 다른 언어 태그는 제외)
_FENCED_BLOCK_RE = re.compile(r"```(?:json)?[ \t]*\n([\s\S]*?)\s*```", re.IGNORECASE)

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_SPLIT_STRING_RE = re.compile(r'"\s*\n\s*"')
_WHITESPACE_RE = re.compile(r"\s+")

ExtractionStrategy = Callable[[str], str | None]


def find_bracketed_array(text: str) -> str | None:
    """가장 넓은 [...] 구간 추출 (모델이 앞에 설명을 붙이는 경우 대응)"""
    match = _BRACKETED_ARRAY_RE.search(text)
    return match.group(0) if match else None


def find_fenced_block(text: str) -> str | None:
    """마크다운 코드 블록 내부 추출"""
    match = _FENCED_BLOCK_RE.search(text)
    if not match:
        return None
    return match.group(1) or None


EXTRACTION_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    find_bracketed_array,
    find_fenced_block,
)


def extract_json_candidate(text: str) -> str:
    """추출 전략을 순서대로 적용해 첫 번째 JSON 후보 반환"""
    for strategy in EXTRACTION_STRATEGIES:
        candidate = strategy(text)
        if candidate is not None:
            logger.debug(f"JSON 후보 추출: strategy={strategy.__name__}, 길이={len(candidate)}")
            return candidate
    raise NoJsonFoundError()


def repair_json(candidate: str) -> str:
    """자주 발생하는 JSON 오류 복구 (적용 순서 고정)"""
    repaired = _TRAILING_COMMA_RE.sub(r"\1", candidate)
    repaired = repaired.replace('\\"', '"')
    repaired = _SPLIT_STRING_RE.sub('" "', repaired)
    repaired = repaired.replace("\n", " ")
    repaired = _WHITESPACE_RE.sub(" ", repaired)
    return repaired.strip()


def _load_array(candidate: str) -> list[Any]:
    data = json.loads(candidate)
    if not isinstance(data, list):
        raise QuizParseError(f"JSON 배열이 아닙니다: {type(data).__name__}")
    return data


def parse_quiz_json(text: str) -> list[Any]:
    """모델 응답에서 퀴즈 배열 파싱

    json.loads가 던지는 ValueError(JSONDecodeError, 정수 자릿수 초과)와
    RecursionError(과도한 중첩)는 모두 파싱 실패로 취급한다.

    Raises:
        NoJsonFoundError: JSON 후보를 찾지 못한 경우
        QuizParseError: 복구 후에도 파싱에 실패한 경우
    """
    candidate = extract_json_candidate(text)

    try:
        return _load_array(candidate)
    except (ValueError, RecursionError) as first_error:
        logger.info(f"1차 JSON 파싱 실패, 복구 시도: error_type={type(first_error).__name__}")

    repaired = repair_json(candidate)
    try:
        return _load_array(repaired)
    except (ValueError, RecursionError) as e:
        logger.error(f"복구된 JSON도 파싱 실패: error_type={type(e).__name__}, error_message={str(e)[:200]}")
        logger.debug(f"복구된 JSON: {repaired[:2000]}")
        raise QuizParseError() from e
