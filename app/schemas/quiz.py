from typing import Any

from pydantic import BaseModel, Field, model_validator


class QuizQuestion(BaseModel):
    """객관식 문제 스키마"""
    question: str = Field(..., description="문제 내용")
    options: list[str] = Field(..., min_length=4, max_length=4, description="선택지 (4개 필수)")
    correct: int = Field(..., ge=0, le=3, description="정답 인덱스 (0-3)")

    @model_validator(mode="after")
    def check_correct_in_options(self) -> "QuizQuestion":
        if self.correct >= len(self.options):
            raise ValueError("correct는 options 범위 안의 인덱스여야 합니다")
        return self


class QuizSynthesis(BaseModel):
    """퀴즈 생성 결과 (폴백 여부 포함)"""
    questions: list[Any]
    is_fallback: bool = False


class QuizGenerateRequest(BaseModel):
    """퀴즈 생성 요청 스키마"""
    transcript: str | None = Field(None, description="자막 텍스트")


class QuizGenerateResponse(BaseModel):
    """퀴즈 생성 응답 스키마"""
    success: bool = True
    questions: list[Any]
    fallback: bool = Field(False, description="기본 문제로 대체되었는지 여부")
