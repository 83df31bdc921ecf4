from fastapi import APIRouter

from app.exceptions import InvalidRequestError
from app.schemas import quiz as quiz_schema
from app.services import quiz_service


router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.post("/generate", response_model=quiz_schema.QuizGenerateResponse)
async def generate_quiz(request: quiz_schema.QuizGenerateRequest):
    """자막으로 퀴즈 생성 API"""
    if not request.transcript:
        raise InvalidRequestError("Transcript is required")

    synthesis = await quiz_service.synthesize_quiz_with_provenance(request.transcript)
    return quiz_schema.QuizGenerateResponse(
        questions=synthesis.questions,
        fallback=synthesis.is_fallback,
    )
