import logging

from fastapi import APIRouter, Depends

from app.exceptions import InvalidRequestError
from app.schemas import transcript as transcript_schema
from app.services import youtube_service
from app.services.captions import CaptionsProvider, get_captions_provider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcript", tags=["transcript"])


@router.post("", response_model=transcript_schema.TranscriptResponse)
async def get_transcript(
    request: transcript_schema.TranscriptRequest,
    provider: CaptionsProvider = Depends(get_captions_provider),
):
    """YouTube 자막 추출 API"""
    if not request.video_id:
        raise InvalidRequestError("Video ID is required")

    result = await youtube_service.get_transcript(request.video_id, provider)
    if not result.ok:
        raise result.to_error()

    logger.debug(f"자막 내용 (video_id={request.video_id}): {result.transcript}")
    return transcript_schema.TranscriptResponse(
        video_id=request.video_id,
        transcript=result.transcript,
        transcript_length=len(result.transcript),
        word_count=result.word_count,
    )
