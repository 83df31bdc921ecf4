from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """채팅 메시지 스키마"""
    role: str = "user"
    content: str | None = None


class ChatCompletionRequest(BaseModel):
    """OpenRouter chat completion 요청 스키마"""
    model: str = Field(..., description="모델 식별자")
    messages: list[ChatMessage] = Field(..., min_length=1, description="메시지 목록")


class ChatChoice(BaseModel):
    """응답 선택지"""
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    """OpenRouter chat completion 응답 스키마 (필요한 필드만)"""
    choices: list[ChatChoice] = Field(..., min_length=1)

    model_config = {"extra": "ignore"}

    @property
    def content(self) -> str:
        """첫 번째 선택지의 텍스트 (없으면 빈 문자열)"""
        return self.choices[0].message.content or ""
