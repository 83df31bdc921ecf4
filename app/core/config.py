from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경변수 기반 애플리케이션 설정"""

    # Environment
    environment: str = "development"
    log_level: str | None = None

    # CORS
    allowed_origins: str = "*"

    # OpenRouter
    openrouter_api_key: str | None = None
    openrouter_api_url: str = "https://openrouter.ai/api/v1/chat/completions"
    openrouter_model: str = "deepseek/deepseek-r1:free"
    # None이면 타임아웃 없음 (호출자가 필요 시 데드라인 적용)
    openrouter_timeout: float | None = None

    # Transcript
    transcript_language: str = "en"
    min_transcript_words: int = 50

    # Quiz
    prompt_transcript_chars: int = 3000
    quiz_strict_validation: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """쉼표로 구분된 ALLOWED_ORIGINS를 리스트로 변환"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
