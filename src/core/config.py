
from pydantic import Field
from pydantic_settings import BaseSettings
from ..models.invoice import ExtractionStrategy

class Settings(BaseSettings):
    app_name: str = Field("ocr-facturas", alias="APP_NAME")
    app_env: str = Field("dev", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # LLM (optional) - Gemini generateContent REST API
    llm_base_url: str = Field("https://generativelanguage.googleapis.com/v1beta", alias="LLM_BASE_URL")
    llm_api_key: str | None = Field(default=None, alias="LLM_API_KEY")
    llm_model: str = Field("gemini-1.5-flash", alias="LLM_MODEL")
    llm_instruction: str = Field("Extrae la fecha y el total de la factura", alias="LLM_INSTRUCTION")
    llm_timeout: float = Field(30.0, alias="LLM_TIMEOUT")

    # Tesseract OCR
    tesseract_cmd: str | None = Field(default=None, alias="TESSERACT_CMD")
    ocr_language: str = Field("spa", alias="OCR_LANGUAGE")

    # Uploads
    max_upload_mb: int = Field(10, alias="MAX_UPLOAD_MB")

    # Extraction strategy used when the caller does not choose one: regex | ai | both
    default_strategy: ExtractionStrategy = Field(ExtractionStrategy.REGEX, alias="DEFAULT_STRATEGY")

    # CORS allowed origins (comma-separated list for production deployment)
    cors_origins: str = Field("http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ORIGINS")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "populate_by_name": True}

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

settings = Settings()
