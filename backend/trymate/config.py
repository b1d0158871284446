from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "extra": "ignore",
        "env_prefix": "",
        "case_sensitive": False,
    }

    # Gemini (server-held secret, only read by the generate proxy)
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1"
    default_model: str = "gemini-2.0-flash"
    temperature: float = 0.8
    max_output_tokens: int = 300

    # Recommendation pipeline
    generate_endpoint: str = "http://localhost:8000/api/generate"
    request_timeout_seconds: float = 30.0
    max_image_bytes: int = 1024 * 1024

    # App
    environment: str = "development"
    log_level: str = "INFO"
    log_file: str = ""


settings = Settings()
