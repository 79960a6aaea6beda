from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gemini_api_key: str = ""
    debug: bool = False

    # External model ("oracle") scoring
    use_llm: bool = False  # if True, screen_resume() asks the LLM first
    llm_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.3
    llm_max_output_tokens: int = 2048
    llm_timeout_seconds: float = 30.0

    # Document extraction
    max_upload_size_mb: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


settings = Settings()
