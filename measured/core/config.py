from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Default backend for decorated functions: memory | log | prometheus | null
    METRICS_BACKEND: str = "log"
    METRIC_LOG_LEVEL: str = "DEBUG"

    # Histogram families used by the prometheus backend
    SYNC_METRIC_NAME: str = "function_duration_seconds"
    ASYNC_METRIC_NAME: str = "async_function_duration_seconds"

    # Use Pydantic v2 style config and ignore unexpected env vars
    model_config = ConfigDict(env_file=".env", env_prefix="MEASURED_", extra="ignore")


settings = Settings()
