import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    recipe_parser_lenient_repair_enabled: bool = Field(
        True, alias="RECIPE_PARSER_LENIENT_REPAIR_ENABLED"
    )
    recipe_parser_markdown_fallback_enabled: bool = Field(
        True, alias="RECIPE_PARSER_MARKDOWN_FALLBACK_ENABLED"
    )
    # Model identifiers the caller uses when asking the LLM for text; the parser only sees the text
    generate_model_name: str = Field(
        "mistralai/mixtral-8x7b-instruct", alias="MIXI_GENERATE_MODEL_NAME"
    )
    parse_model_name: str = Field(
        "meta-llama/llama-3.1-70b-instruct", alias="MIXI_PARSE_MODEL_NAME"
    )
    normalize_model_name: str = Field(
        "mistralai/mistral-7b-instruct:free", alias="MIXI_NORMALIZE_MODEL_NAME"
    )
    summarize_model_name: str = Field(
        "meta-llama/llama-3.1-70b-instruct", alias="MIXI_SUMMARIZE_MODEL_NAME"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)

LLM_TASKS = ("generate", "parse", "normalize", "summarize")


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings


def get_model_for_task(task: str) -> str:
    """Resolve the configured model identifier for an LLM task selector."""
    if task not in LLM_TASKS:
        raise ValueError(f"Unknown LLM task: {task!r}")
    return getattr(get_settings(), f"{task}_model_name")
