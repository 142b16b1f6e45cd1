import logging
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .factories import DefaultSvgNodeRendererFactory, ISvgNodeRendererFactory, YamlSvgNodeRendererMapper
from .processor import DefaultSvgProcessor

logger = logging.getLogger(__name__)

# Environment variable prefix
ENV_PREFIX = "SVGRENDER_"


class RendererSettings(BaseSettings):
    """Settings for the renderer registry, loaded from environment variables and .env."""

    # Logging Settings
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    log_format: str = Field(default='%(asctime)s - %(name)s - %(levelname)s - %(message)s', description="Logging format string")
    log_to_file: bool = Field(default=False, description="Enable logging to file with rotation")
    log_file_path: str = Field(default="logs/svgrender.log", description="Path to the log file (directory will be created)")
    log_max_bytes: int = Field(default=500_000, description="Maximum size of one log file before rotation")
    log_backup_count: int = Field(default=5, description="Number of rotated log files to keep")

    # Registry Settings
    mapping_file: Optional[str] = Field(default=None, description="YAML file overriding the default tag-to-renderer mapping")
    skip_unmapped_tags: bool = Field(default=False, description="Processor logs and skips unmapped tags instead of failing")

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_prefix=ENV_PREFIX,
        extra='ignore',
        case_sensitive=False
    )


def load_settings() -> RendererSettings:
    """
    Load settings from the .env file and the environment.

    Raises:
        ValueError: If the settings cannot be built
    """
    try:
        from dotenv import load_dotenv
        env_loaded = load_dotenv('.env', override=False)
        logger.debug(f".env loading result: {env_loaded}")
    except Exception as e:
        logger.warning(f"Failed to load .env file: {e}")

    found = [k for k in os.environ if k.upper().startswith(ENV_PREFIX)]
    logger.debug(f"Found {len(found)} {ENV_PREFIX} environment variables: {found}")

    try:
        settings = RendererSettings()
        logger.debug("Renderer settings loaded successfully.")
        return settings
    except Exception as e:
        logger.exception(f"Critical error loading renderer settings: {e}")
        raise ValueError(f"Failed to load configuration: {e}") from e


def build_factory(settings: RendererSettings) -> ISvgNodeRendererFactory:
    """Create the renderer factory described by ``settings``."""
    if settings.mapping_file:
        logger.info(f"Using renderer mapping from {settings.mapping_file}")
        return DefaultSvgNodeRendererFactory(YamlSvgNodeRendererMapper(settings.mapping_file))
    return DefaultSvgNodeRendererFactory()


def build_processor(settings: RendererSettings) -> DefaultSvgProcessor:
    """Create a processor using the configured factory and unmapped-tag policy."""
    return DefaultSvgProcessor(build_factory(settings), skip_unmapped=settings.skip_unmapped_tags)
