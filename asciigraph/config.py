"""
Environment Configuration

Defaults for graphs rendered from the command line, read from ASCIIGRAPH_*
environment variables or a .env file in the working directory.
"""

from typing import Any, Dict, Literal
import logging

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import (
    DEFAULT_MAX_HEIGHT,
    DEFAULT_MAX_WIDTH,
    DEFAULT_PLOT_SYMBOL,
    GraphConfig,
    MinToMax,
    ZeroToMax,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""
    model_config = SettingsConfigDict(
        env_prefix="ASCIIGRAPH_",
        extra="ignore",
    )

    max_width: int = Field(default=DEFAULT_MAX_WIDTH, ge=1)
    max_height: int = Field(default=DEFAULT_MAX_HEIGHT, ge=1)
    plot_symbol: str = Field(default=DEFAULT_PLOT_SYMBOL, min_length=1, max_length=1)
    y_range: Literal["min_to_max", "zero_to_max"] = "min_to_max"
    log_level: str = "WARNING"
    enable_colour: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def to_graph_config(self) -> GraphConfig:
        """Build the graph configuration these settings describe."""
        y_range = ZeroToMax() if self.y_range == "zero_to_max" else MinToMax()
        return GraphConfig(
            max_width=self.max_width,
            max_height=self.max_height,
            y_range=y_range,
            plot_symbol=self.plot_symbol,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of current configuration."""
        return {
            "max_width": self.max_width,
            "max_height": self.max_height,
            "plot_symbol": self.plot_symbol,
            "y_range": self.y_range,
            "log_level": self.log_level,
            "enable_colour": self.enable_colour,
        }

    def log_configuration(self) -> None:
        logger.debug("Graph configuration:")
        for key, value in self.get_summary().items():
            logger.debug(f"   {key}: {value}")


def get_settings() -> Settings:
    """Load settings from the environment; a fresh instance on every call."""
    # Variables already set in the environment win over the .env file
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings()


ENV_VARS_HELP = """
Environment variables:
   ASCIIGRAPH_MAX_WIDTH=80                     # Terminal columns per figure (minimum 40)
   ASCIIGRAPH_MAX_HEIGHT=5                     # Rows per figure (must exceed 3)
   ASCIIGRAPH_PLOT_SYMBOL=#                    # Character drawn for plotted values
   ASCIIGRAPH_Y_RANGE=min_to_max|zero_to_max   # Y axis range style
   ASCIIGRAPH_LOG_LEVEL=WARNING                # Logging level for the command line
   ASCIIGRAPH_ENABLE_COLOUR=true|false         # Colour plot symbols that have a colour
"""
