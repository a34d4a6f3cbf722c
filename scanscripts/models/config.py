"""
Application configuration models.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .. import __version__
from .script import ExecutionMode


# =============================================================================
# CORE APPLICATION MODELS
# =============================================================================

class ApplicationConfig(BaseModel):
    """Application metadata configuration."""
    name: str = "scanscripts"
    version: str = __version__


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field("WARNING", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator('level', mode='before')
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


# =============================================================================
# SCRIPTS CONFIGURATION MODELS
# =============================================================================

class ScriptsConfig(BaseModel):
    """Where scripts and the selection config live, and which mode runs."""
    mode: ExecutionMode = ExecutionMode.DEFAULT
    home_dir: Optional[str] = None
    scripts_dir: str = Field(".scanscripts", min_length=1)
    config_file: str = Field(".scanscripts.toml", min_length=1)

    @field_validator('mode', mode='before')
    @classmethod
    def parse_mode(cls, v):
        if isinstance(v, str):
            return ExecutionMode.from_string(v)
        return v

    @field_validator('home_dir')
    @classmethod
    def empty_home_is_unset(cls, v):
        return v or None


class AppConfig(BaseModel):
    """Complete application configuration."""
    application: ApplicationConfig = Field(default_factory=ApplicationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scripts: ScriptsConfig = Field(default_factory=ScriptsConfig)
