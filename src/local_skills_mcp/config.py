"""
Configuration management for the Local Skills MCP Server.

Uses pydantic-settings for environment variable loading (with .env support).
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SkillsConfig(BaseSettings):
    """Main configuration for the Local Skills MCP Server."""
    
    model_config = SettingsConfigDict(
        env_prefix="SKILLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # Highest-priority skills directory
    skills_dir: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices("SKILLS_DIR", "skills_dir"),
        description="Override skills directory (takes precedence for duplicate names)",
    )
    
    project_root: Optional[Path] = Field(
        default=None,
        description="Project root for .claude/skills and skills (defaults to current directory)",
    )
    
    description_max_length: int = Field(
        default=100,
        ge=4,
        description="Maximum length of a skill description in the tool listing",
    )
    
    log_level: str = Field(default="INFO", description="Logging level")
    
    server_name: str = Field(default="local-skills-mcp", description="MCP server name")
    
    @field_validator("skills_dir", "project_root", mode="before")
    @classmethod
    def _empty_path_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
    
    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


# Global config instance (lazy loaded)
_config: Optional[SkillsConfig] = None


def get_config() -> SkillsConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = SkillsConfig()
    return _config


def reload_config(**overrides: Any) -> SkillsConfig:
    """Reload configuration from environment, applying explicit overrides."""
    global _config
    _config = SkillsConfig(**overrides)
    return _config
