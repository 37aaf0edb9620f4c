"""
Local Skills MCP Server

MCP server that aggregates SKILL.md instruction sets from local
directories and serves them to agents on demand:
- Bundled skills shipped with the package
- Personal skills in ~/.claude/skills
- Project skills in .claude/skills and skills
- An override directory from SKILLS_DIR

Later locations override earlier ones for skills with the same name.
"""

__version__ = "0.1.0"

from .config import SkillsConfig, get_config
from .directories import resolve_skill_directories
from .errors import (
    DirectoryScanError,
    InvalidHeaderError,
    MissingClosingDelimiterError,
    MissingDescriptionError,
    MissingNameError,
    MissingOpeningDelimiterError,
    SkillError,
    SkillFormatError,
    SkillLoadError,
    SkillNotFoundError,
)
from .loader import SkillCatalog
from .models import RegistryEntry, SkillMetadata, SkillRecord, SkillRegistry
from .parser import parse_skill_file

__all__ = [
    "__version__",
    # Config
    "SkillsConfig",
    "get_config",
    # Discovery and loading
    "resolve_skill_directories",
    "SkillCatalog",
    "parse_skill_file",
    # Models
    "RegistryEntry",
    "SkillMetadata",
    "SkillRecord",
    "SkillRegistry",
    # Errors
    "SkillError",
    "SkillNotFoundError",
    "SkillFormatError",
    "MissingOpeningDelimiterError",
    "MissingClosingDelimiterError",
    "InvalidHeaderError",
    "MissingNameError",
    "MissingDescriptionError",
    "SkillLoadError",
    "DirectoryScanError",
]
