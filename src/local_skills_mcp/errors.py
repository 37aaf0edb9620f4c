"""
Exceptions raised while discovering and loading skills.

These stay real exceptions between the resolver, registry and loader.
The MCP tool layer converts them to plain text at the protocol boundary.
"""

from pathlib import Path
from typing import Optional


class SkillError(Exception):
    """Base class for all skill errors."""


class SkillNotFoundError(SkillError):
    """Requested skill is absent from the most recent registry snapshot."""
    
    def __init__(self, skill_name: str):
        self.skill_name = skill_name
        super().__init__(
            f'Skill "{skill_name}" not found. '
            "Refresh the tool list to see available skills."
        )


class SkillFormatError(SkillError):
    """A SKILL.md document violates the header format."""
    
    reason = "invalid skill document"
    
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.reason)


class MissingOpeningDelimiterError(SkillFormatError):
    reason = "missing opening delimiter: SKILL.md must start with YAML frontmatter (---)"


class MissingClosingDelimiterError(SkillFormatError):
    reason = "missing closing delimiter: SKILL.md frontmatter must end with a --- line"


class InvalidHeaderError(SkillFormatError):
    reason = "invalid frontmatter: SKILL.md header must be a YAML mapping"


class MissingNameError(SkillFormatError):
    reason = 'missing name: SKILL.md frontmatter must include a "name" field'


class MissingDescriptionError(SkillFormatError):
    reason = 'missing description: SKILL.md frontmatter must include a "description" field'


class SkillLoadError(SkillError):
    """Reading or parsing a registered skill failed."""
    
    def __init__(self, skill_name: str, cause: Exception):
        self.skill_name = skill_name
        self.cause = cause
        super().__init__(f'Failed to load skill "{skill_name}": {cause}')


class DirectoryScanError(SkillError):
    """A configured skill directory exists but could not be listed."""
    
    def __init__(self, directory: Path, cause: Exception):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Error reading directory {directory}: {cause}")
