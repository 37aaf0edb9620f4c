"""
SKILL.md parser.

A skill document is a YAML frontmatter block between two ``---`` lines,
followed by free-form instructions:

    ---
    name: code-reviewer
    description: Reviews code for correctness and style
    ---

    Instructions...
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import yaml

from .constants import FRONTMATTER_DELIMITER
from .errors import (
    InvalidHeaderError,
    MissingClosingDelimiterError,
    MissingDescriptionError,
    MissingNameError,
    MissingOpeningDelimiterError,
)


@dataclass(frozen=True)
class ParsedSkill:
    """Result of parsing a SKILL.md document."""
    name: str
    description: str
    body: str
    header: Dict[str, Any]


def split_frontmatter(text: str) -> Tuple[str, str]:
    """
    Split raw document text into (header, body) sections.
    
    Raises:
        MissingOpeningDelimiterError: First line is not ``---``
        MissingClosingDelimiterError: No later ``---`` line
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")
    
    if lines[0].rstrip() != FRONTMATTER_DELIMITER:
        raise MissingOpeningDelimiterError()
    
    for i in range(1, len(lines)):
        if lines[i].rstrip() == FRONTMATTER_DELIMITER:
            header = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1:])
            return header, body
    
    raise MissingClosingDelimiterError()


def _required_string(header: Dict[str, Any], key: str) -> Optional[str]:
    value = header.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def parse_skill_file(text: str) -> ParsedSkill:
    """
    Parse SKILL.md text into header fields and body.
    
    Args:
        text: Full file content
        
    Returns:
        ParsedSkill with the body stripped of surrounding whitespace
        
    Raises:
        SkillFormatError: One of its subclasses, naming the violated rule
    """
    header_text, body = split_frontmatter(text)
    
    try:
        header = yaml.safe_load(header_text)
    except yaml.YAMLError as e:
        raise InvalidHeaderError(f"{InvalidHeaderError.reason} ({e})") from e
    
    if header is None:
        header = {}
    if not isinstance(header, dict):
        raise InvalidHeaderError()
    
    name = _required_string(header, "name")
    if name is None:
        raise MissingNameError()
    
    description = _required_string(header, "description")
    if description is None:
        raise MissingDescriptionError()
    
    return ParsedSkill(
        name=name,
        description=description,
        body=body.strip(),
        header=header,
    )
