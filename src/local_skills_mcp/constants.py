"""
Constants for skill locations and the skill document format.

Skill directories, lowest to highest override priority:
- Bundled skills shipped with this package
- Personal skills: ~/.claude/skills/
- Project skills: <project>/.claude/skills/, then <project>/skills/
- SKILLS_DIR override (always last)
"""

from pathlib import Path
from typing import List

# File expected inside every skill subdirectory
SKILL_FILE_NAME = "SKILL.md"

# Header block delimiter line
FRONTMATTER_DELIMITER = "---"

# Skills bundled inside the installed package
BUNDLED_SKILLS_DIR: Path = Path(__file__).resolve().parent / "skills"

# Personal skill directory (in user home directory)
PERSONAL_SKILL_DIR = ".claude/skills"

# Project-level skill directories (relative to project root), low -> high priority
PROJECT_SKILL_DIRS: List[str] = [
    ".claude/skills",
    "skills",
]

# MCP tool surface
GET_SKILL_TOOL = "get_skill"
SKILL_NAME_PARAM = "skill_name"


def get_home_dir() -> Path:
    """
    Get user home directory in a cross-platform way.
    
    Returns:
        Path to user home directory
    """
    return Path.home()


def expand_personal_skill_dir(rel_path: str = PERSONAL_SKILL_DIR) -> Path:
    """
    Expand a personal skill directory path (e.g., '.claude/skills' -> '~/.claude/skills').
    
    Args:
        rel_path: Relative path from home (e.g., '.claude/skills')
        
    Returns:
        Absolute Path object
    """
    return get_home_dir() / rel_path
