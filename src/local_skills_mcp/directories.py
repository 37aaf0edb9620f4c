"""
Skill directory resolution - decide which locations to aggregate from.

The order is fixed once per server process, lowest to highest override
priority:
1. Bundled skills shipped with the package
2. Personal skills (~/.claude/skills/)
3. Project skills (.claude/skills/, then skills/)
4. SKILLS_DIR override

Only the set of directories is fixed; their contents are re-read on every
request.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .constants import (
    BUNDLED_SKILLS_DIR,
    PROJECT_SKILL_DIRS,
    expand_personal_skill_dir,
)

logger = logging.getLogger(__name__)


def candidate_skill_directories(
    project_root: Optional[Path] = None,
    override_dir: Optional[Path] = None,
    bundled_dir: Path = BUNDLED_SKILLS_DIR,
) -> List[Path]:
    """
    List every candidate skill directory, whether or not it exists.
    
    Args:
        project_root: Project root directory (current directory if None)
        override_dir: Externally supplied directory, ranked highest
        bundled_dir: Directory of skills shipped with the package
        
    Returns:
        Candidate paths, lowest to highest priority
    """
    if project_root is None:
        project_root = Path.cwd()
    
    candidates: List[Path] = [bundled_dir, expand_personal_skill_dir()]
    candidates.extend(project_root / rel_path for rel_path in PROJECT_SKILL_DIRS)
    if override_dir is not None:
        candidates.append(Path(override_dir).expanduser())
    
    return candidates


def _dedupe_keep_last(paths: List[Path]) -> List[Path]:
    """Drop repeated locations, keeping each at its highest-priority position."""
    last_index: Dict[Path, int] = {}
    for i, path in enumerate(paths):
        last_index[path.resolve()] = i
    return [path for i, path in enumerate(paths) if last_index[path.resolve()] == i]


def resolve_skill_directories(
    project_root: Optional[Path] = None,
    override_dir: Optional[Path] = None,
    bundled_dir: Path = BUNDLED_SKILLS_DIR,
) -> Tuple[Path, ...]:
    """
    Resolve the ordered skill directories to aggregate from.
    
    Each candidate is kept only if it is an existing directory at the time
    of the check. When none qualifies, the bundled directory is returned on
    its own so callers never get an empty order.
    
    Args:
        project_root: Project root directory (current directory if None)
        override_dir: Externally supplied directory (e.g. SKILLS_DIR)
        bundled_dir: Directory of skills shipped with the package
        
    Returns:
        Existing skill directories, lowest to highest priority
    """
    found_dirs: List[Path] = []
    for skill_path in candidate_skill_directories(project_root, override_dir, bundled_dir):
        if skill_path.is_dir():
            found_dirs.append(skill_path)
            logger.debug(f"Found skills directory: {skill_path}")
        else:
            logger.debug(f"Skipping missing skills directory: {skill_path}")
    
    found_dirs = _dedupe_keep_last(found_dirs)
    
    if not found_dirs:
        logger.debug(f"No skill directories found, falling back to {bundled_dir}")
        return (bundled_dir,)
    
    logger.info(f"Resolved {len(found_dirs)} skill location(s)")
    for i, skill_dir in enumerate(found_dirs, 1):
        logger.debug(f"  {i}. {skill_dir}")
    
    return tuple(found_dirs)


def get_directory_info(skill_dirs: Tuple[Path, ...]) -> List[Dict[str, object]]:
    """
    Describe each directory for diagnostics.
    
    Args:
        skill_dirs: Resolved skill directories
        
    Returns:
        One dictionary per directory with priority, path and existence
    """
    return [
        {
            "priority": i,
            "path": str(path),
            "exists": path.is_dir(),
        }
        for i, path in enumerate(skill_dirs, 1)
    ]
