"""
Skill registry scanning - map skill names to their locations.

Every scan walks all configured directories from scratch. Directories are
processed lowest priority first and entries are simply overwritten, so a
skill defined in a later directory replaces one with the same name from an
earlier directory.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .constants import SKILL_FILE_NAME
from .errors import DirectoryScanError
from .models import RegistryEntry, SkillRegistry

logger = logging.getLogger(__name__)


def _list_children(directory: Path) -> List[Path]:
    """Immediate entries of a directory, sorted by name."""
    return sorted(directory.iterdir(), key=lambda child: child.name)


def _is_skill_directory(child: Path) -> bool:
    """Whether an entry is a subdirectory holding a SKILL.md file."""
    try:
        return child.is_dir() and (child / SKILL_FILE_NAME).is_file()
    except OSError as e:
        logger.warning(f"Skipping unreadable skill entry {child}: {e}")
        return False


def scan_skill_directories(directories: Iterable[Path]) -> SkillRegistry:
    """
    Build a registry snapshot from the skill directories.
    
    A subdirectory is registered when it contains a SKILL.md file; the file
    is not parsed here. Directories that do not exist are skipped quietly.
    Directories that cannot be listed are logged, recorded in
    ``scan_errors`` and skipped without stopping the scan. An entry whose
    type or SKILL.md cannot be checked is logged and skipped on its own.
    
    Args:
        directories: Skill directories, lowest to highest priority
        
    Returns:
        New SkillRegistry snapshot
    """
    directories = tuple(Path(d) for d in directories)
    entries: Dict[str, RegistryEntry] = {}
    scan_errors: List[DirectoryScanError] = []
    
    for skills_path in directories:
        try:
            children = _list_children(skills_path)
        except FileNotFoundError:
            logger.debug(f"Skills directory does not exist: {skills_path}")
            continue
        except OSError as e:
            error = DirectoryScanError(skills_path, e)
            logger.warning(str(error))
            scan_errors.append(error)
            continue
        
        for skill_path in children:
            if not _is_skill_directory(skill_path):
                continue
            if skill_path.name in entries:
                logger.debug(
                    f"Skill {skill_path.name} from {skills_path} overrides "
                    f"{entries[skill_path.name].source_directory}"
                )
            entries[skill_path.name] = RegistryEntry(
                name=skill_path.name,
                path=skill_path,
                source_directory=skills_path,
            )
    
    logger.debug(f"Scanned {len(directories)} director(ies), found {len(entries)} skill(s)")
    return SkillRegistry.from_entries(directories, entries, tuple(scan_errors))
