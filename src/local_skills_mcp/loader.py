"""
Skill catalog - discovery and lazy, uncached loading of skills.

The catalog keeps a reference to the latest registry snapshot and nothing
else. Skill documents are read from disk on every call so edits show up
immediately.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from .constants import SKILL_FILE_NAME
from .errors import SkillFormatError, SkillLoadError, SkillNotFoundError
from .models import RegistryEntry, SkillMetadata, SkillRecord, SkillRegistry
from .parser import parse_skill_file
from .registry import scan_skill_directories

logger = logging.getLogger(__name__)


class SkillCatalog:
    """
    Aggregated view over several skill directories.
    
    Features:
    - Re-scans every directory on each discovery
    - Later directories override earlier ones for the same skill name
    - Reads SKILL.md fresh on every load (no caching)
    """
    
    def __init__(self, skill_dirs: Iterable[Path]):
        """
        Initialize the catalog.
        
        Args:
            skill_dirs: Skill directory paths (lowest to highest priority)
        """
        self._skill_dirs: Tuple[Path, ...] = tuple(Path(d) for d in skill_dirs)
        self._registry = SkillRegistry(directories=self._skill_dirs)
    
    @property
    def skill_dirs(self) -> Tuple[Path, ...]:
        """All skill directories being aggregated."""
        return self._skill_dirs
    
    @property
    def registry(self) -> SkillRegistry:
        """Snapshot produced by the most recent discovery."""
        return self._registry
    
    def discover(self) -> List[str]:
        """
        Re-scan all directories and replace the registry snapshot.
        
        Returns:
            Sorted skill names
        """
        registry = scan_skill_directories(self._skill_dirs)
        self._registry = registry
        return registry.names()
    
    def _lookup(self, skill_name: str) -> RegistryEntry:
        entry = self._registry.get(skill_name)
        if entry is None:
            raise SkillNotFoundError(skill_name)
        return entry
    
    def _read(self, skill_name: str) -> SkillRecord:
        entry = self._lookup(skill_name)
        skill_file = entry.path / SKILL_FILE_NAME
        
        try:
            text = skill_file.read_text(encoding="utf-8")
            parsed = parse_skill_file(text)
        except (SkillFormatError, OSError, UnicodeDecodeError) as e:
            raise SkillLoadError(skill_name, e) from e
        
        return SkillRecord(
            name=parsed.name,
            description=parsed.description,
            body=parsed.body,
            path=entry.path,
            source_directory=entry.source_directory,
        )
    
    def load_skill(self, skill_name: str) -> SkillRecord:
        """
        Load a skill by name, reading its SKILL.md from disk.
        
        Args:
            skill_name: Registry name of the skill
            
        Returns:
            Full SkillRecord
            
        Raises:
            SkillNotFoundError: Name is not in the current registry
            SkillLoadError: File could not be read or parsed
        """
        skill = self._read(skill_name)
        logger.debug(f"Loaded skill: {skill_name} from {skill.source_directory}")
        return skill
    
    def get_skill_metadata(self, skill_name: str) -> SkillMetadata:
        """
        Get a skill's name, description and source without the body.
        
        Performs the same read and parse as load_skill.
        """
        return self._read(skill_name).metadata()
