"""
Data models for skills and registry snapshots.

Pydantic models for the values handed between the registry, the loader
and the MCP tool layer. All of them are immutable.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import DirectoryScanError


class RegistryEntry(BaseModel):
    """Location of one skill found during a directory scan."""
    
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., description="Skill subdirectory name (registry key)")
    path: Path = Field(..., description="Skill subdirectory containing SKILL.md")
    source_directory: Path = Field(..., description="Configured directory the skill came from")


class SkillMetadata(BaseModel):
    """Skill header fields without the body."""
    
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., description="Name declared in the frontmatter")
    description: str = Field(..., description="Description declared in the frontmatter")
    path: Path = Field(..., description="Skill subdirectory")
    source_directory: Path = Field(..., description="Configured directory the skill came from")


class SkillRecord(SkillMetadata):
    """Full skill, read fresh from disk for a single invocation."""
    
    body: str = Field(..., description="Instructions following the frontmatter, stripped")
    
    def metadata(self) -> SkillMetadata:
        """Drop the body."""
        return SkillMetadata(**self.model_dump(exclude={"body"}))


@dataclass(frozen=True)
class SkillRegistry:
    """
    Snapshot of one full scan of the skill directories.
    
    A new snapshot is built on every discovery; an existing one is never
    modified.
    """
    
    directories: Tuple[Path, ...] = ()
    entries: Mapping[str, RegistryEntry] = field(default_factory=lambda: MappingProxyType({}))
    scan_errors: Tuple[DirectoryScanError, ...] = ()
    
    @classmethod
    def from_entries(
        cls,
        directories: Tuple[Path, ...],
        entries: Dict[str, RegistryEntry],
        scan_errors: Tuple[DirectoryScanError, ...] = (),
    ) -> "SkillRegistry":
        """Freeze a scan result into a snapshot."""
        return cls(
            directories=tuple(directories),
            entries=MappingProxyType(dict(entries)),
            scan_errors=tuple(scan_errors),
        )
    
    def names(self) -> List[str]:
        """Skill names in lexicographic order."""
        return sorted(self.entries)
    
    def get(self, name: str) -> Optional[RegistryEntry]:
        return self.entries.get(name)
    
    def __contains__(self, name: object) -> bool:
        return name in self.entries
    
    def __len__(self) -> int:
        return len(self.entries)
    
    def skills_by_location(self) -> Dict[str, List[str]]:
        """Group skill names by the directory they resolved from."""
        grouped: Dict[str, List[str]] = {}
        for name in self.names():
            grouped.setdefault(str(self.entries[name].source_directory), []).append(name)
        return grouped
