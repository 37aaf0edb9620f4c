"""Shared fixtures for skill tests."""

import textwrap
from pathlib import Path

import pytest


def write_skill(
    skills_dir: Path,
    dir_name: str,
    name: str | None = None,
    description: str = "A test skill",
    body: str = "Skill instructions.",
) -> Path:
    """Create <skills_dir>/<dir_name>/SKILL.md and return the skill directory."""
    skill_path = skills_dir / dir_name
    skill_path.mkdir(parents=True, exist_ok=True)
    (skill_path / "SKILL.md").write_text(
        textwrap.dedent(
            f"""\
            ---
            name: {name or dir_name}
            description: {description}
            ---

            """
        )
        + body,
        encoding="utf-8",
    )
    return skill_path


@pytest.fixture
def skills_dir(tmp_path):
    """Empty skills directory."""
    path = tmp_path / "skills"
    path.mkdir()
    return path


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Fake home and project directories with no skills and no SKILLS_* variables."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for var in ("SKILLS_DIR", "SKILLS_PROJECT_ROOT", "SKILLS_LOG_LEVEL",
                "SKILLS_DESCRIPTION_MAX_LENGTH", "SKILLS_SERVER_NAME"):
        monkeypatch.delenv(var, raising=False)
    return home, project


@pytest.fixture
def make_skill():
    """Factory writing SKILL.md files."""
    return write_skill
