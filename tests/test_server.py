"""Tests for MCP server wiring."""

import pytest
from mcp import types

from local_skills_mcp import __version__
from local_skills_mcp.config import SkillsConfig
from local_skills_mcp.loader import SkillCatalog
from local_skills_mcp.server import create_catalog, create_server, startup_banner


@pytest.fixture
def config():
    return SkillsConfig(server_name="test-skills", description_max_length=60)


def test_create_server_registers_handlers(skills_dir, config):
    server = create_server(SkillCatalog([skills_dir]), config)
    
    assert server.name == "test-skills"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


@pytest.mark.asyncio
async def test_list_tools_handler_rescans(skills_dir, make_skill, config):
    server = create_server(SkillCatalog([skills_dir]), config)
    handler = server.request_handlers[types.ListToolsRequest]
    
    result = await handler(types.ListToolsRequest(method="tools/list"))
    tools = result.root.tools
    assert [t.name for t in tools] == ["get_skill"]
    assert "No skills currently available" in tools[0].description
    
    make_skill(skills_dir, "late", description="Added while running")
    
    result = await handler(types.ListToolsRequest(method="tools/list"))
    assert "- late: Added while running" in result.root.tools[0].description


def test_create_catalog_uses_config(isolated_env, tmp_path):
    home, project = isolated_env
    override = tmp_path / "override"
    override.mkdir()
    (project / "skills").mkdir()
    
    catalog = create_catalog(SkillsConfig(skills_dir=override, project_root=project))
    
    assert catalog.skill_dirs[-2:] == (project / "skills", override)


def test_startup_banner(tmp_path, config):
    dirs = (tmp_path / "a", tmp_path / "b")
    
    lines = startup_banner(config, dirs)
    
    assert lines[0] == f"test-skills v{__version__} running on stdio"
    assert lines[1] == "Aggregating skills from 2 directories:"
    assert lines[2:] == [f"  - {tmp_path / 'a'}", f"  - {tmp_path / 'b'}"]
    assert "1 directory:" in startup_banner(config, dirs[:1])[1]
