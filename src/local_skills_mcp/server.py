"""
MCP Server implementation for local skills.

Provides a Model Context Protocol server that aggregates SKILL.md
documents from several local directories and serves them on demand
through the ``get_skill`` tool.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .config import SkillsConfig, get_config
from .directories import resolve_skill_directories
from .loader import SkillCatalog
from .tools import build_tools, call_tool

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send logs to stderr; stdout carries the MCP stream."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_catalog(config: Optional[SkillsConfig] = None) -> SkillCatalog:
    """Resolve the skill directories once and build a catalog over them."""
    config = config or get_config()
    skill_dirs = resolve_skill_directories(
        project_root=config.project_root,
        override_dir=config.skills_dir,
    )
    return SkillCatalog(skill_dirs)


def create_server(
    catalog: Optional[SkillCatalog] = None,
    config: Optional[SkillsConfig] = None,
) -> Server:
    """Create and configure the MCP server."""
    config = config or get_config()
    catalog = catalog or create_catalog(config)
    server = Server(config.server_name, version=__version__)
    
    @server.list_tools()
    async def list_tools() -> List[Tool]:
        """Re-scan skill directories and return the get_skill tool."""
        return await asyncio.to_thread(build_tools, catalog, config.description_max_length)
    
    # Argument checks happen in call_tool so they come back as text
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Handle tool invocation."""
        logger.debug(f"Tool call: {name} with args: {arguments}")
        return await call_tool(catalog, name, arguments)
    
    return server


def startup_banner(config: SkillsConfig, skill_dirs: Tuple[Path, ...]) -> List[str]:
    """Lines describing the running server."""
    noun = "directory" if len(skill_dirs) == 1 else "directories"
    lines = [
        f"{config.server_name} v{__version__} running on stdio",
        f"Aggregating skills from {len(skill_dirs)} {noun}:",
    ]
    lines.extend(f"  - {skill_dir}" for skill_dir in skill_dirs)
    return lines


async def run_server(config: Optional[SkillsConfig] = None):
    """Run the MCP server."""
    config = config or get_config()
    catalog = create_catalog(config)
    server = create_server(catalog, config)
    
    skill_names = await asyncio.to_thread(catalog.discover)
    for line in startup_banner(config, catalog.skill_dirs):
        logger.info(line)
    logger.info(f"Found {len(skill_names)} skill(s)")
    
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main(config: Optional[SkillsConfig] = None):
    """Entry point for the MCP server."""
    config = config or get_config()
    configure_logging(config.log_level)
    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
