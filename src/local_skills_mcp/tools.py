"""
MCP tool definitions for the skill catalog.

Exposes a single ``get_skill`` tool whose description is regenerated on
every listing so it always names the skills currently on disk. Every
outcome of a tool call, including errors, is returned as plain text.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

from mcp.types import TextContent, Tool

from .constants import GET_SKILL_TOOL, SKILL_NAME_PARAM
from .errors import SkillError
from .loader import SkillCatalog
from .models import SkillRecord

logger = logging.getLogger(__name__)


GET_SKILL_DESCRIPTION = (
    "Loads specialized expert prompt instructions that transform your capabilities for specific tasks. "
    "Each skill provides comprehensive guidance, proven methodologies, and domain-specific best practices. "
    "Use when you need focused expertise, systematic approaches, or professional standards for any task "
    "that would benefit from specialized knowledge. "
    "Invoke with the skill name to receive detailed instructions that enhance your problem-solving "
    "approach with structured, expert-level guidance."
)

GET_SKILL_INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        SKILL_NAME_PARAM: {
            "type": "string",
            "description": 'The name of the skill to retrieve (e.g., "code-reviewer", "test-generator")',
        },
    },
    "required": [SKILL_NAME_PARAM],
}


# =============================================================================
# Tool Definitions
# =============================================================================

def describe_directories(skill_dirs: Iterable[Path]) -> str:
    """Comma-separated directory list for messages."""
    return ", ".join(str(d) for d in skill_dirs)


def truncate_description(description: str, max_length: int) -> str:
    """Collapse a description to one line and cut it to max_length with '...'."""
    text = " ".join(description.split())
    if len(text) <= max_length:
        return text
    return text[: max_length - 3].rstrip() + "..."


def build_skill_listing(
    catalog: SkillCatalog,
    skill_names: List[str],
    max_length: int,
) -> List[str]:
    """One '- name: description' line per skill, bare '- name' if unreadable."""
    lines = []
    for name in skill_names:
        try:
            metadata = catalog.get_skill_metadata(name)
        except SkillError as e:
            logger.warning(f"Could not read metadata for skill {name}: {e}")
            lines.append(f"- {name}")
            continue
        lines.append(f"- {name}: {truncate_description(metadata.description, max_length)}")
    return lines


def build_get_skill_description(
    catalog: SkillCatalog,
    skill_names: List[str],
    max_length: int = 100,
) -> str:
    """Capability description for get_skill, embedding the current skills."""
    if not skill_names:
        return (
            f"{GET_SKILL_DESCRIPTION}\n\n"
            f"No skills currently available. Check configured directories: "
            f"{describe_directories(catalog.skill_dirs)}"
        )
    
    listing = "\n".join(build_skill_listing(catalog, skill_names, max_length))
    return f"{GET_SKILL_DESCRIPTION}\n\nAvailable skills:\n{listing}"


def build_tools(catalog: SkillCatalog, max_length: int = 100) -> List[Tool]:
    """
    Discover skills and return the tool list.
    
    Args:
        catalog: Skill catalog to re-scan
        max_length: Maximum description length per listed skill
        
    Returns:
        List containing the get_skill tool
    """
    skill_names = catalog.discover()
    logger.info(f"Listing get_skill with {len(skill_names)} skill(s)")
    
    return [
        Tool(
            name=GET_SKILL_TOOL,
            description=build_get_skill_description(catalog, skill_names, max_length),
            inputSchema=GET_SKILL_INPUT_SCHEMA,
        ),
    ]


# =============================================================================
# Tool Handlers
# =============================================================================

def format_skill(skill: SkillRecord) -> str:
    """Render a loaded skill as the text returned to the agent."""
    return "\n".join([
        f"# Skill: {skill.name}",
        "",
        f"**Description:** {skill.description}",
        f"**Source:** {skill.source_directory}",
        "",
        "---",
        "",
        skill.body,
    ])


async def handle_get_skill(catalog: SkillCatalog, args: Dict[str, Any]) -> str:
    """Load one skill and format it."""
    skill_name = args.get(SKILL_NAME_PARAM)
    if not isinstance(skill_name, str) or not skill_name.strip():
        return f"Error: {SKILL_NAME_PARAM} is required"
    
    try:
        skill = await asyncio.to_thread(catalog.load_skill, skill_name)
    except SkillError as e:
        logger.info(f"get_skill failed: {e}")
        return f"Error: {e}"
    
    return format_skill(skill)


TOOL_HANDLERS: Dict[str, Callable[[SkillCatalog, Dict[str, Any]], Awaitable[str]]] = {
    GET_SKILL_TOOL: handle_get_skill,
}


async def call_tool(
    catalog: SkillCatalog,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> List[TextContent]:
    """
    Call a tool by name.
    
    Unknown tools, bad arguments and skill errors all come back as text
    rather than exceptions.
    
    Args:
        catalog: Skill catalog
        name: Tool name
        arguments: Tool arguments
        
    Returns:
        List with a single TextContent
    """
    handler = TOOL_HANDLERS.get(name)
    if not handler:
        return [TextContent(type="text", text=f"Error: Unknown tool: {name}")]
    
    result = await handler(catalog, arguments or {})
    return [TextContent(type="text", text=result)]

