"""
CLI interface for the Local Skills MCP Server.

Runs the stdio server by default, with commands for inspecting the
skills the server would expose.
"""

from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import SkillsConfig, reload_config
from .directories import get_directory_info
from .errors import SkillError
from .server import configure_logging, create_catalog
from .server import main as run_stdio_server
from .tools import format_skill, truncate_description


console = Console()


def load_config(skills_dir: Optional[str], log_level: Optional[str]) -> SkillsConfig:
    """Build configuration from .env, environment and command-line overrides."""
    load_dotenv()
    
    overrides = {}
    if skills_dir:
        overrides["skills_dir"] = skills_dir
    if log_level:
        overrides["log_level"] = log_level
    
    try:
        return reload_config(**overrides)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--skills-dir",
    type=click.Path(file_okay=False),
    help="Override skills directory (takes precedence over SKILLS_DIR)",
)
@click.option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
@click.pass_context
def main(ctx: click.Context, skills_dir: Optional[str], log_level: Optional[str]):
    """Local Skills MCP - Serve SKILL.md instructions to agents over MCP."""
    ctx.obj = load_config(skills_dir, log_level)
    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@main.command()
@click.pass_obj
def serve(config: SkillsConfig):
    """Run the MCP server on stdio."""
    run_stdio_server(config)


@main.command(name="list")
@click.pass_obj
def list_skills(config: SkillsConfig):
    """List available skills."""
    configure_logging(config.log_level)
    catalog = create_catalog(config)
    skill_names = catalog.discover()
    
    if not skill_names:
        console.print("[yellow]No skills currently available.[/yellow] Checked directories:")
        for skill_dir in catalog.skill_dirs:
            console.print(f"  - {skill_dir}")
        return
    
    table = Table(title=f"Skills ({len(skill_names)})")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Source", style="dim")
    
    for name in skill_names:
        entry = catalog.registry.get(name)
        try:
            metadata = catalog.get_skill_metadata(name)
            description = escape(truncate_description(metadata.description, config.description_max_length))
        except SkillError as e:
            description = f"[red]{escape(str(e))}[/red]"
        table.add_row(name, description, str(entry.source_directory) if entry else "")
    
    console.print(table)


@main.command()
@click.argument("name")
@click.pass_obj
def show(config: SkillsConfig, name: str):
    """Print a skill as the get_skill tool returns it."""
    configure_logging(config.log_level)
    catalog = create_catalog(config)
    catalog.discover()
    
    try:
        skill = catalog.load_skill(name)
    except SkillError as e:
        raise click.ClickException(str(e))
    
    click.echo(format_skill(skill))


@main.command()
@click.pass_obj
def dirs(config: SkillsConfig):
    """Show skill directories, lowest to highest priority, with the skills each one provides."""
    catalog = create_catalog(config)
    catalog.discover()
    skills_by_location = catalog.registry.skills_by_location()
    
    table = Table(title="Skill directories (later entries override earlier ones)")
    table.add_column("#", justify="right")
    table.add_column("Path")
    table.add_column("Exists")
    table.add_column("Skills", style="cyan")
    
    for info in get_directory_info(catalog.skill_dirs):
        exists = "[green]yes[/green]" if info["exists"] else "[red]no[/red]"
        skills = ", ".join(skills_by_location.get(str(info["path"]), []))
        table.add_row(str(info["priority"]), str(info["path"]), exists, escape(skills))
    
    console.print(table)


if __name__ == "__main__":
    main()
