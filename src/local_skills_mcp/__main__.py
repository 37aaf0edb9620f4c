"""
CLI entry point for the Local Skills MCP Server.

Allows running as: python -m local_skills_mcp
"""

from .cli import main

if __name__ == "__main__":
    main()
