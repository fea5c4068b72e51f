"""Wiki.js page management tools for MCP hosts."""

__version__ = "2.0.0"
