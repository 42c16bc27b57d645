"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP, the CLI or the MCP SDK: only
  Confluence concepts and the shapes of its API.
"""
