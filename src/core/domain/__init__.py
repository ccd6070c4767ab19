"""Domain models and errors.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about files, JSON or the CLI: only animals.
"""
