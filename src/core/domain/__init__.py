"""Domain models and constants.

Why here:
- Pure data structures (Pydantic v2) and fixed notices live in the domain.
- The domain knows nothing about the CLI, Rich or settings.
"""
