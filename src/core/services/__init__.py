"""Application services (orchestration over core interfaces)."""
