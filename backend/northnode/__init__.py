"""NorthNode governance and strategy engines (explicit package marker)."""

__all__ = [
    "api",
    "core",
    "db",
    "models",
    "policies",
    "repos",
    "schemas",
    "services",
]
