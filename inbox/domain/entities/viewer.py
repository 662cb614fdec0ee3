"""Domain entity representing the authenticated viewer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewer:
    """User whose inbox is being rendered."""

    id: int
    login: str
    name: str = ""
    avatar_url: str = ""
