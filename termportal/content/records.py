# termportal/content/records.py

"""Record types shown by the portal's list view."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Project:
    """A portfolio entry."""
    name: str
    description: str
    tech: Tuple[str, ...]
    url: str
    status: str
    emoji: str = ""

    @property
    def title(self) -> str:
        return f"{self.emoji} {self.name}" if self.emoji else self.name

    @property
    def subtitle(self) -> str:
        return self.url

    @property
    def details(self) -> str:
        return f"{self.status}  |  {', '.join(self.tech)}"


@dataclass(frozen=True)
class Server:
    """A reachable host listed on the servers page."""
    name: str
    host: str
    description: str
    icon: str = ""
    tag: str = ""

    @property
    def title(self) -> str:
        return f"{self.icon} {self.name}" if self.icon else self.name

    @property
    def subtitle(self) -> str:
        return self.host

    @property
    def details(self) -> str:
        return f"#{self.tag}" if self.tag else ""
