# termportal/content/__init__.py

"""
Static content for the portal.

Everything here is immutable and handed to the view controller at
construction: the home menu, the about page, the home-screen taglines and the
records shown in the list view. Nothing in the session ever changes it.
"""

import random
from dataclasses import replace
from typing import Optional, Tuple, Union

from ..core.controller import MenuEntry, View
from ..exceptions import ContentError
from .records import Project, Server

MENU: Tuple[MenuEntry, ...] = (
    MenuEntry("About & Welcome", "👋", "Who runs this thing?", View.ABOUT),
    MenuEntry("Portfolio", "🚀", "Projects, work, and side quests", View.LIST_BROWSE),
    MenuEntry("Play Snake!", "🐍", "Take a break, you deserve it", View.GAME),
)

ABOUT_TEXT = """\
Hey, welcome aboard!

What I do:
  Developer, homelab tinkerer, terminal maximalist. I build things,
  break them, learn why, and repeat.

Currently into:
  Python tooling, self-hosting everything, CLI aesthetics.

Find me:
  Web      https://example.dev
  GitHub   https://github.com/example
  SSH      ssh portal.example.dev -p 2222"""

TAGLINES: Tuple[str, ...] = (
    '"Not all treasure is silver and gold, mate."',
    '"Wherever we want to go, we go."',
    '"Why fight when you can negotiate?"',
    '"Did everyone see that? Because I will not be doing it again."',
    '"The problem is not the problem. The problem is your attitude about the problem."',
    '"Nobody move! I dropped me brain."',
)

PROJECTS: Tuple[Project, ...] = (
    Project(
        name="Terminal Portal",
        description="This very portal: a menu, a project browser and a snake game in one session.",
        tech=("Python", "curses", "pydantic", "rich"),
        url="ssh portal.example.dev -p 2222",
        status="Live",
        emoji="🟢",
    ),
    Project(
        name="Lingo Ops",
        description="Manage localization as code and never miss a missing key again.",
        tech=("Python", "FastAPI", "React"),
        url="lingo.example.dev",
        status="Closed Preview",
        emoji="🔵",
    ),
    Project(
        name="Personal Blog",
        description="Got to write something somewhere, right?",
        tech=("Markdown", "Static site"),
        url="https://example.dev",
        status="Live",
        emoji="🟢",
    ),
    Project(
        name="Devs Directory",
        description="A link page for local developers. Everyone deserves a corner of the internet.",
        tech=("Python", "Django"),
        url="devs.example.dev",
        status="Ongoing",
        emoji="🟡",
    ),
    Project(
        name="Secret Project",
        description="Top secret. Lawyers are going to love it.",
        tech=("Python",),
        url="¯\\_(ツ)_/¯",
        status="Ongoing",
        emoji="🔴",
    ),
)

SERVERS: Tuple[Server, ...] = (
    Server("This Portal", "ssh portal.example.dev -p 2222", "You are here. Very meta.", "🌀", "portal"),
    Server("Main Server", "ssh example.dev", "The homelab overlord. Runs everything.", "🖥️", "homelab"),
    Server("Dev Box", "ssh dev.example.dev", "Where code goes to be born (and sometimes die).", "💻", "dev"),
    Server("Staging", "ssh staging.example.dev", "It works on staging, I swear.", "🧪", "staging"),
)

_SOURCES = {
    "projects": PROJECTS,
    "servers": SERVERS,
}


def load_records(kind: str) -> Tuple[Union[Project, Server], ...]:
    """
    Return the record list for a content source.

    Args:
        kind: "projects" or "servers"

    Raises:
        ContentError: If the source is unknown
    """
    try:
        return _SOURCES[kind]
    except KeyError:
        raise ContentError(
            f"Unknown content source, expected one of {sorted(_SOURCES)}", source=kind
        ) from None


def menu_for(kind: str) -> Tuple[MenuEntry, ...]:
    """The home menu, with the list entry labelled for the chosen source."""
    if kind != "servers":
        return MENU
    return tuple(
        replace(entry, label="Servers", icon="🖥️", description="Hosts you can reach from here")
        if entry.target is View.LIST_BROWSE
        else entry
        for entry in MENU
    )


def pick_tagline(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(TAGLINES)


__all__ = [
    "MENU",
    "ABOUT_TEXT",
    "TAGLINES",
    "PROJECTS",
    "SERVERS",
    "Project",
    "Server",
    "load_records",
    "menu_for",
    "pick_tagline",
]
