# termportal/__init__.py

"""
termportal: An interactive terminal portal with a built-in snake game.

This package runs a single-screen terminal session with a home menu, an
about page, a browsable list of projects (or servers) and a real-time snake
game. All input goes through one view controller; the snake game is a pure
tick-driven simulation the controller hosts.

Public API:
- run_portal(): Run an interactive session in the current terminal
- ViewController: Route keys and ticks for one session
- GameEngine: The snake simulation
- ListBrowser: Bounded cursor over a static list
- PortalSettings: Pydantic settings (TERMPORTAL_* environment overrides)
"""

import logging

# Import complete public API from single source of truth
from .portal_api import *

# Get package-level logger (configuration happens when run_portal is called)
logger = logging.getLogger("termportal")
