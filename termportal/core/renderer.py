# termportal/core/renderer.py

"""
Curses renderer for termportal.

Draws a SessionSnapshot onto a curses window. The renderer only reads the
snapshot; it holds no state of its own and never talks to the controller.
"""

import curses
import textwrap

from ..games.snake import EndReason, GameSnapshot
from .controller import SessionSnapshot, View

# Color pairs
TITLE = 1
TEXT = 2
ACCENT = 3
SUBTLE = 4
SNAKE_HEAD = 5
SNAKE_BODY = 6
FOOD = 7
SCORE = 8

BANNER = [
    "▀█▀ █▀▀ █▀█ █▀▄▀█   █▀█ █▀█ █▀█ ▀█▀ ▄▀█ █",
    " █  ██▄ █▀▄ █ ▀ █   █▀▀ █▄█ █▀▄  █  █▀█ █▄▄",
]
SIMPLE_BANNER = ["~ termportal ~"]

END_MESSAGES = {
    EndReason.WALL: "You hit the wall",
    EndReason.SELF: "You bit yourself",
    EndReason.BOARD_FULL: "Board full, you win!",
}


def setup_colors():
    """Configure color pairs. Call once after curses starts."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(TITLE, curses.COLOR_MAGENTA, -1)
    curses.init_pair(TEXT, curses.COLOR_WHITE, -1)
    curses.init_pair(ACCENT, curses.COLOR_CYAN, -1)
    curses.init_pair(SUBTLE, curses.COLOR_BLUE, -1)
    curses.init_pair(SNAKE_HEAD, curses.COLOR_GREEN, -1)
    curses.init_pair(SNAKE_BODY, curses.COLOR_CYAN, -1)
    curses.init_pair(FOOD, curses.COLOR_RED, -1)
    curses.init_pair(SCORE, curses.COLOR_YELLOW, -1)


def safe_addstr(win, y, x, text, attr=0):
    """Safely add a string to the screen, handling boundary conditions."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    ml = w - x
    if ml <= 0:
        return
    try:
        win.addstr(y, x, text[:ml], attr)
    except curses.error:
        pass


def render(win, snap: SessionSnapshot):
    """Draw one frame for the snapshot's current view."""
    win.erase()
    if snap.view is View.ABOUT:
        draw_about(win, snap)
    elif snap.view is View.LIST_BROWSE:
        draw_list(win, snap)
    elif snap.view is View.GAME and snap.game is not None:
        draw_game(win, snap.game)
    else:
        draw_home(win, snap)
    win.noutrefresh()
    curses.doupdate()


def draw_footer(win, text):
    h, _ = win.getmaxyx()
    safe_addstr(win, h - 1, 2, text, curses.color_pair(SUBTLE) | curses.A_ITALIC)


def draw_home(win, snap: SessionSnapshot):
    _, mx = win.getmaxyx()
    banner = BANNER if mx >= max(len(line) for line in BANNER) + 4 else SIMPLE_BANNER
    y = 1
    for line in banner:
        safe_addstr(win, y, 2, line, curses.color_pair(TITLE) | curses.A_BOLD)
        y += 1
    y += 1
    if snap.tagline:
        safe_addstr(win, y, 2, snap.tagline, curses.color_pair(ACCENT) | curses.A_ITALIC)
        y += 2

    safe_addstr(win, y, 2, "Navigate", curses.color_pair(SCORE) | curses.A_BOLD)
    y += 1
    for i, entry in enumerate(snap.menu):
        line = f"{entry.icon}  {entry.label}"
        if i == snap.menu_cursor:
            safe_addstr(win, y, 2, f"▸ {line}", curses.color_pair(TITLE) | curses.A_BOLD)
            safe_addstr(win, y, 8 + len(line), entry.description, curses.color_pair(SUBTLE))
        else:
            safe_addstr(win, y, 4, line, curses.color_pair(TEXT))
        y += 1
    draw_footer(win, "↑↓ / j k to move  •  enter to select  •  q to quit")


def draw_about(win, snap: SessionSnapshot):
    safe_addstr(win, 1, 2, "About & Welcome", curses.color_pair(TITLE) | curses.A_BOLD)
    y = 3
    for line in snap.about_text.splitlines():
        safe_addstr(win, y, 4, line, curses.color_pair(TEXT))
        y += 1
    draw_footer(win, "esc / q to go back")


def draw_list(win, snap: SessionSnapshot):
    h, mx = win.getmaxyx()
    title = next((e.label for e in snap.menu if e.target is View.LIST_BROWSE), "Browse")
    safe_addstr(win, 1, 2, title, curses.color_pair(TITLE) | curses.A_BOLD)
    count = f"{snap.list_cursor + 1}/{len(snap.records)}"
    safe_addstr(win, 1, max(2, mx - len(count) - 2), count, curses.color_pair(SUBTLE))

    # Keep the selected record on screen by scrolling whole entries.
    entry_height = 4
    visible = max(1, (h - 5) // entry_height)
    first = max(0, snap.list_cursor - visible + 1)
    y = 3
    for i in range(first, min(len(snap.records), first + visible)):
        record = snap.records[i]
        selected = i == snap.list_cursor
        marker = "▸ " if selected else "  "
        name_attr = curses.color_pair(SCORE if selected else ACCENT) | curses.A_BOLD
        safe_addstr(win, y, 2, f"{marker}{getattr(record, 'title', str(record))}", name_attr)
        subtitle = getattr(record, "subtitle", "")
        details = getattr(record, "details", "")
        safe_addstr(win, y + 1, 6, subtitle, curses.color_pair(TEXT))
        if selected:
            description = getattr(record, "description", "")
            wrapped = textwrap.shorten(description, width=max(10, mx - 8), placeholder="…")
            safe_addstr(win, y + 2, 6, wrapped, curses.color_pair(SUBTLE))
        else:
            safe_addstr(win, y + 2, 6, details, curses.color_pair(SUBTLE))
        y += entry_height
    draw_footer(win, "↑↓ / j k to move  •  esc / q to go back")


def draw_game(win, game: GameSnapshot):
    # Board with a one-cell border, stats panel to the right.
    top, left = 1, 2
    border_attr = curses.color_pair(TITLE)
    safe_addstr(win, top, left, "┌" + "─" * game.width + "┐", border_attr)
    for row in range(game.height):
        safe_addstr(win, top + 1 + row, left, "│", border_attr)
        safe_addstr(win, top + 1 + row, left + game.width + 1, "│", border_attr)
    safe_addstr(win, top + game.height + 1, left, "└" + "─" * game.width + "┘", border_attr)

    if game.food is not None:
        fx, fy = game.food
        safe_addstr(win, top + 1 + fy, left + 1 + fx, "*", curses.color_pair(FOOD) | curses.A_BOLD)
    for i, (x, y) in enumerate(game.snake):
        if i == 0:
            safe_addstr(win, top + 1 + y, left + 1 + x, "O", curses.color_pair(SNAKE_HEAD) | curses.A_BOLD)
        else:
            safe_addstr(win, top + 1 + y, left + 1 + x, "o", curses.color_pair(SNAKE_BODY))

    px = left + game.width + 5
    safe_addstr(win, top + 1, px, "SNAKE", curses.color_pair(SCORE) | curses.A_BOLD)
    safe_addstr(win, top + 3, px, "SCORE", curses.color_pair(SUBTLE))
    safe_addstr(win, top + 4, px, f" {game.score}", curses.color_pair(TITLE) | curses.A_BOLD)
    safe_addstr(win, top + 6, px, "HIGH SCORE", curses.color_pair(SUBTLE))
    safe_addstr(win, top + 7, px, f" {game.high_score}", curses.color_pair(SCORE) | curses.A_BOLD)
    safe_addstr(win, top + 9, px, "w a s d", curses.color_pair(SUBTLE))
    safe_addstr(win, top + 10, px, "↑ ↓ ← →", curses.color_pair(SUBTLE))
    safe_addstr(win, top + 11, px, "h j k l", curses.color_pair(SUBTLE))

    if game.game_over:
        cy = top + game.height // 2
        cx = left + game.width // 2
        lines = [
            ("GAME OVER", curses.color_pair(FOOD) | curses.A_BOLD),
            (END_MESSAGES.get(game.end_reason, ""), curses.color_pair(TEXT)),
            (f"Final Score: {game.score}", curses.color_pair(SCORE)),
            ("enter to restart • esc to go back", curses.color_pair(SUBTLE)),
        ]
        for offset, (text, attr) in enumerate(lines):
            safe_addstr(win, cy - 1 + offset, cx - len(text) // 2, text, attr)
        draw_footer(win, "")
    else:
        draw_footer(win, "esc to go back to menu")
