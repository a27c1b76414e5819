"""Theme definitions and lookup helpers for RetroFM."""

from dataclasses import dataclass
import curses
from typing import Optional

from .constants import (
    C_BUTTON,
    C_BUTTON_SEL,
    C_DIALOG,
    C_FM_DIR,
    C_FM_LINK,
    C_FM_MARKED,
    C_HEADER,
    C_ROW_HIGHLIGHT,
    C_STATUS,
    C_STATUS_ERROR,
    C_WIN_BODY,
    C_WIN_BORDER,
    C_WIN_TITLE,
)

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLACK": 0,
    "COLOR_RED": 1,
    "COLOR_BLUE": 4,
    "COLOR_CYAN": 6,
    "COLOR_GREEN": 2,
    "COLOR_MAGENTA": 5,
    "COLOR_WHITE": 7,
    "COLOR_YELLOW": 3,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

DEFAULT_THEME = "classic"

ROLE_TO_PAIR_ID = {
    "window_body": C_WIN_BODY,
    "window_border": C_WIN_BORDER,
    "window_title": C_WIN_TITLE,
    "header": C_HEADER,
    "row_highlight": C_ROW_HIGHLIGHT,
    "file_directory": C_FM_DIR,
    "file_symlink": C_FM_LINK,
    "file_marked": C_FM_MARKED,
    "dialog": C_DIALOG,
    "button": C_BUTTON,
    "button_selected": C_BUTTON_SEL,
    "status": C_STATUS,
    "status_error": C_STATUS_ERROR,
}


def _mk_pairs(fg_bg):
    return {
        "window_body": fg_bg[0],
        "window_border": fg_bg[1],
        "window_title": fg_bg[2],
        "header": fg_bg[3],
        "row_highlight": fg_bg[4],
        "file_directory": fg_bg[5],
        "file_symlink": fg_bg[6],
        "file_marked": fg_bg[7],
        "dialog": fg_bg[8],
        "button": fg_bg[8],
        "button_selected": fg_bg[4],
        "status": fg_bg[9],
        "status_error": fg_bg[10],
    }


@dataclass(frozen=True)
class Theme:
    """RetroFM semantic theme definition."""

    key: str
    label: str
    pairs_base: dict[str, tuple[int, int]]


THEMES = {
    "classic": Theme(
        key="classic",
        label="Classic",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
                (curses.COLOR_BLUE, curses.COLOR_BLACK),
                (curses.COLOR_MAGENTA, curses.COLOR_BLACK),
                (curses.COLOR_YELLOW, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_WHITE, curses.COLOR_RED),
            )
        ),
    ),
    "dos_cga": Theme(
        key="dos_cga",
        label="DOS / CGA",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_YELLOW, curses.COLOR_BLUE),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_BLUE, curses.COLOR_YELLOW),
                (curses.COLOR_CYAN, curses.COLOR_BLUE),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_GREEN, curses.COLOR_BLUE),
                (curses.COLOR_RED, curses.COLOR_BLUE),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_YELLOW, curses.COLOR_RED),
            )
        ),
    ),
    "hacker": Theme(
        key="hacker",
        label="Hacker",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_YELLOW, curses.COLOR_BLACK),
                (curses.COLOR_GREEN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_GREEN),
                (curses.COLOR_RED, curses.COLOR_BLACK),
            )
        ),
    ),
}


def list_themes():
    """Return themes in deterministic UI order."""
    order = ("classic", "dos_cga", "hacker")
    return [THEMES[key] for key in order]


def get_theme(theme_key: Optional[str]) -> Theme:
    """Resolve theme by key with fallback to default."""
    if not theme_key:
        return THEMES[DEFAULT_THEME]
    return THEMES.get(theme_key, THEMES[DEFAULT_THEME])
