"""
Utility functions for RetroFM.
"""
import curses
import locale
import unicodedata

from .constants import (
    ASCII_BOX, BOX_TL, BOX_TR, BOX_BL, BOX_BR, BOX_H, BOX_V,
    SB_TL, SB_TR, SB_BL, SB_BR, SB_H, SB_V, KEY_MIN,
)
from .theme import ROLE_TO_PAIR_ID, get_theme


def init_colors(theme_key_or_obj=None):
    """Initialize curses color pairs from the active semantic theme."""
    curses.start_color()
    curses.use_default_colors()

    if theme_key_or_obj is None or isinstance(theme_key_or_obj, str):
        theme = get_theme(theme_key_or_obj)
    else:
        theme = theme_key_or_obj

    for role, pair_id in ROLE_TO_PAIR_ID.items():
        fg, bg = theme.pairs_base[role]
        curses.init_pair(pair_id, fg, bg)


def theme_attr(role):
    """Return curses color attribute for a semantic role."""
    return curses.color_pair(ROLE_TO_PAIR_ID[role])


def safe_addstr(win, y, x, text, attr=0):
    """Write string safely, clipping to window bounds."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x >= w:
        return
    max_len = w - x - 1
    if max_len <= 0:
        return
    try:
        win.addnstr(y, x, text, max_len, attr)
    except curses.error:
        pass


def normalize_key_code(key):
    """Normalize keys from get_wch()/getch() into comparable integer codes.

    Typed characters beyond Latin-1 return None: their code points overlap
    the curses KEY_* range (U+0107 is KEY_BACKSPACE).
    """
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key or len(key) != 1:
        return None
    if key in ('\n', '\r'):
        return 10
    if key == '\x1b':
        return 27
    if key == '\t':
        return 9
    if key == '\x7f':
        return 127
    if key == '\b':
        return 8
    code = ord(key)
    return code if code < KEY_MIN else None


def key_char(key):
    """Return the printable character for ``key`` or None."""
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return key
    if isinstance(key, int) and 32 <= key <= 126:
        return chr(key)
    return None


def draw_box(win, y, x, h, w, attr=0, double=True, use_unicode=True):
    """Draw a box with double or single line borders."""
    if not use_unicode:
        tl, tr, bl, br, hz, vt = ASCII_BOX
    elif double:
        tl, tr, bl, br, hz, vt = BOX_TL, BOX_TR, BOX_BL, BOX_BR, BOX_H, BOX_V
    else:
        tl, tr, bl, br, hz, vt = SB_TL, SB_TR, SB_BL, SB_BR, SB_H, SB_V

    safe_addstr(win, y, x, tl + hz * (w - 2) + tr, attr)
    for i in range(1, h - 1):
        safe_addstr(win, y + i, x, vt, attr)
        safe_addstr(win, y + i, x + w - 1, vt, attr)
    safe_addstr(win, y + h - 1, x, bl + hz * (w - 2) + br, attr)


def check_unicode_support():
    """Check if terminal supports Unicode."""
    try:
        '╔'.encode(locale.getpreferredencoding())
        return True
    except (UnicodeEncodeError, LookupError):
        return False


def cell_width(ch):
    """Return terminal cell width for a single character."""
    if not ch:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def fit_text_to_cells(text, max_cells):
    """Clip/pad text so rendered width does not exceed max_cells."""
    if max_cells <= 0:
        return ''
    out = []
    used = 0
    for ch in text:
        w = cell_width(ch)
        if used + w > max_cells:
            break
        out.append(ch)
        used += w
    if used < max_cells:
        out.append(' ' * (max_cells - used))
    return ''.join(out)
