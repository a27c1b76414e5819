"""Constants and configuration for RetroFM."""

# Box drawing characters (Unicode).
BOX_TL = "╔"
BOX_TR = "╗"
BOX_BL = "╚"
BOX_BR = "╝"
BOX_H = "═"
BOX_V = "║"

# Single-line box characters.
SB_TL = "┌"
SB_TR = "┐"
SB_BL = "└"
SB_BR = "┘"
SB_H = "─"
SB_V = "│"

# ASCII fallback for terminals without Unicode support.
ASCII_BOX = ("+", "+", "+", "+", "-", "|")

# Color pair IDs.
C_WIN_BODY = 1
C_WIN_BORDER = 2
C_WIN_TITLE = 3
C_HEADER = 4
C_ROW_HIGHLIGHT = 5
C_FM_DIR = 6
C_FM_LINK = 7
C_FM_MARKED = 8
C_DIALOG = 9
C_BUTTON = 10
C_BUTTON_SEL = 11
C_STATUS = 12
C_STATUS_ERROR = 13

# Normalized key codes (see utils.normalize_key_code).
KEY_LF = 10
KEY_CR = 13
KEY_ESC = 27
KEY_DEL = 127
KEY_CTRL_H = 8    # Ctrl+Backspace, unless erasechar() says it is plain Backspace
KEY_CTRL_U = 21
KEY_MIN = 256     # curses function keys live above this; typed chars never map there

# Layout constants
MIN_TERM_WIDTH = 40
MIN_TERM_HEIGHT = 10
EXPLORER_HEADER_ROWS = 2     # Title border + column header
EXPLORER_FOOTER_ROWS = 2     # Bottom border + status bar
SIZE_COLUMN_WIDTH = 10
SELECTION_MARK = "*"
