"""Shared test helpers.

Provides a small fake `curses` module so UI modules can be imported and
exercised without a terminal, plus helpers for building directory fixtures.
"""

from __future__ import annotations

import importlib
import os
import sys
import types
from unittest import mock


def make_fake_curses() -> types.ModuleType:
    """Return a minimal fake curses module for unit tests."""

    fake = types.ModuleType("curses")

    fake.A_BOLD = 1
    fake.A_REVERSE = 2
    fake.A_DIM = 4

    # Key codes (values are conventional but arbitrary for our logic tests).
    fake.KEY_UP = 259
    fake.KEY_DOWN = 258
    fake.KEY_LEFT = 260
    fake.KEY_RIGHT = 261
    fake.KEY_BACKSPACE = 263
    fake.KEY_ENTER = 343
    fake.KEY_RESIZE = 410

    fake.error = Exception
    fake.color_pair = lambda value: int(value) * 10
    fake.init_pair = mock.Mock()
    fake.start_color = mock.Mock()
    fake.use_default_colors = mock.Mock()
    fake.doupdate = mock.Mock()
    fake.update_lines_cols = mock.Mock()
    fake.curs_set = mock.Mock()
    fake.noecho = mock.Mock()
    fake.cbreak = mock.Mock()
    fake.set_escdelay = mock.Mock()
    fake.endwin = mock.Mock()
    fake.erasechar = mock.Mock(return_value=b"\x7f")

    return fake


def purge_retrofm_modules() -> None:
    for mod_name in list(sys.modules):
        if mod_name == "retrofm" or mod_name.startswith("retrofm."):
            sys.modules.pop(mod_name, None)


class FakeCursesModules:
    """Install a fake curses and import fresh retrofm modules against it.

    Every retrofm module is re-imported together so exception classes and
    enums stay identical across the modules a test touches.
    """

    def __init__(self, *module_names):
        self.module_names = module_names
        self.curses = None
        self._prev_curses = None

    def install(self):
        self._prev_curses = sys.modules.get("curses")
        self.curses = make_fake_curses()
        sys.modules["curses"] = self.curses
        purge_retrofm_modules()
        return [importlib.import_module(name) for name in self.module_names]

    def uninstall(self):
        purge_retrofm_modules()
        if self._prev_curses is not None:
            sys.modules["curses"] = self._prev_curses
        else:
            sys.modules.pop("curses", None)


def make_screen(height=24, width=80):
    """Return a stand-in for a curses window that records nothing."""
    return types.SimpleNamespace(
        getmaxyx=mock.Mock(return_value=(height, width)),
        addnstr=mock.Mock(),
        erase=mock.Mock(),
        noutrefresh=mock.Mock(),
        keypad=mock.Mock(),
        nodelay=mock.Mock(),
        timeout=mock.Mock(),
        get_wch=mock.Mock(return_value="q"),
    )


def write_file(path, data=b""):
    """Create ``path`` (and parents) with ``data`` bytes."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as fh:
        fh.write(data)
    return path
