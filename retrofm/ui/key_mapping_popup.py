"""Static key binding help."""
from ..core.actions import AppSignal
from ..utils import safe_addstr, theme_attr
from .popup import Popup

KEY_MAPPINGS = (
    ('j / Down', 'move down'),
    ('k / Up', 'move up'),
    ('l / Right', 'open folder'),
    ('h / Left', 'parent folder'),
    ('y', 'add to selection'),
    ('c', 'clear selection'),
    ('v', 'paste selection'),
    ('x', 'delete selection'),
    ('g', 'toggle hidden files'),
    ('d', 'change folder positions'),
    ('s', 'open sorting popup'),
    ('n', 'create new file'),
    ('m', 'show this help'),
    ('q', 'quit file explorer'),
)


class KeyMappingPopup(Popup):
    """Help listing; any key closes it."""

    title = 'Key Mappings'
    width = 40
    height = len(KEY_MAPPINGS) + 4

    def handle_key(self, key, engine):
        return AppSignal.CLOSE_POPUP

    def draw(self, canvas, engine):
        y, x, h, _ = self.draw_frame(canvas)
        attr = theme_attr('dialog')
        for i, (keys, action) in enumerate(KEY_MAPPINGS[: max(0, h - 4)]):
            safe_addstr(canvas, y + 2 + i, x + 2, f'{keys:<11} {action}', attr)
