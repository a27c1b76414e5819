"""
Popup stack and key routing.

The controller owns the base views, the popup stack and the filesystem
engine. Exactly one state receives each key: the top popup, or the active
base view when no popup is open. Popups and their requesters never talk to
each other directly; the controller moves one Message between them when a
popup is opened or closed.
"""
import logging

from ..ui.confirmation_popup import ConfirmationPopup
from ..ui.explorer import ExplorerView
from ..ui.key_mapping_popup import KeyMappingPopup
from ..ui.new_file_popup import NewFilePopup
from ..ui.sorting_popup import SortingPopup
from ..ui.text_field_popup import TextFieldPopup
from .actions import AppSignal, AppWindow

LOGGER = logging.getLogger(__name__)


class Controller:
    """Routes keys to the active state and applies the returned AppSignal."""

    # Popups opened without a handoff.
    _PLAIN_POPUPS = {
        AppSignal.OPEN_SORTING: SortingPopup,
        AppSignal.OPEN_KEY_MAPPING: KeyMappingPopup,
        AppSignal.OPEN_NEW_FILE: NewFilePopup,
    }

    # Popups that receive the requester's outbound message on open.
    _REQUEST_POPUPS = {
        AppSignal.OPEN_TEXT_FIELD: TextFieldPopup,
        AppSignal.OPEN_CONFIRMATION: ConfirmationPopup,
    }

    def __init__(self, engine, base_views=None):
        self.engine = engine
        self.base_views = list(base_views) if base_views else [ExplorerView()]
        self.current_window = AppWindow.EXPLORER
        self.popup_stack = []
        self.active_base_view.enter(self.engine)

    @property
    def active_base_view(self):
        return self.base_views[self.current_window]

    def active_state(self):
        """Return the state that currently receives keys."""
        if self.popup_stack:
            return self.popup_stack[-1]
        return self.active_base_view

    # ------------------------------------------------------------------
    # Message handoff
    # ------------------------------------------------------------------

    def get_current_message(self):
        """Pull the outbound message from the active state."""
        return self.active_state().get_outbound_message()

    def send_current_message(self, message):
        """Deliver ``message`` (possibly None) to the active state."""
        self.active_state().handle_inbound_message(message, self.engine)

    # ------------------------------------------------------------------
    # Stack transitions
    # ------------------------------------------------------------------

    def push_popup(self, popup):
        self.popup_stack.append(popup)
        popup.enter(self.engine)
        LOGGER.debug('Opened %s (depth %d)', type(popup).__name__, len(self.popup_stack))

    def close_popup(self):
        """Pop the top popup and hand its outbound message to the new top."""
        if not self.popup_stack:
            LOGGER.debug('close_popup with empty stack ignored')
            return
        message = self.get_current_message()
        popup = self.popup_stack.pop()
        popup.exit(self.engine)
        LOGGER.debug('Closed %s with message %r', type(popup).__name__, message)
        self.send_current_message(message)

    def change_window(self, window):
        self.active_base_view.exit(self.engine)
        self.current_window = AppWindow(window)
        self.active_base_view.enter(self.engine)

    def apply_signal(self, signal):
        """Apply one AppSignal; returns EXIT or NONE for the loop."""
        signal = AppSignal(signal) if signal is not None else AppSignal.NONE

        if signal == AppSignal.EXIT:
            return AppSignal.EXIT

        popup_cls = self._PLAIN_POPUPS.get(signal)
        if popup_cls is not None:
            self.push_popup(popup_cls())
            return AppSignal.NONE

        popup_cls = self._REQUEST_POPUPS.get(signal)
        if popup_cls is not None:
            message = self.get_current_message()
            self.push_popup(popup_cls())
            self.send_current_message(message)
            return AppSignal.NONE

        if signal == AppSignal.CLOSE_POPUP:
            self.close_popup()
        elif signal == AppSignal.CHANGE_TO_EXPLORER:
            self.change_window(AppWindow.EXPLORER)
        return AppSignal.NONE

    def dispatch_key(self, key):
        """Route one key to the active state and apply its signal."""
        signal = self.active_state().handle_key(key, self.engine)
        return self.apply_signal(signal)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, canvas):
        """Draw the base view, then every popup bottom to top."""
        self.active_base_view.draw(canvas, self.engine)
        for popup in self.popup_stack:
            popup.draw(canvas, self.engine)
