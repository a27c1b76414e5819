"""Base class for the explorer view and every popup."""


class State:
    """Capability set shared by every view the controller can route to.

    Subclasses implement:
    - handle_key(key, engine): react to one key and return an AppSignal
    - draw(canvas, engine): render onto the curses screen

    and optionally the lifecycle hooks and the two message hooks used when
    a popup is opened or closed.
    """

    def enter(self, engine):
        """Called when the state becomes active."""
        pass

    def exit(self, engine):
        """Called right before the state is discarded or switched away."""
        pass

    def handle_key(self, key, engine):
        raise NotImplementedError

    def draw(self, canvas, engine):
        raise NotImplementedError

    def get_outbound_message(self):
        """Return the Message to hand over at open/close time, if any."""
        return None

    def handle_inbound_message(self, message, engine):
        """Receive the Message handed over by the controller (may be None)."""
        pass
