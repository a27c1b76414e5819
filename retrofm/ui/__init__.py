"""Views and popups stacked by the controller."""
