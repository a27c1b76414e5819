"""Application core: controller, event loop, config and action contracts."""
