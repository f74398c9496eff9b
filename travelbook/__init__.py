"""Travel booking forms with per-field validation, cross-field checks and a scripted event loop."""

__version__ = "0.1.0"
__all__ = ["app", "dialogue", "fields", "forms", "logger", "selection", "widgets"]