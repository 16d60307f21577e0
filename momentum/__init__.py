"""momentum - context capture, task tracking and social obligations."""

__version__ = "0.1.0"
__logo__ = "⏩"
