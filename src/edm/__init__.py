"""Line-oriented text editor built around a UI-agnostic editing engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "cli",
    "commands",
    "config",
    "errors",
    "host",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
