"""Line-oriented text editor with ed-style addressing."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "errors",
    "interpreter",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
