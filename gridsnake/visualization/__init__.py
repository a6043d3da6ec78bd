from .terminal_display import TerminalRenderer, LiveBoard

__all__ = [
    "TerminalRenderer",
    "LiveBoard",
]
