from .MessageLogListener import MessageLogListener

__all__ = [
    "MessageLogListener",
]
