from .ReplyNominationListener import ReplyNominationListener

__all__ = [
    "ReplyNominationListener",
]
