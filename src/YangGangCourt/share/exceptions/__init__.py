from .VoteExpiredError import VoteExpiredError

__all__ = [
    "VoteExpiredError",
]
