from .FailReason import FailReason
from .VoteDuration import VoteDuration
from .VoteKind import VoteKind

__all__ = [
    "FailReason",
    "VoteDuration",
    "VoteKind",
]
