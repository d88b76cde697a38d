from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Share:
    # One point (x, y) of the secret polynomial, the x-coordinate doubles as the key of the share.

    x: int
    y: int


Combo = tuple[int, ...]  # strictly increasing indices into a list of shares
Reason = Literal["singular", "non-integer"]


@dataclass(frozen=True)
class Accepted:
    secret: int


@dataclass(frozen=True)
class Rejected:
    reason: Reason


Outcome = Accepted | Rejected


@dataclass(frozen=True)
class Report:
    secret: int
    valid: tuple[int, ...]  # sorted x-values of the shares that took part in a winning combination
    invalid: tuple[int, ...]  # sorted x-values of all other shares
    votes: int  # number of combinations that reconstructed the secret
    total: int  # number of combinations evaluated
    rejected: int  # number of combinations discarded as singular or non-integer
