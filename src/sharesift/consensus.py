import multiprocessing
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .combos import combinations, count
from .gauss import solve
from .types import Share, Combo, Reason, Accepted, Rejected, Outcome, Report


# evaluation of the combinations, optionally in a pool of worker processes


THREADS = None  # pool size used when jobs is 0 or None, None means the number of CPU cores
CHUNK = 64  # number of combinations handed to a worker at a time


_shares: list[Share] = []


def initializer(shares: list[Share]) -> None:
    global _shares
    _shares = shares


def worker(combo: Combo) -> tuple[Combo, Outcome]:
    return combo, solve([_shares[i] for i in combo])


def evaluate(shares: Sequence[Share], k: int, jobs: int | None = 1) -> Iterator[tuple[Combo, Outcome]]:
    # Yields every combination together with its outcome in generator order. Pool.imap returns results
    # in submission order, so the parallel run yields exactly the same sequence as the serial one.
    shares = list(shares)
    if jobs == 1:
        for combo in combinations(len(shares), k):
            yield combo, solve([shares[i] for i in combo])
        return
    with multiprocessing.Pool(jobs or THREADS, initializer, (shares,)) as pool:
        yield from pool.imap(worker, combinations(len(shares), k), CHUNK)


# majority vote over the reconstructed secrets


@dataclass
class Tally:
    votes: dict[int, list[Combo]] = field(default_factory=lambda: {})  # in order of first appearance
    rejected: Counter[Reason] = field(default_factory=Counter)
    total: int = 0


def tally(shares: Sequence[Share], k: int, jobs: int | None = 1) -> Tally:
    result = Tally()
    for combo, outcome in evaluate(shares, k, jobs):
        result.total += 1
        match outcome:
            case Accepted(secret):
                result.votes.setdefault(secret, []).append(combo)
            case Rejected(reason):
                result.rejected[reason] += 1
    return result


def consensus(shares: Sequence[Share], k: int, jobs: int | None = 1) -> Report | None:
    """
    Reconstruct the secret from every k-subset of the shares and keep the one reconstructed most often.
    Ties go to the secret whose first supporting combination comes earliest in generator order. The
    shares of the supporting combinations are the valid ones, all other shares are invalid. Returns
    None if no combination yields an integral secret.
    """
    result = tally(shares, k, jobs)
    if not result.votes:
        return None
    # max keeps the first of several maximal items, and votes is ordered by first appearance
    secret, combos = max(result.votes.items(), key=lambda item: len(item[1]))
    valid = {shares[i].x for combo in combos for i in combo}
    invalid = {share.x for share in shares} - valid
    assert result.total == count(len(shares), k)
    return Report(
        secret=secret,
        valid=tuple(sorted(valid)),
        invalid=tuple(sorted(invalid)),
        votes=len(combos),
        total=result.total,
        rejected=result.rejected.total(),
    )
