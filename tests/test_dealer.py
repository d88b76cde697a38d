import random

import pytest

from sharesift.consensus import consensus
from sharesift.dealer import deal
from sharesift.gauss import solve
from sharesift.types import Accepted


def test_honest_shares(rng):
    shares = deal(424242, 4, 6, rng=rng)
    assert [share.x for share in shares] == [1, 2, 3, 4, 5, 6]
    assert solve(shares[:4]) == Accepted(424242)
    assert solve(shares[2:]) == Accepted(424242)


def test_threshold_one(rng):
    shares = deal(77, 1, 3, rng=rng)
    assert all(share.y == 77 for share in shares)


def test_fewer_shares_do_not_determine_secret(rng):
    # with a nonzero leading coefficient, k - 1 shares interpolate a different polynomial
    shares = deal(9999, 3, 5, rng=rng)
    assert solve(shares[:2]) != Accepted(9999)


def test_corrupt_shares_detected(rng):
    shares = deal(31337, 3, 8, corrupt=[5], rng=rng)
    report = consensus(shares, 3)
    assert report.secret == 31337
    assert report.invalid == (5,)
    assert report.valid == (1, 2, 3, 4, 6, 7, 8)


def test_reproducible():
    assert deal(5, 3, 5, rng=random.Random(1)) == deal(5, 3, 5, rng=random.Random(1))


@pytest.mark.parametrize("secret, k, n, corrupt", [(-1, 2, 3, ()), (1, 0, 3, ()), (1, 4, 3, ()), (1, 2, 3, (4,)), (1, 2, 3, (0,))])
def test_invalid_arguments(secret, k, n, corrupt):
    with pytest.raises(ValueError):
        deal(secret, k, n, corrupt=corrupt)
