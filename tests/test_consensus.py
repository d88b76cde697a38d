from sharesift.consensus import consensus, tally, evaluate
from sharesift.dealer import deal
from sharesift.types import Share, Accepted, Rejected, Report


def points(coeffs, xs):
    return [Share(x, sum(c * x ** i for i, c in enumerate(coeffs))) for x in xs]


# f(x) = 73 + 31x + 5x², so f(1) = 109, f(2) = 155, f(3) = 211 and f(6) = 439
HONEST = [Share(1, 109), Share(2, 155), Share(3, 211)]


def test_corrupt_share_is_rejected():
    # With x = 6 shifted by 1, every combination containing it reconstructs 73 plus 1/10, 1/5 or 1/2.
    report = consensus(HONEST + [Share(6, 440)], 3)
    assert report == Report(secret=73, valid=(1, 2, 3), invalid=(6,), votes=1, total=4, rejected=3)


def test_tie_goes_to_earliest_combination():
    # Shifting x = 6 by 10 makes the corrupted combinations reconstruct 74, 75 and 78, one vote each.
    shares = HONEST + [Share(6, 449)]
    result = tally(shares, 3)
    assert list(result.votes) == [73, 74, 75, 78]
    report = consensus(shares, 3)
    assert (report.secret, report.valid, report.invalid) == (73, (1, 2, 3), (6,))
    # the same shares in another order change which combination is enumerated first
    report = consensus([Share(6, 449)] + HONEST, 3)
    assert (report.secret, report.valid, report.invalid) == (74, (1, 2, 6), (3,))


def test_one_corrupt_share_out_of_ten():
    coeffs = [79836264049851, 1987, -3, 555555, 42, 17, 1000003]
    shares = points(coeffs, range(1, 11))
    shares[7] = Share(8, shares[7].y + 1)
    report = consensus(shares, 7)
    assert report.secret == 79836264049851
    assert report.valid == (1, 2, 3, 4, 5, 6, 7, 9, 10)
    assert report.invalid == (8,)
    assert report.votes == 36  # C(9, 7) combinations avoid x = 8
    assert report.total == 120


def test_all_shares_consistent():
    shares = points([3, 0, 1], [1, 2, 3, 6])
    report = consensus(shares, 3)
    assert report == Report(secret=3, valid=(1, 2, 3, 6), invalid=(), votes=4, total=4, rejected=0)


def test_k_equals_n_consistent():
    shares = points([11, 2, 3, 4], [1, 2, 3, 4])
    report = consensus(shares, 4)
    assert report == Report(secret=11, valid=(1, 2, 3, 4), invalid=(), votes=1, total=1, rejected=0)


def test_k_equals_n_inconsistent():
    assert consensus([Share(1, 1), Share(2, 2), Share(4, 2)], 3) is None


def test_no_combinations():
    assert consensus([Share(1, 1)], 2) is None


def test_duplicate_keys_are_singular():
    shares = [Share(1, 3), Share(1, 3), Share(2, 5)]
    outcomes = dict(evaluate(shares, 2))
    assert outcomes == {(0, 1): Rejected("singular"), (0, 2): Accepted(1), (1, 2): Accepted(1)}
    report = consensus(shares, 2)
    assert (report.secret, report.valid, report.invalid, report.rejected) == (1, (1, 2), (), 1)


def test_rejections_are_counted_by_reason():
    result = tally(HONEST + [Share(6, 440), Share(6, 440)], 3)
    assert result.total == 10
    assert result.rejected["singular"] == 3
    assert result.rejected["non-integer"] == 6
    assert list(result.votes) == [73]


def test_idempotent(rng):
    shares = deal(123456789, 4, 8, corrupt=[2, 5], rng=rng)
    assert consensus(shares, 4) == consensus(shares, 4)


def test_parallel_matches_serial(rng):
    shares = deal(987654321, 3, 7, corrupt=[4], rng=rng)
    serial = consensus(shares, 3)
    assert serial.secret == 987654321
    assert serial.invalid == (4,)
    assert consensus(shares, 3, jobs=2) == serial
    assert list(evaluate(shares, 3, jobs=2)) == list(evaluate(shares, 3))
