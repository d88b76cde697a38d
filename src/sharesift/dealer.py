import random
from typing import Iterable

from .types import Share


def deal(
    secret: int,
    k: int,
    n: int,
    bits: int = 64,
    corrupt: Iterable[int] = (),
    rng: random.Random | None = None,
) -> list[Share]:
    """
    Evaluate a random integer polynomial f of degree k - 1 with f(0) = secret at x = 1, ..., n. The
    coefficients are drawn from [0, 2^bits), with a nonzero leading one so that fewer than k shares
    never determine f. The y of every x in corrupt is shifted by a random nonzero offset.
    """
    rng = rng or random.Random()
    if not 1 <= k <= n:
        raise ValueError("Invalid n or k")
    if secret < 0:
        raise ValueError("Secret out of range")
    if bits < 1:
        raise ValueError("Invalid bits")
    corrupt = set(corrupt)
    if not corrupt <= set(range(1, n + 1)):
        raise ValueError("Corrupt keys out of range")
    coeffs = [secret]
    for _ in range(1, k - 1):
        coeffs.append(rng.randrange(0, 1 << bits))
    if k > 1:
        coeffs.append(rng.randrange(1, 1 << bits))
    shares = []
    for x in range(1, n + 1):
        y = sum(c * x ** i for i, c in enumerate(coeffs))
        if x in corrupt:
            y += rng.randrange(1, 1 << bits)
        shares.append(Share(x, y))
    return shares
