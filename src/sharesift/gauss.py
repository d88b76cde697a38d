from typing import Sequence

from .rational import Rat
from .types import Share, Accepted, Rejected, Outcome


Row = list[Rat]


def vandermonde(shares: Sequence[Share]) -> list[Row]:
    # The polynomial f(X) = c₀ + c₁X + ... + cₖ₋₁Xᵏ⁻¹ through the k shares satisfies
    #     Σⱼ₌₀ᵏ⁻¹ xᵢʲcⱼ = yᵢ    for i in [0, k)
    # so the augmented matrix of the system has the rows [xᵢ⁰, xᵢ¹, ..., xᵢᵏ⁻¹ | yᵢ].
    k = len(shares)
    return [[Rat(share.x ** j) for j in range(k)] + [Rat(share.y)] for share in shares]


def eliminate(matrix: list[Row]) -> bool:
    # Gauss-Jordan elimination in place, returns False as soon as a column has no pivot, in which case
    # the system is singular and the matrix is left partially reduced. On success the left block is the
    # identity and the last column holds the solution.
    k = len(matrix)
    for i in range(k):
        for p in range(i, k):
            if matrix[p][i]:
                break
        else:
            return False
        matrix[i], matrix[p] = matrix[p], matrix[i]
        pivot = matrix[i][i]
        matrix[i][i:] = [a / pivot for a in matrix[i][i:]]
        for r in range(k):
            if r == i:
                continue
            factor = matrix[r][i]
            if not factor:
                continue
            matrix[r][i:] = [a - factor * b for a, b in zip(matrix[r][i:], matrix[i][i:])]
    return True


def solve(shares: Sequence[Share]) -> Outcome:
    # Recover the constant term c₀ of the interpolating polynomial. A column without a pivot can leave
    # an integral but meaningless value in the first row, so singularity is rejected before the value
    # is looked at, and only then is a non-integer c₀ rejected as inconsistent.
    if not shares:
        raise ValueError("at least one share is required")
    matrix = vandermonde(shares)
    if not eliminate(matrix):
        return Rejected("singular")
    c0 = matrix[0][-1]
    if not c0.is_integer:
        return Rejected("non-integer")
    return Accepted(int(c0))
