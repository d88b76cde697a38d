import json
import string
from dataclasses import dataclass
from typing import Mapping

from .types import Share


DIGITS = string.digits + string.ascii_lowercase


class MalformedShares(ValueError):
    pass


def decode(value: str, base: int) -> int:
    # int() would also accept signs, prefixes, underscores, whitespace and non-ASCII digits, and it
    # refuses strings longer than sys.get_int_max_str_digits() in most bases, so digits are accumulated
    # here, the inverse of encode.
    if not 2 <= base <= len(DIGITS):
        raise MalformedShares(f"unsupported base: {base}")
    if not value:
        raise MalformedShares("empty value")
    number = 0
    for c in value.lower():
        d = DIGITS.find(c)
        if not 0 <= d < base:
            raise MalformedShares(f"invalid digit {c!r} in base {base} value {value!r}")
        number = number * base + d
    return number


def encode(number: int, base: int) -> str:
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"unsupported base: {base}")
    if number < 0:
        raise ValueError("cannot encode a negative number")
    digits = []
    while True:
        number, d = divmod(number, base)
        digits.append(DIGITS[d])
        if number == 0:
            break
    return "".join(reversed(digits))


def integer(value: object, what: str, signed: bool = False) -> int:
    # JSON test cases write numbers both as numbers and as strings of decimal digits
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise MalformedShares(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    negative = signed and value.startswith("-")
    digits = value[1:] if negative else value
    try:
        number = decode(digits, 10)
    except MalformedShares:
        raise MalformedShares(f"{what} must be an integer, got {value!r}") from None
    return -number if negative else number


@dataclass
class Case:
    n: int
    k: int
    shares: list[Share]

    @staticmethod
    def loads(text: str) -> "Case":
        try:
            data = json.loads(text, parse_int=lambda digits: integer(digits, "JSON number", signed=True))
        except json.JSONDecodeError as e:
            raise MalformedShares(f"invalid JSON: {e}") from None
        if not isinstance(data, dict):
            raise MalformedShares("test case must be a JSON object")
        keys = data.get("keys")
        if not isinstance(keys, dict) or "n" not in keys or "k" not in keys:
            raise MalformedShares("missing 'keys' object with 'n' and 'k'")
        n = integer(keys["n"], "n")
        k = integer(keys["k"], "k")
        if not 1 <= k <= n:
            raise MalformedShares(f"threshold must satisfy 1 <= k <= n, got n = {n}, k = {k}")
        shares = []
        for key, entry in data.items():
            if key == "keys":
                continue
            x = integer(key, "share key", signed=True)
            if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
                raise MalformedShares(f"share {key} must have a 'base' and a 'value'")
            base = integer(entry["base"], f"base of share {key}")
            value = entry["value"]
            if not isinstance(value, (int, str)) or isinstance(value, bool):
                raise MalformedShares(f"value of share {key} must be a digit string")
            if isinstance(value, int):
                if value < 0:
                    raise MalformedShares(f"value of share {key} must be non-negative")
                value = encode(value, 10)
            shares.append(Share(x, decode(value, base)))
        if len(shares) != n:
            raise MalformedShares(f"expected {n} shares, found {len(shares)}")
        return Case(n, k, shares)

    @staticmethod
    def load(path: str) -> "Case":
        with open(path, "r") as file:
            return Case.loads(file.read())

    def dumps(self, bases: Mapping[int, int] | None = None) -> str:
        bases = bases or {}
        data: dict[str, object] = {"keys": {"n": self.n, "k": self.k}}
        for share in sorted(self.shares, key=lambda share: share.x):
            base = bases.get(share.x, 10)
            data[str(share.x)] = {"base": str(base), "value": encode(share.y, base)}
        return json.dumps(data, indent=4)


