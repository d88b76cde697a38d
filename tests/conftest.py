import random
from pathlib import Path

import pytest


DATA = Path(__file__).resolve().parent / "data"


@pytest.fixture
def rng():
    return random.Random(0x5EC2E7)


@pytest.fixture
def testcase1():
    return DATA / "testcase1.json"


def pytest_make_parametrize_id(config, val, argname):
    # Parametrized secrets can exceed sys.get_int_max_str_digits(); keep their test ids short.
    if isinstance(val, int) and val.bit_length() > 64:
        return f"{argname}{val.bit_length()}bits"
    return None
