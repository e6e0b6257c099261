import math

import pytest

from utils import format_result


@pytest.mark.parametrize("value, expected", [
    (4.0, "4"),
    (0.0, "0"),
    (-0.0, "0"),
    (3.75, "3.75"),
    (-2.5, "-2.5"),
    (1e20, "100000000000000000000"),
    (1e-5, "0.00001"),
    (0.1 + 0.2, "0.30000000000000004"),
])
def test_format_shortest(value, expected):
    assert format_result(value) == expected


def test_format_with_precision():
    assert format_result(0.1 + 0.2, precision=15) == "0.3"
    assert format_result(1 / 3, precision=4) == "0.3333"


def test_format_rejects_non_finite():
    with pytest.raises(ValueError):
        format_result(math.inf)
    with pytest.raises(ValueError):
        format_result(math.nan)
