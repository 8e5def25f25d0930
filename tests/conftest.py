from __future__ import annotations

import pytest

EXAMPLE_INPUT = "32T3K 765\nT55J5 684\nKK677 28\nKTJJT 220\nQQQJA 483\n"


@pytest.fixture
def example_input() -> str:
    return EXAMPLE_INPUT
