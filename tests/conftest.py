"""Core test fixtures for dice tests."""

from unittest.mock import patch

import pytest


@pytest.fixture
def fixed_dice():
    """Patch the die draw so rolls are predictable.

    Set ``side_effect`` to the values the dice should show, in roll order.
    """
    with patch("rollkit.dice.roller.roll_die") as mock_roll_die:
        yield mock_roll_die
