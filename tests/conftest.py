import pytest

from ataxx.ai.board import Board

from tests.helpers import COLUMN_BLOCKS


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def column_board():
    b = Board()
    for square in COLUMN_BLOCKS:
        b.set_block_at(square)
    return b
