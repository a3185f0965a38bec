from __future__ import annotations

import random
from typing import List, Tuple

import pytest

from vimlet import ModeName, Vim

KEYS: List[Tuple[str, bool]] = [
    *[(label, False) for label in "hjklwebWEB0^$Ggftxduiv IaAV1239o ²"],
    ("Escape", False),
    ("Tab", False),
    ("Enter", False),
    ("Backspace", False),
    ("ArrowLeft", False),
    ("ArrowRight", False),
    ("ArrowUp", False),
    ("ArrowDown", False),
    ("v", True),
    ("r", True),
]

TEXTS = ["", "foo bar", "The quick brown fox\n\n  jumps over\nthe lazy dog"]


def assert_cursor_in_range(vim: Vim) -> None:
    x, y = vim.cursor()
    buffer = vim.buffer
    assert 0 <= y < max(1, buffer.line_count())

    length = buffer.line_length(y)
    upper = length if vim.mode is ModeName.INSERT else length - 1
    assert 0 <= x <= max(0, upper)


@pytest.mark.parametrize("seed", range(8))
def test_cursor_stays_in_range_for_random_key_sequences(seed: int) -> None:
    rng = random.Random(seed)

    for _ in range(25):
        vim = Vim(rng.choice(TEXTS))
        for _ in range(60):
            label, ctrl = rng.choice(KEYS)
            vim.submit_key(label, ctrl=ctrl)
            assert_cursor_in_range(vim)
