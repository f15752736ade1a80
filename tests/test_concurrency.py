# tests/test_concurrency.py
"""Checks called from many threads behave exactly as when called sequentially."""

from __future__ import annotations

import uuid
from concurrent.futures import ThreadPoolExecutor

from contractkit import requires
from contractkit.messages import reset_message_catalog


def run_check(index: int):
    """Run one check and describe its outcome."""
    kind = index % 5
    try:
        if kind == 0:
            requires.not_null(None, f"p{index}")
        elif kind == 1:
            requires.not_null_or_whitespace(" " * (index % 3), f"p{index}")
        elif kind == 2:
            requires.not_null_empty_or_null_elements([index, None][: index % 3], f"p{index}")
        elif kind == 3:
            requires.not_empty(uuid.UUID(int=index % 2), f"p{index}")
        else:
            requires.in_range(index % 2 == 0, f"p{index}", f"bad {index}")
    except ValueError as e:
        return (type(e).__name__, str(e))
    return ("ok", None)


def test_parallel_matches_sequential():
    indexes = list(range(500))
    sequential = [run_check(i) for i in indexes]

    # Start cold so the first lookups race on loading the catalog.
    reset_message_catalog()
    with ThreadPoolExecutor(max_workers=16) as pool:
        parallel = list(pool.map(run_check, indexes))

    assert parallel == sequential


def test_parallel_identity_preserved():
    values = [object() for _ in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda v: requires.not_null(v, "v"), values))

    assert all(result is value for result, value in zip(results, values))
