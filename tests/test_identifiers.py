"""
Tests for identifier allocation.

Covers:
- Token shape
- Collision retry against the live id set
- Bounded retries
"""

import itertools
import string

import pytest

from order_ledger.core.errors import AllocationExhausted
from order_ledger.utils.identifiers import IdentifierAllocator


def _scripted(tokens):
    """Token factory that replays a fixed sequence."""
    it = iter(tokens)
    return lambda nbytes: next(it)


def test_order_id_is_fixed_length_hex():
    allocator = IdentifierAllocator(order_id_bytes=10)
    order_id = allocator.new_order_id(set())
    assert len(order_id) == 20
    assert all(c in string.hexdigits for c in order_id)


def test_payment_id_is_fixed_length_hex():
    allocator = IdentifierAllocator(payment_id_bytes=8)
    payment_id = allocator.new_payment_id()
    assert len(payment_id) == 16
    assert all(c in string.hexdigits for c in payment_id)


def test_order_id_retries_on_collision():
    allocator = IdentifierAllocator(token_factory=_scripted(["aa", "aa", "bb"]))
    assert allocator.new_order_id({"aa"}) == "bb"


def test_order_id_gives_up_after_max_attempts():
    allocator = IdentifierAllocator(
        max_attempts=3,
        token_factory=_scripted(itertools.repeat("aa"))
    )
    with pytest.raises(AllocationExhausted) as exc_info:
        allocator.new_order_id({"aa"})
    assert exc_info.value.attempts == 3
    assert "3 attempts" in str(exc_info.value)


def test_payment_ids_are_not_checked_for_collisions():
    allocator = IdentifierAllocator(token_factory=_scripted(["cc", "cc"]))
    assert allocator.new_payment_id() == allocator.new_payment_id()
