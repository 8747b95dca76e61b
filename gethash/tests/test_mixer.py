#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the FNV-1a accumulator.
"""

import pytest

from gethash.config import FNV_OFFSET_BASIS
from gethash.hashing.mixer import FNV1aMixer, fold, init


class TestFold:
    """Reference vectors for 64-bit FNV-1a."""

    def test_init_is_offset_basis(self):
        assert init() == FNV_OFFSET_BASIS == 0xcbf29ce484222325

    def test_empty_fold_is_noop(self):
        assert fold(init(), b"") == FNV_OFFSET_BASIS

    @pytest.mark.parametrize("data, expected", [
        (b"a", 0xaf63dc4c8601ec8c),
        (b"foobar", 0x85944171f73967e8),
        (b"\x00", 0xaf63bd4c8601b7df),
        (b"\x00" * 8, 0xa8c7f832281a39c5),
    ])
    def test_known_vectors(self, data, expected):
        assert fold(init(), data) == expected

    def test_fold_is_incremental(self):
        assert fold(fold(init(), b"foo"), b"bar") == fold(init(), b"foobar")

    def test_state_stays_within_64_bits(self):
        state = fold(init(), bytes(range(256)) * 4)
        assert 0 <= state < 2 ** 64


class TestFNV1aMixer:
    def test_update_matches_fold(self):
        mixer = FNV1aMixer()
        mixer.update(b"foo")
        mixer.update(b"bar")
        assert mixer.intdigest() == 0x85944171f73967e8
        assert mixer.hexdigest() == "85944171f73967e8"
        assert mixer.bytes_folded == 6

    def test_initial_data(self):
        assert FNV1aMixer(b"a").intdigest() == 0xaf63dc4c8601ec8c

    def test_hexdigest_is_zero_padded(self):
        mixer = FNV1aMixer()
        mixer._state = 0x1f
        assert mixer.hexdigest() == "000000000000001f"

    def test_copy_is_independent(self):
        mixer = FNV1aMixer(b"foo")
        clone = mixer.copy()
        clone.update(b"bar")
        assert mixer.intdigest() == fold(init(), b"foo")
        assert clone.intdigest() == fold(init(), b"foobar")

    def test_instances_do_not_share_state(self):
        first = FNV1aMixer(b"something long enough")
        second = FNV1aMixer()
        assert second.intdigest() == FNV_OFFSET_BASIS
        assert first.intdigest() != second.intdigest()
