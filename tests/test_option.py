"""
Tests for oxido.option.
"""

import pytest

from oxido import NOTHING, Err, Nothing, Ok, Some, UnwrapError, from_nullable


class TestConstruction:
    def test_some_holds_value(self):
        assert Some(1).value == 1

    def test_some_rejects_none(self):
        with pytest.raises(TypeError):
            Some(None)

    def test_some_allows_falsy_values(self):
        assert Some(0).is_some()
        assert Some("").is_some()
        assert Some(False).is_some()

    def test_nothing_is_singleton_like(self):
        assert Nothing() == NOTHING
        assert repr(NOTHING) == "NOTHING"

    def test_from_nullable(self):
        assert from_nullable(None) == NOTHING
        assert from_nullable(3) == Some(3)
        assert from_nullable(0) == Some(0)

    def test_pattern_matching(self):
        def describe(option):
            match option:
                case Some(value):
                    return f"some {value}"
                case Nothing():
                    return "nothing"

        assert describe(Some(2)) == "some 2"
        assert describe(NOTHING) == "nothing"


class TestQueries:
    def test_is_some_is_none(self):
        assert Some(1).is_some() and not Some(1).is_none()
        assert NOTHING.is_none() and not NOTHING.is_some()

    def test_is_some_and(self):
        assert Some(2).is_some_and(lambda x: x > 1)
        assert not Some(0).is_some_and(lambda x: x > 1)
        assert not NOTHING.is_some_and(lambda x: True)

    def test_match(self):
        assert Some(2).match(lambda x: x * 10, lambda: -1) == 20
        assert NOTHING.match(lambda x: x * 10, lambda: -1) == -1


class TestCombinators:
    def test_map(self):
        assert Some(2).map(lambda x: x + 1) == Some(3)
        assert NOTHING.map(lambda x: x + 1) == NOTHING

    def test_map_to_none_is_an_error(self):
        with pytest.raises(TypeError):
            Some(1).map(lambda _: None)

    def test_map_or(self):
        assert Some(2).map_or(0, lambda x: x * 2) == 4
        assert NOTHING.map_or(0, lambda x: x * 2) == 0

    def test_map_or_else(self):
        assert Some(2).map_or_else(lambda: 0, lambda x: x * 2) == 4
        assert NOTHING.map_or_else(lambda: 0, lambda x: x * 2) == 0

    def test_and(self):
        assert Some(1).and_(Some("b")) == Some("b")
        assert Some(1).and_(NOTHING) == NOTHING
        assert NOTHING.and_(Some("b")) == NOTHING

    def test_and_then(self):
        def half(x):
            return Some(x // 2) if x % 2 == 0 else NOTHING

        assert Some(8).and_then(half).and_then(half) == Some(2)
        assert Some(6).and_then(half).and_then(half) == NOTHING
        assert NOTHING.and_then(half) == NOTHING

    def test_filter(self):
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) == NOTHING
        assert NOTHING.filter(lambda x: True) == NOTHING

    def test_or(self):
        assert Some(1).or_(Some(2)) == Some(1)
        assert NOTHING.or_(Some(2)) == Some(2)
        assert NOTHING.or_(NOTHING) == NOTHING

    def test_or_else(self):
        calls = []

        def fallback():
            calls.append(1)
            return Some(9)

        assert Some(1).or_else(fallback) == Some(1)
        assert calls == []
        assert NOTHING.or_else(fallback) == Some(9)
        assert calls == [1]

    def test_xor(self):
        assert Some(1).xor(NOTHING) == Some(1)
        assert NOTHING.xor(Some(2)) == Some(2)
        assert Some(1).xor(Some(2)) == NOTHING
        assert NOTHING.xor(NOTHING) == NOTHING


class TestConversions:
    def test_ok_or(self):
        assert Some(1).ok_or("missing") == Ok(1)
        assert NOTHING.ok_or("missing") == Err("missing")

    def test_ok_or_else(self):
        assert Some(1).ok_or_else(lambda: "missing") == Ok(1)
        assert NOTHING.ok_or_else(lambda: "missing") == Err("missing")


class TestUnwrap:
    def test_unwrap(self):
        assert Some(1).unwrap() == 1
        with pytest.raises(UnwrapError):
            NOTHING.unwrap()

    def test_expect(self):
        assert Some(1).expect("needed") == 1
        with pytest.raises(UnwrapError, match="needed a value"):
            NOTHING.expect("needed a value")

    def test_unwrap_or(self):
        assert Some(1).unwrap_or(5) == 1
        assert NOTHING.unwrap_or(5) == 5

    def test_unwrap_or_else(self):
        assert Some(1).unwrap_or_else(lambda: 5) == 1
        assert NOTHING.unwrap_or_else(lambda: 5) == 5

    def test_unwrap_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            NOTHING.unwrap()
