"""
Tests for validation_context (depth limit configuration).
"""

import threading

import pytest

from oxido import (
    Err,
    Ok,
    array,
    current_max_depth,
    number,
    object,
    validation_context,
)


class TestValidationContext:
    def test_default_is_unlimited(self):
        assert current_max_depth() is None
        deep = array(array(array(number())))
        assert deep.validate([[[1]]]) == Ok([[[1]]])

    def test_setting_is_scoped(self):
        with validation_context(max_depth=3):
            assert current_max_depth() == 3
            with validation_context(max_depth=1):
                assert current_max_depth() == 1
            assert current_max_depth() == 3
        assert current_max_depth() is None

    def test_setting_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with validation_context(max_depth=2):
                raise RuntimeError("boom")
        assert current_max_depth() is None

    def test_array_depth_exceeded(self):
        nested = array(array(number()))
        with validation_context(max_depth=1):
            result = nested.validate([[1]])
        assert isinstance(result, Err)
        assert result.error.path == ("0",)
        assert result.error.message == "Maximum depth exceeded"
        assert result.error.input == [1]
        assert nested.validate([[1]]) == Ok([[1]])

    def test_object_depth_exceeded(self):
        schema = object({"a": object({"b": number()})})
        data = {"a": {"b": 1}}
        with validation_context(max_depth=1):
            assert schema.validate(data).error.path == ("a",)
        with validation_context(max_depth=2):
            assert schema.validate(data) == Ok({"a": {"b": 1}})

    def test_depth_counts_levels_not_items(self):
        schema = array(object({"n": number()}))
        data = [{"n": i} for i in range(50)]
        with validation_context(max_depth=2):
            assert schema.validate(data) == Ok(data)
            # repeated calls start from the root again
            assert schema.validate(data) == Ok(data)

    def test_depth_resets_after_failure(self):
        schema = array(array(number()))
        with validation_context(max_depth=2):
            assert isinstance(schema.validate([["x"]]), Err)
            assert schema.validate([[1]]) == Ok([[1]])

    def test_primitives_unaffected(self):
        with validation_context(max_depth=1):
            assert number().validate(1) == Ok(1)
            assert array(number()).validate([1, 2]) == Ok([1, 2])

    @pytest.mark.parametrize("bad", [0, -1])
    def test_rejects_non_positive_limit(self, bad):
        with pytest.raises(ValueError):
            with validation_context(max_depth=bad):
                pass

    @pytest.mark.parametrize("bad", [1.5, "2", True])
    def test_rejects_non_int_limit(self, bad):
        with pytest.raises(TypeError):
            with validation_context(max_depth=bad):
                pass

    def test_isolated_between_threads(self):
        seen = []

        def worker():
            seen.append(current_max_depth())
            seen.append(array(array(number())).validate([[1]]))

        with validation_context(max_depth=1):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [None, Ok([[1]])]
