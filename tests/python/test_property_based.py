# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Property-based tests using Hypothesis.

Checks the ordering, arity and value guarantees of the marshaller over
generated inputs.
"""

from hypothesis import given, settings, strategies as st

from kerasproxy.core import Shape, to_list, to_python, to_tuple

primitives = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=20),
)


class TestPrimitiveProperties:
    @given(primitives)
    @settings(max_examples=200)
    def test_value_round_trips(self, value):
        result = to_python(value)
        assert result == value
        assert type(result) is type(value)

    @given(st.booleans())
    def test_bools_are_singletons(self, value):
        assert to_python(value) is (True if value else False)


class TestSequenceProperties:
    @given(st.lists(primitives, max_size=30))
    @settings(max_examples=100)
    def test_list_preserves_length_and_order(self, values):
        result = to_list(values)
        assert len(result) == len(values)
        for i, value in enumerate(values):
            assert result[i] == to_python(value)

    @given(primitives, primitives)
    def test_pair_keeps_arity_and_order(self, a, b):
        result = to_tuple((a, b))
        assert isinstance(result, tuple)
        assert len(result) == 2
        assert result[0] == a
        assert result[1] == b

    @given(st.lists(st.one_of(st.none(), st.integers(min_value=1, max_value=4096)),
                    max_size=6))
    def test_shape_becomes_tuple_of_dims(self, dims):
        assert to_python(Shape(dims)) == tuple(dims)

    @given(st.recursive(primitives, lambda children: st.lists(children, max_size=4),
                        max_leaves=20))
    @settings(max_examples=100)
    def test_nested_lists_unchanged_in_value(self, value):
        assert to_python(value) == value
