from __future__ import annotations

from collections import namedtuple
import unittest

import numpy as np

from luvatrix_data import MISSING, get_current_axis, remove_undefined, resolve_accessor


Point = namedtuple("Point", ["x", "y"])


class AccessorTests(unittest.TestCase):
    def test_callable_accessor_is_returned_unchanged(self) -> None:
        fn = lambda datum: datum["a"] * 2  # noqa: E731
        self.assertIs(resolve_accessor(fn), fn)

    def test_none_key_yields_missing(self) -> None:
        accessor = resolve_accessor(None)
        self.assertIs(accessor({"x": 1}), MISSING)
        self.assertIs(accessor(None), MISSING)
        self.assertFalse(MISSING)

    def test_key_and_index_accessors(self) -> None:
        self.assertEqual(resolve_accessor("x")({"x": 3}), 3)
        self.assertEqual(resolve_accessor(1)([5, 6]), 6)
        self.assertEqual(resolve_accessor(1)(np.asarray([1.0, 2.0])), 2.0)

    def test_path_keys_traverse_nested_values(self) -> None:
        datum = {"a": {"b": [7, 8]}}
        self.assertEqual(resolve_accessor("a.b[1]")(datum), 8)
        self.assertEqual(resolve_accessor(["a", "b", 0])(datum), 7)

    def test_missing_path_segments_return_missing(self) -> None:
        self.assertIs(resolve_accessor("a.c")({"a": {}}), MISSING)
        self.assertIs(resolve_accessor("a.b.c")({"a": {"b": None}}), MISSING)
        self.assertIs(resolve_accessor(5)([1, 2]), MISSING)
        self.assertIs(resolve_accessor("y")(4), MISSING)

    def test_negative_indices_do_not_wrap(self) -> None:
        self.assertIs(resolve_accessor(-1)([1, 2]), MISSING)
        self.assertIs(resolve_accessor(["a", -1])({"a": [1, 2]}), MISSING)

    def test_none_valued_field_is_a_real_value(self) -> None:
        self.assertIsNone(resolve_accessor("y")({"y": None}))

    def test_numeric_string_keys_match_integer_mapping_keys(self) -> None:
        self.assertEqual(resolve_accessor("0")({0: "zero"}), "zero")

    def test_attributes_are_resolved_on_records(self) -> None:
        self.assertEqual(resolve_accessor("y")(Point(x=1, y=2)), 2)

    def test_empty_string_is_a_valid_key(self) -> None:
        self.assertEqual(resolve_accessor("")({"": 9}), 9)

    def test_current_axis_swaps_for_horizontal_layouts(self) -> None:
        self.assertEqual(get_current_axis("x", True), "y")
        self.assertEqual(get_current_axis("y", True), "x")
        self.assertEqual(get_current_axis("x", False), "x")
        self.assertEqual(get_current_axis("y0", True), "y0")

    def test_remove_undefined_keeps_falsy_values(self) -> None:
        self.assertEqual(remove_undefined([1, None, MISSING, 0, ""]), [1, 0, ""])


if __name__ == "__main__":
    unittest.main()
