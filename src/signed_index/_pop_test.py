# Copyright (c) signed-index Contributors
# SPDX-License-Identifier: Apache-2.0
"""Unit tests for pop_last."""

from __future__ import annotations

import array
import collections
import unittest

import numpy as np
import parameterized

from signed_index import IndexOutOfRangeError, pop_last


class PopLastTest(unittest.TestCase):
    def test_pops_until_empty(self):
        vs = ["A", "B", "C", "D"]
        popped = []
        while len(vs) > 0:
            v, vs = pop_last(vs)
            popped.append(v)
        self.assertEqual(popped, ["D", "C", "B", "A"])
        self.assertEqual(vs, [])

    def test_returns_last_and_shorter_sequence(self):
        v, rest = pop_last([1, 2, 3])
        self.assertEqual(v, 3)
        self.assertEqual(rest, [1, 2])

    @parameterized.parameterized.expand(
        [
            ("list", []),
            ("tuple", ()),
            ("str", ""),
            ("numpy", np.array([], dtype=np.float64)),
        ]
    )
    def test_empty_raises(self, _name, seq):
        with self.assertRaises(IndexOutOfRangeError):
            pop_last(seq)

    def test_clears_vacated_list_slot(self):
        vs = ["A", "B", "C"]
        pop_last(vs)
        self.assertEqual(vs, ["A", "B", None])

    def test_tuple_is_not_modified(self):
        vs = ("A", "B", "C")
        v, rest = pop_last(vs)
        self.assertEqual((v, rest), ("C", ("A", "B")))
        self.assertEqual(vs, ("A", "B", "C"))

    def test_string(self):
        self.assertEqual(pop_last("abc"), ("c", "ab"))

    def test_bytearray_slot_is_zeroed(self):
        data = bytearray(b"abc")
        v, rest = pop_last(data)
        self.assertEqual(v, ord("c"))
        self.assertEqual(rest, bytearray(b"ab"))
        self.assertEqual(data, bytearray(b"ab\x00"))

    def test_array_slot_is_zeroed(self):
        data = array.array("d", [1.0, 2.0, 3.0])
        v, rest = pop_last(data)
        self.assertEqual(v, 3.0)
        self.assertEqual(list(rest), [1.0, 2.0])
        self.assertEqual(list(data), [1.0, 2.0, 0.0])

    def test_numpy_rest_is_view_over_cleared_buffer(self):
        data = np.array([1, 2, 3, 4])
        v, rest = pop_last(data)
        self.assertEqual(v, 4)
        np.testing.assert_array_equal(rest, [1, 2, 3])
        np.testing.assert_array_equal(data, [1, 2, 3, 0])
        self.assertTrue(np.shares_memory(rest, data))

    def test_numpy_object_slot_is_released(self):
        payload = object()
        data = np.array([object(), payload], dtype=object)
        v, _ = pop_last(data)
        self.assertIs(v, payload)
        self.assertIsNone(data[1])

    def test_numpy_rows_are_copied_before_clearing(self):
        data = np.arange(6).reshape(3, 2)
        v, rest = pop_last(data)
        np.testing.assert_array_equal(v, [4, 5])
        self.assertEqual(rest.shape, (2, 2))
        np.testing.assert_array_equal(data[2], [0, 0])

    def test_readonly_numpy_array_is_not_modified(self):
        data = np.array([1, 2, 3])
        data.flags.writeable = False
        v, rest = pop_last(data)
        self.assertEqual(v, 3)
        np.testing.assert_array_equal(data, [1, 2, 3])
        np.testing.assert_array_equal(rest, [1, 2])

    def test_memoryview_rest_shares_buffer(self):
        buffer = bytearray(b"xyz")
        view = memoryview(buffer)
        v, rest = pop_last(view)
        self.assertEqual(v, ord("z"))
        self.assertEqual(rest.tobytes(), b"xy")
        self.assertEqual(bytes(buffer), b"xy\x00")

    def test_readonly_memoryview_is_not_modified(self):
        view = memoryview(b"xyz")
        v, rest = pop_last(view)
        self.assertEqual(v, ord("z"))
        self.assertEqual(rest.tobytes(), b"xy")
        self.assertEqual(view.tobytes(), b"xyz")

    def test_unsliceable_sequence_is_left_unmodified(self):
        vs = collections.deque(["A", "B", "C"])
        with self.assertRaises(TypeError):
            pop_last(vs)
        self.assertEqual(list(vs), ["A", "B", "C"])

    def test_length_decreases_by_one(self):
        vs = list(range(10))
        for expected_len in range(9, -1, -1):
            _, vs = pop_last(vs)
            self.assertEqual(len(vs), expected_len)


if __name__ == "__main__":
    unittest.main()
