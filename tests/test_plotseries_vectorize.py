from __future__ import annotations

import unittest

import numpy as np

from plotseries import Surface, UnsupportedTypeError, is3d, process_fillrange, process_ribbon, series_data_vector


class SeriesDataVectorTests(unittest.TestCase):
    def test_nothing_is_one_empty_entry(self) -> None:
        self.assertEqual(series_data_vector(None, {}), [None])

    def test_integer_yields_blank_series(self) -> None:
        out = series_data_vector(3, {})
        self.assertEqual(len(out), 3)
        for s in out:
            self.assertEqual(s.shape, (0,))
            self.assertEqual(s.dtype, np.float64)
        self.assertEqual(series_data_vector(0, {}), [])

    def test_vector_of_numbers_is_single_series(self) -> None:
        out = series_data_vector([1, 2, None], {})
        self.assertEqual(len(out), 1)
        self.assertTrue(np.array_equal(out[0], np.asarray([1.0, 2.0, np.nan]), equal_nan=True))

    def test_vector_of_text_is_single_series(self) -> None:
        out = series_data_vector(["a", None], {})
        self.assertEqual(len(out), 1)
        self.assertEqual(out[0].tolist(), ["a", ""])

    def test_list_of_vectors_splits_in_order(self) -> None:
        v1 = [1, 2, 3]
        v2 = np.asarray([4.0, 5.0])
        out = series_data_vector([v1, v2], {})
        self.assertEqual(len(out), 2)
        self.assertEqual(out[0].tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(out[1].tolist(), [4.0, 5.0])

    def test_nested_mixed_list_flattens(self) -> None:
        fn = np.cos
        out = series_data_vector([[1, 2], fn, [[3], [4, 5]], None], {})
        self.assertEqual(len(out), 5)
        self.assertEqual(out[0].tolist(), [1.0, 2.0])
        self.assertIs(out[1], fn)
        self.assertEqual(out[2].tolist(), [3.0])
        self.assertEqual(out[3].tolist(), [4.0, 5.0])
        self.assertIsNone(out[4])

    def test_matrix_splits_into_columns(self) -> None:
        m = np.arange(12, dtype=np.float64).reshape(4, 3)
        out = series_data_vector(m, {})
        self.assertEqual(len(out), 3)
        for i, col in enumerate(out):
            self.assertEqual(col.tolist(), m[:, i].tolist())

    def test_matrix_in_3d_context_is_one_surface(self) -> None:
        m = np.arange(12, dtype=np.float64).reshape(4, 3)
        out = series_data_vector(m, {"seriestype": "surface"})
        self.assertEqual(len(out), 1)
        self.assertIsInstance(out[0], Surface)
        self.assertEqual(out[0].shape, (4, 3))

    def test_default_prepares_opaque_value(self) -> None:
        r = range(5)
        self.assertEqual(series_data_vector(r, {}), [r])

    def test_unsupported_leaf_propagates(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            series_data_vector([[1, 2], object()], {})
        with self.assertRaises(UnsupportedTypeError):
            series_data_vector(2.5, {})

    def test_is3d_flag_and_series_type(self) -> None:
        self.assertFalse(is3d({}))
        self.assertTrue(is3d({"seriestype": "wireframe"}))
        self.assertTrue(is3d({"is3d": True}))
        self.assertFalse(is3d({"is3d": False, "seriestype": "surface"}))


class ShadingTests(unittest.TestCase):
    def test_scalar_fillrange_is_not_vectorized(self) -> None:
        self.assertEqual(process_fillrange(0, {}), [0])
        self.assertEqual(process_fillrange(2.5, {}), [2.5])

    def test_fillrange_vectors_follow_series_rules(self) -> None:
        out = process_fillrange([[0, 1], [2, 3]], {})
        self.assertEqual([v.tolist() for v in out], [[0.0, 1.0], [2.0, 3.0]])
        self.assertEqual(process_fillrange(None, {}), [None])

    def test_ribbon_pair_zips_to_shorter_side(self) -> None:
        lower = [[1, 1], [2, 2], [3, 3]]
        upper = [[4, 4], [5, 5]]
        out = process_ribbon((lower, upper), {})
        self.assertEqual(len(out), 2)
        self.assertEqual(out[0][0].tolist(), [1.0, 1.0])
        self.assertEqual(out[0][1].tolist(), [4.0, 4.0])
        self.assertEqual(out[1][0].tolist(), [2.0, 2.0])
        self.assertEqual(out[1][1].tolist(), [5.0, 5.0])

    def test_ribbon_pair_of_float_scalars(self) -> None:
        self.assertEqual(process_ribbon((0.5, 1.5), {}), [(0.5, 1.5)])

    def test_ribbon_pair_integer_sides_count_blank_series(self) -> None:
        out = process_ribbon((2, 3), {})
        self.assertEqual(len(out), min(len(series_data_vector(2, {})), len(series_data_vector(3, {}))))
        self.assertEqual(len(out), 2)
        for lower, upper in out:
            self.assertEqual(lower.shape, (0,))
            self.assertEqual(upper.shape, (0,))

    def test_ribbon_pair_mixes_counts_and_vectors(self) -> None:
        out = process_ribbon((1, [[1, 2], [3, 4]]), {})
        self.assertEqual(len(out), 1)
        self.assertEqual(out[0][0].shape, (0,))
        self.assertEqual(out[0][1].tolist(), [1.0, 2.0])

    def test_scalar_ribbon(self) -> None:
        self.assertEqual(process_ribbon(1, {}), [1])


if __name__ == "__main__":
    unittest.main()
