import unittest

import numpy as np

from core.buffer import FloatBuffer


class FloatBufferTests(unittest.TestCase):
    def test_put_grows_past_capacity(self) -> None:
        buf = FloatBuffer(capacity=1)
        for value in (1.0, 2.0, 3.0, 4.0, 5.0):
            self.assertIs(buf.put(value), buf)
        self.assertEqual(len(buf), 5)
        self.assertEqual(buf.position, 5)
        self.assertGreaterEqual(buf.capacity, 5)
        np.testing.assert_array_equal(buf.array(), [1.0, 2.0, 3.0, 4.0, 5.0])

    def test_zero_capacity(self) -> None:
        buf = FloatBuffer(capacity=0)
        buf.extend([1.5, 2.5])
        np.testing.assert_array_equal(buf.array(), [1.5, 2.5])

    def test_array_is_single_precision_copy(self) -> None:
        buf = FloatBuffer().extend([0.1, 0.2])
        arr = buf.array()
        self.assertEqual(arr.dtype, np.float32)
        arr[0] = 9.0
        self.assertEqual(buf[0], np.float32(0.1))

    def test_clear(self) -> None:
        buf = FloatBuffer().extend([1.0, 2.0, 3.0])
        buf.clear()
        self.assertEqual(len(buf), 0)
        buf.append(4.0)
        np.testing.assert_array_equal(buf.array(), [4.0])

    def test_negative_capacity(self) -> None:
        with self.assertRaises(ValueError):
            FloatBuffer(capacity=-1)


if __name__ == "__main__":
    unittest.main()
