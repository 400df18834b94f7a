import unittest

from geometry.rectangle import Rectangle


class RectangleBoundsTests(unittest.TestCase):
    def test_derived_bounds(self) -> None:
        rect = Rectangle(2, -3, 10, 4)
        self.assertEqual((rect.min_x, rect.min_y), (2, -3))
        self.assertEqual((rect.max_x, rect.max_y), (12, 1))

    def test_set_bounds(self) -> None:
        rect = Rectangle()
        self.assertIs(rect.set_bounds(1, 2, 3, 4), rect)
        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (1, 2, 3, 4))
        self.assertEqual(Rectangle().set_from(rect), rect)

    def test_fields_are_integers(self) -> None:
        rect = Rectangle(1.9, 2.0, 3.7, 4.2)
        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (1, 2, 3, 4))
        rect.width = 8.5
        self.assertEqual(rect.width, 8)
        self.assertIsInstance(rect.width, int)

    def test_is_empty(self) -> None:
        self.assertFalse(Rectangle(0, 0, 1, 1).is_empty())
        self.assertTrue(Rectangle(0, 0, 0, 1).is_empty())
        self.assertTrue(Rectangle(0, 0, 5, -2).is_empty())

    def test_contains(self) -> None:
        rect = Rectangle(0, 0, 10, 5)
        self.assertTrue(rect.contains(0, 0))
        self.assertTrue(rect.contains(9, 4))
        self.assertFalse(rect.contains(10, 4))
        self.assertFalse(rect.contains(-1, 2))
        self.assertFalse(Rectangle(0, 0, 0, 0).contains(0, 0))

    def test_intersects(self) -> None:
        rect = Rectangle(0, 0, 10, 10)
        self.assertTrue(rect.intersects(Rectangle(5, 5, 10, 10)))
        self.assertFalse(rect.intersects(Rectangle(10, 0, 5, 5)))
        self.assertFalse(rect.intersects(Rectangle(2, 2, 0, 5)))

    def test_intersection_and_union_allocate(self) -> None:
        a = Rectangle(0, 0, 10, 10)
        b = Rectangle(5, 5, 10, 10)
        self.assertEqual(a.intersection(b), Rectangle(5, 5, 5, 5))
        self.assertEqual(a.union(b), Rectangle(0, 0, 15, 15))
        self.assertEqual(a, Rectangle(0, 0, 10, 10))


class RectangleValueTests(unittest.TestCase):
    def test_equality_and_hash(self) -> None:
        self.assertEqual(Rectangle(1, 2, 3, 4), Rectangle(1, 2, 3, 4))
        self.assertEqual(hash(Rectangle(1, 2, 3, 4)), hash(Rectangle(1, 2, 3, 4)))
        self.assertNotEqual(Rectangle(1, 2, 3, 4), Rectangle(1, 2, 4, 3))
        self.assertNotEqual(Rectangle(1, 2, 3, 4), (1, 2, 3, 4))

    def test_string_form(self) -> None:
        self.assertEqual(str(Rectangle(0, 0, 10, 10)), "10x10+0+0")
        self.assertEqual(str(Rectangle(-3, 4, 5, 6)), "5x6-3+4")
        self.assertEqual(repr(Rectangle(1, 2, 3, 4)), "Rectangle(1, 2, 3, 4)")


if __name__ == "__main__":
    unittest.main()
