"""
Tests for the in-memory cart store
"""
import unittest

from models.errors import InvalidQuantityError
from models.menu import MenuItem, MenuCategory
from stores.cart_store import CartStore

ITEM_A = MenuItem("a", "Item A", 50000, MenuCategory.FOOD)
ITEM_B = MenuItem("b", "Item B", 20000, MenuCategory.DRINK)


def expected_total(store):
    return sum(line.menu_item.unit_price * line.quantity for line in store.lines())


class TestCartStore(unittest.TestCase):
    """Test cases for CartStore"""

    def setUp(self):
        self.store = CartStore()

    def test_repeated_adds_merge_into_one_line(self):
        for quantity in [1, 3, 2, 7]:
            self.store.add_item(ITEM_A, quantity)

        lines = self.store.lines()
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].quantity, 13)

    def test_distinct_items_get_distinct_lines_in_insertion_order(self):
        self.store.add_item(ITEM_B, 1)
        self.store.add_item(ITEM_A, 1)
        self.store.add_item(ITEM_B, 1)

        self.assertEqual([line.menu_item.item_id for line in self.store.lines()], ["b", "a"])
        self.assertEqual(self.store.line_count(), 2)
        self.assertEqual(self.store.item_count(), 3)

    def test_line_refers_to_catalog_item(self):
        line = self.store.add_item(ITEM_A, 1)
        self.assertIs(line.menu_item, ITEM_A)

    def test_add_rejects_non_positive_and_non_integer_quantities(self):
        for quantity in [0, -1, 1.5, "2", True, None]:
            with self.assertRaises(InvalidQuantityError):
                self.store.add_item(ITEM_A, quantity)
        self.assertTrue(self.store.is_empty())

    def test_total_example(self):
        self.store.add_item(ITEM_A, 2)
        self.store.add_item(ITEM_B, 1)
        self.assertEqual(self.store.total(), 120000)

    def test_total_tracks_every_mutation(self):
        line_a = self.store.add_item(ITEM_A, 2)
        self.assertEqual(self.store.total(), expected_total(self.store))
        line_b = self.store.add_item(ITEM_B, 4)
        self.assertEqual(self.store.total(), expected_total(self.store))
        self.store.set_quantity(line_a.line_id, 5)
        self.assertEqual(self.store.total(), expected_total(self.store))
        self.store.remove_line(line_b.line_id)
        self.assertEqual(self.store.total(), 250000)
        self.store.set_quantity(line_a.line_id, 0)
        self.assertEqual(self.store.total(), 0)

    def test_set_quantity_is_absolute(self):
        line = self.store.add_item(ITEM_A, 4)
        self.assertTrue(self.store.set_quantity(line.line_id, 2))
        self.assertEqual(self.store.get_line(line.line_id).quantity, 2)

    def test_set_quantity_zero_matches_remove_line(self):
        other = CartStore()
        for store in (self.store, other):
            store.add_item(ITEM_A, 2)
            store.add_item(ITEM_B, 1)

        self.store.set_quantity(self.store.lines()[0].line_id, 0)
        other.remove_line(other.lines()[0].line_id)

        self.assertEqual(
            [(line.menu_item, line.quantity) for line in self.store.lines()],
            [(line.menu_item, line.quantity) for line in other.lines()]
        )
        self.assertEqual(self.store.total(), other.total())

    def test_negative_quantity_removes_line(self):
        line = self.store.add_item(ITEM_A, 2)
        self.assertTrue(self.store.set_quantity(line.line_id, -3))
        self.assertIsNone(self.store.get_line(line.line_id))

    def test_unknown_line_is_a_no_op(self):
        self.store.add_item(ITEM_A, 2)
        self.assertFalse(self.store.set_quantity("missing", 5))
        self.assertFalse(self.store.remove_line("missing"))
        self.assertEqual(self.store.item_count(), 2)

    def test_remove_line_is_idempotent(self):
        line = self.store.add_item(ITEM_A, 1)
        self.assertTrue(self.store.remove_line(line.line_id))
        self.assertFalse(self.store.remove_line(line.line_id))

    def test_clear(self):
        self.store.add_item(ITEM_A, 1)
        self.store.add_item(ITEM_B, 1)
        self.assertEqual(self.store.clear(), 2)
        self.assertTrue(self.store.is_empty())
        self.assertEqual(self.store.total(), 0)
        self.assertEqual(self.store.item_count(), 0)


if __name__ == '__main__':
    unittest.main()
