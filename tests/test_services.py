"""
Tests for the menu, cart, checkout, order and payment services
"""
import unittest

from models.menu import MenuItem, MenuCategory
from models.order import PaymentStatus
from services.cart_service import CartService, parse_quantity
from services.checkout_service import CheckoutService
from services.menu_catalog import MenuCatalog
from services.order_service import OrderService
from services.payment_service import PaymentService, round_amount
from stores.cart_store import CartStore
from stores.order_store import OrderStore
from models.errors import InvalidQuantityError

ITEMS = (
    MenuItem("a", "Bánh mì", 50000, MenuCategory.FOOD),
    MenuItem("b", "Trà Đào", 20000, MenuCategory.DRINK),
    MenuItem("c", "Trà Matcha", 30000, MenuCategory.DRINK),
    MenuItem("s", "Phí phục vụ", 10000, MenuCategory.SERVICE),
)


class TestMenuCatalog(unittest.TestCase):
    """Test cases for MenuCatalog"""

    def setUp(self):
        self.catalog = MenuCatalog(ITEMS)

    def test_default_catalog_has_every_category(self):
        catalog = MenuCatalog()
        self.assertEqual(set(catalog.categories()), set(MenuCategory))
        self.assertGreater(len(catalog), 0)

    def test_list_items_by_category(self):
        self.assertEqual([i.item_id for i in self.catalog.list_items("drink")], ["b", "c"])
        self.assertEqual(len(self.catalog.list_items()), 4)
        self.assertEqual(len(self.catalog.list_items("all")), 4)
        with self.assertRaises(ValueError):
            self.catalog.list_items("dessert")

    def test_get_item(self):
        self.assertIs(self.catalog.get_item("a"), ITEMS[0])
        self.assertIsNone(self.catalog.get_item("zzz"))
        for item_id in [["a"], {"a": 1}, None, 1]:
            self.assertIsNone(self.catalog.get_item(item_id))

    def test_duplicate_ids_rejected(self):
        with self.assertRaises(ValueError):
            MenuCatalog(ITEMS + (ITEMS[0],))

    def test_find_items(self):
        result = self.catalog.find_items("trà")
        self.assertTrue(result["success"])
        self.assertEqual({m["item_id"] for m in result["matches"]}, {"b", "c"})

        result = self.catalog.find_items("matcha", limit=1)
        self.assertEqual(result["matches"][0]["item_id"], "c")
        self.assertEqual(result["total_found"], 1)

    def test_find_items_unknown_category(self):
        result = self.catalog.find_items("trà", category="dessert")
        self.assertFalse(result["success"])
        self.assertEqual(result["matches"], [])


class TestCartService(unittest.TestCase):
    """Test cases for CartService"""

    def setUp(self):
        self.store = CartStore()
        self.service = CartService(self.store, MenuCatalog(ITEMS))

    def test_parse_quantity(self):
        self.assertEqual(parse_quantity(" 4 "), 4)
        self.assertEqual(parse_quantity(-2), -2)
        for value in ["abc", "", "1.5", None, 2.5, True]:
            with self.assertRaises(InvalidQuantityError):
                parse_quantity(value)

    def test_add_to_cart(self):
        result = self.service.add_to_cart("a", 2)
        self.assertTrue(result["success"])
        self.service.add_to_cart("a", "3")
        self.assertEqual(self.store.get_line(result["line_id"]).quantity, 5)

    def test_add_unknown_item(self):
        result = self.service.add_to_cart("zzz")
        self.assertFalse(result["success"])
        self.assertEqual(result["error_code"], "NOT_FOUND")

    def test_add_invalid_quantity(self):
        for quantity in [0, -1, "x"]:
            result = self.service.add_to_cart("a", quantity)
            self.assertFalse(result["success"])
            self.assertEqual(result["error_code"], "INVALID_QUANTITY")
        self.assertTrue(self.store.is_empty())

    def test_update_quantity_to_zero_removes_line(self):
        line_id = self.service.add_to_cart("a", 2)["line_id"]
        result = self.service.update_quantity(line_id, 0)
        self.assertTrue(result["changed"])
        self.assertTrue(result["removed"])
        self.assertTrue(self.store.is_empty())

    def test_update_unknown_line_is_silent(self):
        result = self.service.update_quantity("missing", 3)
        self.assertTrue(result["success"])
        self.assertFalse(result["changed"])

    def test_edit_quantity_discards_invalid_input(self):
        line_id = self.service.add_to_cart("a", 2)["line_id"]
        for text in ["abc", "0", "-4", ""]:
            result = self.service.edit_quantity(line_id, text)
            self.assertFalse(result["success"])
            self.assertEqual(result["error_code"], "INVALID_QUANTITY")
            self.assertEqual(result["quantity"], 2)
        self.assertEqual(self.store.get_line(line_id).quantity, 2)

        result = self.service.edit_quantity(line_id, "7")
        self.assertTrue(result["success"])
        self.assertEqual(self.store.get_line(line_id).quantity, 7)

    def test_remove_line(self):
        line_id = self.service.add_to_cart("a", 2)["line_id"]
        self.assertTrue(self.service.remove_line(line_id)["changed"])
        self.assertFalse(self.service.remove_line(line_id)["changed"])

    def test_cart_details(self):
        self.assertEqual(self.service.get_cart_details()["message"], "The cart is empty.")
        self.service.add_to_cart("a", 2)
        self.service.add_to_cart("b", 1)

        details = self.service.get_cart_details()
        self.assertTrue(details["success"])
        self.assertEqual(len(details["cart_items"]), 2)
        self.assertEqual(details["summary"], {"total_lines": 2, "item_count": 3, "total_amount": 120000})


class TestCheckoutService(unittest.TestCase):
    """Test cases for CheckoutService"""

    def setUp(self):
        self.catalog = MenuCatalog(ITEMS)
        self.cart_store = CartStore()
        self.order_store = OrderStore(1, 10)
        self.service = CheckoutService(self.cart_store, self.order_store)

    def fill_cart(self):
        self.cart_store.add_item(self.catalog.get_item("a"), 2)
        self.cart_store.add_item(self.catalog.get_item("b"), 1)

    def test_checkout_example(self):
        self.fill_cart()
        cart_total = self.cart_store.total()

        result = self.service.checkout("", "unpaid", 3)

        self.assertTrue(result["success"])
        order = self.order_store.get_order(result["order_id"])
        self.assertEqual(order.total, cart_total)
        self.assertEqual(order.total, 120000)
        self.assertEqual(order.status.value, "pending")
        self.assertEqual(order.payment_status, PaymentStatus.UNPAID)
        self.assertTrue(self.cart_store.is_empty())
        self.assertEqual(self.order_store.orders()[0].order_id, result["order_id"])

    def test_newest_checkout_listed_first(self):
        self.fill_cart()
        first = self.service.checkout("", "paid", 1)["order_id"]
        self.fill_cart()
        second = self.service.checkout("no ice", "unpaid", 2)["order_id"]
        self.assertEqual([o.order_id for o in self.order_store.orders()], [second, first])

    def test_empty_cart_checkout_changes_nothing(self):
        result = self.service.checkout("", "unpaid", 3)
        self.assertFalse(result["success"])
        self.assertEqual(result["error_code"], "EMPTY_CART")
        self.assertEqual(len(self.order_store), 0)
        self.assertTrue(self.cart_store.is_empty())

    def test_failed_order_creation_keeps_cart(self):
        self.fill_cart()
        lines_before = [(line.line_id, line.quantity) for line in self.cart_store.lines()]

        for table_number, payment_status in [(99, "unpaid"), (None, "unpaid"), (2, "later")]:
            result = self.service.checkout("", payment_status, table_number)
            self.assertFalse(result["success"])

        self.assertEqual([(line.line_id, line.quantity) for line in self.cart_store.lines()], lines_before)
        self.assertEqual(len(self.order_store), 0)


class TestOrderService(unittest.TestCase):
    """Test cases for OrderService"""

    def setUp(self):
        self.order_store = OrderStore(1, 10)
        payment = PaymentService("970422-123", "JSC", "Thanh toan", "https://qr/{merchant_id}?a={amount}&n={note}")
        self.service = OrderService(self.order_store, payment)
        self.cart_store = CartStore()
        self.cart_store.add_item(ITEMS[0], 1)
        self.order = self.order_store.create_order(self.cart_store.lines(), "", 1)

    def test_list_orders(self):
        result = self.service.list_orders()
        self.assertTrue(result["success"])
        self.assertEqual(result["orders"][0]["order_id"], self.order.order_id)
        self.assertEqual(self.service.list_orders("completed")["total_found"], 0)
        self.assertEqual(self.service.list_orders("bogus")["error_code"], "INVALID_STATUS")

    def test_update_status(self):
        self.assertTrue(self.service.update_status(self.order.order_id, "completed")["success"])
        result = self.service.update_status(self.order.order_id, "pending")
        self.assertFalse(result["success"])
        self.assertEqual(result["error_code"], "INVALID_TRANSITION")
        self.assertEqual(self.service.update_status("missing", "completed")["error_code"], "INVALID_TRANSITION")

    def test_update_payment_status(self):
        self.assertTrue(self.service.update_payment_status(self.order.order_id, "paid")["changed"])
        self.assertFalse(self.service.update_payment_status("missing", "paid")["changed"])
        self.assertEqual(self.service.update_payment_status(self.order.order_id, "x")["error_code"],
                         "INVALID_PAYMENT_STATUS")

    def test_get_order_details(self):
        self.assertTrue(self.service.get_order_details(self.order.order_id)["success"])
        self.assertEqual(self.service.get_order_details("missing")["error_code"], "NOT_FOUND")

    def test_cancel_order(self):
        self.assertFalse(self.service.cancel_order("missing")["changed"])
        self.assertTrue(self.service.cancel_order(self.order.order_id)["changed"])
        self.assertEqual(self.service.get_status_counts()["all"], 0)

    def test_payment_qr(self):
        qr = self.service.get_payment_qr(self.order.order_id)["payment_qr"]
        self.assertEqual(qr["amount"], 50000)
        self.assertEqual(qr["note"], "Thanh toan")
        self.assertEqual(qr["image_url"], "https://qr/970422-123?a=50000&n=Thanh%20toan")
        self.assertEqual(self.service.get_payment_qr("missing")["error_code"], "NOT_FOUND")


class TestPaymentRounding(unittest.TestCase):
    """Test cases for payment amount rounding"""

    def test_round_amount(self):
        self.assertEqual(round_amount(120000), 120000)
        self.assertEqual(round_amount(12.49), 12)
        self.assertEqual(round_amount(12.5), 13)
        self.assertEqual(round_amount(2.675), 3)


if __name__ == '__main__':
    unittest.main()
