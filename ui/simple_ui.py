"""
Simple text-based UI for staff at the counter
"""
import shlex
from typing import Dict, Any, List, Optional

from core.order_system import VenueOrderSystem
from .formatting import format_currency

HELP_TEXT = """Commands:
  menu [food|drink|service]      show the menu
  search <text>                  search the menu by name
  add <item_id> [qty]            add an item to the cart
  cart                           show the cart
  qty <line_no> <qty>            set the quantity of a cart line
  remove <line_no>               remove a cart line
  checkout <table> [paid|unpaid] [notes...]
  orders [all|pending|completed] list orders
  complete <order_id>            mark an order completed
  paid <order_id> / unpaid <order_id>
  cancel <order_id>              delete an order
  qr <order_id>                  show payment QR data
  quit"""


class SimpleOrderUI:
    """Simple text-based order interface"""

    def __init__(self, system: VenueOrderSystem):
        self.system = system
        self.currency = system.config.currency

    def run(self):
        """Run the console loop until quit or end of input"""
        print("JSC Ordering System")
        print("Type 'help' for the list of commands.")

        while True:
            try:
                user_input = input("\n> ").strip()
            except EOFError:
                break
            if not self.handle_command(user_input):
                print("Goodbye!")
                break

    def handle_command(self, user_input: str) -> bool:
        """Execute one command line; returns False when the user wants to quit"""
        try:
            parts = shlex.split(user_input)
        except ValueError as e:
            print(f"Could not read the command: {e}")
            return True
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]

        if command in ["quit", "exit"]:
            return False
        elif command == "help":
            print(HELP_TEXT)
        elif command == "menu":
            self._show_menu(args[0] if args else None)
        elif command == "search":
            self._search(" ".join(args))
        elif command == "add":
            self._add(args)
        elif command == "cart":
            self._show_cart()
        elif command == "qty":
            self._set_quantity(args)
        elif command == "remove":
            self._remove(args)
        elif command == "checkout":
            self._checkout(args)
        elif command == "orders":
            self._show_orders(args[0] if args else "all")
        elif command == "complete" and args:
            self._report(self.system.update_order_status(args[0], "completed"), "Order completed.")
        elif command in ["paid", "unpaid"] and args:
            self._report(self.system.update_payment_status(args[0], command), f"Order marked {command}.")
        elif command == "cancel" and args:
            result = self.system.cancel_order(args[0])
            print("Order cancelled." if result["changed"] else "No such order.")
        elif command == "qr" and args:
            self._show_qr(args[0])
        else:
            print("Unknown command. Type 'help' for the list of commands.")
        return True

    def _money(self, amount) -> str:
        return format_currency(amount, self.currency)

    def _report(self, result: Dict[str, Any], success_message: str):
        if not result["success"]:
            print(f"Failed: {result['error']}")
        elif result.get("changed") is False:
            print("Nothing changed.")
        else:
            print(success_message)

    def _line_id(self, line_no: str) -> Optional[str]:
        # cart lines are addressed by their 1-based position in the cart listing
        lines: List[Dict[str, Any]] = self.system.get_cart_details()["cart_items"]
        if not line_no.isdigit() or not 1 <= int(line_no) <= len(lines):
            print(f"No cart line {line_no}.")
            return None
        return lines[int(line_no) - 1]["line_id"]

    def _show_menu(self, category: Optional[str]):
        menu = self.system.get_menu(category)
        if not menu["success"]:
            print(f"Failed: {menu['error']}")
            return
        for item in menu["items"]:
            print(f"- [{item['item_id']}] {item['name']} ({self._money(item['unit_price'])}) {item['category']}")

    def _search(self, query: str):
        result = self.system.find_menu_items(query)
        if not result["matches"]:
            print("No matching menu items.")
            return
        for item in result["matches"]:
            print(f"- [{item['item_id']}] {item['name']} ({self._money(item['unit_price'])})")

    def _add(self, args: List[str]):
        if not args:
            print("Usage: add <item_id> [qty]")
            return
        quantity = args[1] if len(args) > 1 else 1
        result = self.system.add_to_cart(args[0], quantity)
        if result["success"]:
            print(result["message"])
        else:
            print(f"Failed: {result['error']}")

    def _show_cart(self):
        cart = self.system.get_cart_details()
        print(cart["message"])
        for index, item in enumerate(cart["cart_items"], start=1):
            print(f"{index}. {item['name']} x{item['quantity']}: {self._money(item['line_total'])}")
        if cart["cart_items"]:
            summary = cart["summary"]
            print(f"Items: {summary['item_count']}  Total: {self._money(summary['total_amount'])}")

    def _set_quantity(self, args: List[str]):
        if len(args) < 2:
            print("Usage: qty <line_no> <qty>")
            return
        line_id = self._line_id(args[0])
        if line_id:
            self._report(self.system.edit_cart_quantity(line_id, args[1]), "Quantity updated.")

    def _remove(self, args: List[str]):
        if not args:
            print("Usage: remove <line_no>")
            return
        line_id = self._line_id(args[0])
        if line_id:
            self.system.remove_cart_line(line_id)
            print("Line removed.")

    def _checkout(self, args: List[str]):
        if not args or not args[0].isdigit():
            print("Usage: checkout <table> [paid|unpaid] [notes...]")
            return
        table_number = int(args[0])
        payment_status = "unpaid"
        rest = args[1:]
        if rest and rest[0].lower() in ["paid", "unpaid"]:
            payment_status = rest[0].lower()
            rest = rest[1:]

        result = self.system.checkout(" ".join(rest), payment_status, table_number)
        if result["success"]:
            print(f"{result['message']} Total: {self._money(result['total'])}")
        else:
            print(f"Checkout failed: {result['error']}")

    def _show_orders(self, status: str):
        result = self.system.list_orders(status)
        if not result["success"]:
            print(f"Failed: {result['error']}")
            return
        counts = self.system.get_status_counts()
        print(f"Pending: {counts['pending']}  Completed: {counts['completed']}  All: {counts['all']}")
        for order in result["orders"]:
            print(f"- {order['order_id']} table {order['table_number']} "
                  f"{order['status']}/{order['payment_status']} {self._money(order['total'])}")
            for line in order["lines"]:
                print(f"    {line['name']} x{line['quantity']}")
            if order["notes"]:
                print(f"    Notes: {order['notes']}")

    def _show_qr(self, order_id: str):
        result = self.system.get_payment_qr(order_id)
        if not result["success"]:
            print(f"Failed: {result['error']}")
            return
        qr = result["payment_qr"]
        print(f"Amount: {self._money(qr['amount'])}  Note: {qr['note']}")
        print(qr["image_url"])
