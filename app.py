from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from config import AppConfig
from core.order_system import VenueOrderSystem
from log_config import configure_logging, get_logger

log = get_logger(__name__)

ERROR_STATUS_CODES = {
    "NOT_FOUND": 404,
    "EMPTY_CART": 409,
    "INVALID_TRANSITION": 409,
}


def _system() -> VenueOrderSystem:
    return current_app.extensions["venue_system"]


def _respond(result: Dict[str, Any], success_code: int = 200):
    """Turn a service result dictionary into a JSON response"""
    if result.get("success", True):
        return jsonify(result), success_code
    return jsonify(result), ERROR_STATUS_CODES.get(result.get("error_code"), 400)


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def create_app(system: Optional[VenueOrderSystem] = None, config: Optional[AppConfig] = None) -> Flask:
    """Application factory; the ordering system is created once per app"""
    config = config or (system.config if system else AppConfig.from_env())
    configure_logging(config.log_level)

    app = Flask(__name__)
    app.secret_key = config.secret_key
    app.json.ensure_ascii = False
    app.extensions["venue_system"] = system or VenueOrderSystem(config)

    @app.errorhandler(Exception)
    def handle_error(e):
        """Answer every failure with JSON, including unexpected ones"""
        if isinstance(e, HTTPException):
            return jsonify({'success': False, 'error': e.description,
                            'error_code': e.name.upper().replace(' ', '_')}), e.code
        log.exception("Unhandled error on {} {}", request.method, request.path)
        return jsonify({'success': False, 'error': f'An error occurred: {str(e)}',
                        'error_code': 'INTERNAL_ERROR'}), 500

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return jsonify({'status': 'ok', 'message': 'Venue ordering system is running!'})

    # === menu ===
    @app.route('/api/menu', methods=['GET'])
    def menu():
        return _respond(_system().get_menu(request.args.get('category')))

    @app.route('/api/menu/search', methods=['GET'])
    def search_menu():
        limit = request.args.get('limit', '5')
        if not limit.isdigit():
            return jsonify({'success': False, 'error': 'limit must be a positive number',
                            'error_code': 'INVALID_LIMIT'}), 400
        return _respond(_system().find_menu_items(
            request.args.get('q', ''), request.args.get('category'), int(limit)
        ))

    # === cart ===
    @app.route('/api/cart', methods=['GET'])
    def cart():
        return _respond(_system().get_cart_details())

    @app.route('/api/cart/items', methods=['POST'])
    def add_cart_item():
        data = _payload()
        item_id = data.get('item_id')
        if not item_id or not isinstance(item_id, str):
            return jsonify({'success': False, 'error': 'item_id must be a non-empty string',
                            'error_code': 'INVALID_REQUEST'}), 400
        return _respond(_system().add_to_cart(item_id, data.get('quantity', 1)), 201)

    @app.route('/api/cart/lines/<line_id>', methods=['PATCH'])
    def update_cart_line(line_id):
        data = _payload()
        if 'quantity' not in data:
            return jsonify({'success': False, 'error': 'quantity is required',
                            'error_code': 'INVALID_REQUEST'}), 400
        # "edit" is the typed-in value from a text field, otherwise a stepper update
        if data.get('mode') == 'edit':
            return _respond(_system().edit_cart_quantity(line_id, data['quantity']))
        return _respond(_system().update_cart_quantity(line_id, data['quantity']))

    @app.route('/api/cart/lines/<line_id>', methods=['DELETE'])
    def remove_cart_line(line_id):
        return _respond(_system().remove_cart_line(line_id))

    @app.route('/api/checkout', methods=['POST'])
    def checkout():
        data = _payload()
        return _respond(_system().checkout(
            notes=data.get('notes', ''),
            payment_status=data.get('payment_status', 'unpaid'),
            table_number=data.get('table_number')
        ), 201)

    # === orders ===
    @app.route('/api/orders', methods=['GET'])
    def orders():
        return _respond(_system().list_orders(request.args.get('status', 'all')))

    @app.route('/api/orders/counts', methods=['GET'])
    def order_counts():
        return jsonify({'success': True, 'counts': _system().get_status_counts()})

    @app.route('/api/orders/<order_id>', methods=['GET'])
    def order_details(order_id):
        return _respond(_system().get_order_details(order_id))

    @app.route('/api/orders/<order_id>', methods=['DELETE'])
    def cancel_order(order_id):
        return _respond(_system().cancel_order(order_id))

    @app.route('/api/orders/<order_id>/status', methods=['PATCH'])
    def update_order_status(order_id):
        return _respond(_system().update_order_status(order_id, _payload().get('status')))

    @app.route('/api/orders/<order_id>/payment', methods=['PATCH'])
    def update_payment_status(order_id):
        return _respond(_system().update_payment_status(order_id, _payload().get('payment_status')))

    @app.route('/api/orders/<order_id>/payment-qr', methods=['GET'])
    def payment_qr(order_id):
        return _respond(_system().get_payment_qr(order_id))

    return app


if __name__ == '__main__':
    app_config = AppConfig.from_env()
    app = create_app(config=app_config)

    log.info("Starting server on http://localhost:{}", app_config.port)
    app.run(
        host='0.0.0.0',
        port=app_config.port,
        debug=app_config.debug
    )
