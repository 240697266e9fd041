"""
Error types for the ordering core

Every error is recoverable: services catch OrderingError and turn it into a
failed result dictionary instead of letting it reach the caller.
"""


class OrderingError(Exception):
    """Base class for rejected ordering operations"""
    code = "ORDERING_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyCartError(OrderingError):
    code = "EMPTY_CART"


class NotFoundError(OrderingError):
    code = "NOT_FOUND"


class InvalidQuantityError(OrderingError):
    code = "INVALID_QUANTITY"


class InvalidTransitionError(OrderingError):
    code = "INVALID_TRANSITION"


class InvalidTableNumberError(OrderingError):
    code = "INVALID_TABLE_NUMBER"


class InvalidPaymentStatusError(OrderingError):
    code = "INVALID_PAYMENT_STATUS"


class InvalidStatusError(OrderingError):
    code = "INVALID_STATUS"


class InvalidNotesError(OrderingError):
    code = "INVALID_NOTES"
