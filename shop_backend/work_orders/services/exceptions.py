# work_orders/services/exceptions.py

"""
WORK ORDER SERVICE ERRORS
"""


class WorkOrderError(Exception):
    """Base exception for work order failures."""


class InvalidStatusError(WorkOrderError):
    """Raised when a status outside the fixed sequence is requested."""


class InvalidWorkOrderError(WorkOrderError):
    """Raised when a work order cannot be created from the given data."""


class CustomerNotServedError(InvalidWorkOrderError):
    """Raised when a shop links a customer it has no work orders with."""


class ShopUnavailableError(InvalidWorkOrderError):
    """Raised when a service request targets a missing or inactive shop."""
