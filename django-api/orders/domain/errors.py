"""Domain error codes for the orders module."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orders.domain.catalog import GarmentType


class ErrorCode(Enum):
    """Domain error codes."""

    NO_ITEMS_SELECTED = "NO_ITEMS_SELECTED"
    SLEEVE_EXCEEDS_GARMENT_COUNT = "SLEEVE_EXCEEDS_GARMENT_COUNT"
    MISSING_IDENTITY = "MISSING_IDENTITY"
    UNKNOWN_SIZE = "UNKNOWN_SIZE"
    ALREADY_IN_PROGRESS = "ALREADY_IN_PROGRESS"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    INVALID_ORDER_ID = "INVALID_ORDER_ID"
    DELETE_NOT_REQUESTED = "DELETE_NOT_REQUESTED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """A draft cannot be submitted until the user corrects it."""


class NoItemsSelectedError(ValidationError):
    """Raised when a draft contains no garments and no accessories."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ITEMS_SELECTED,
            message="Please select at least one product",
        )


class SleeveExceedsGarmentCountError(ValidationError):
    """Raised when sleeve choices outnumber the garments ordered."""

    def __init__(self, garment: "GarmentType") -> None:
        super().__init__(
            code=ErrorCode.SLEEVE_EXCEEDS_GARMENT_COUNT,
            message=f"Sleeve choices for {garment.value} exceed the number of garments ordered",
        )
        self.garment = garment


class MissingIdentityError(ValidationError):
    """Raised when the submitter name or region is blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_IDENTITY,
            message=f"Please fill in {field.replace('_', ' ')}",
        )
        self.field = field


class UnknownSizeError(ValidationError):
    """Raised when a size is not offered for a garment."""

    def __init__(self, garment: "GarmentType", size_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_SIZE,
            message=f"Size {size_id} is not available for {garment.value}",
        )
        self.garment = garment
        self.size_id = size_id


class AlreadyInProgressError(DomainError):
    """Raised when a submit is requested while another is outstanding."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_IN_PROGRESS,
            message="Order submission already in progress",
        )


class OrderNotFoundError(DomainError):
    """Raised when an order is not in the current snapshot or store."""

    def __init__(self, order_id: str) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="Order not found",
        )
        self.order_id = order_id


class InvalidOrderIdError(DomainError):
    """Raised when an order ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ORDER_ID,
            message="Invalid order ID format",
        )


class DeleteNotRequestedError(DomainError):
    """Raised when confirming a delete that is not awaiting confirmation."""

    def __init__(self, order_id: str) -> None:
        super().__init__(
            code=ErrorCode.DELETE_NOT_REQUESTED,
            message="Order is not awaiting delete confirmation",
        )
        self.order_id = order_id


class StoreError(DomainError):
    """Raised when the order store cannot complete a request."""

    def __init__(self, message: str = "Could not reach the order store. Please try again.") -> None:
        super().__init__(code=ErrorCode.STORE_UNAVAILABLE, message=message)


class AuthError(DomainError):
    """Raised when the caller could not be established."""

    def __init__(self, message: str = "Could not connect to the ordering system.") -> None:
        super().__init__(code=ErrorCode.NOT_AUTHORIZED, message=message)
