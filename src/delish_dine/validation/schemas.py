"""Pydantic request schemas for the secured admin API.

Unlike the rule sets in ``rules``, schema validation is exhaustive: every
failing field is reported as an issue with its path, message and error code.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, ValidationError

from delish_dine.models.restaurant_models import MenuItemType, OrderStatus

EMAIL_REGEX = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ContactCreate(BaseModel):
    """Contact form submission."""

    name: StrictStr = Field(..., min_length=2, max_length=100)
    email: StrictStr = Field(..., pattern=EMAIL_REGEX)
    message: StrictStr = Field(..., min_length=5, max_length=1000)


class MenuItemCreate(BaseModel):
    """New menu item."""

    name: StrictStr = Field(..., min_length=2)
    type: MenuItemType
    price: StrictInt = Field(..., ge=0, description="Price in minor currency units")
    is_active: StrictBool = True


class OrderItemCreate(BaseModel):
    menu_item_id: StrictInt = Field(..., gt=0)
    quantity: StrictInt = Field(..., gt=0)


class OrderCreate(BaseModel):
    """New order with at least one line item."""

    customer_name: StrictStr | None = Field(None, min_length=2, max_length=100)
    items: list[OrderItemCreate] = Field(..., min_length=1)


class ReservationCreate(BaseModel):
    """New table reservation."""

    customer_name: StrictStr = Field(..., min_length=2, max_length=100)
    phone: StrictStr | None = Field(None, min_length=7, max_length=20)
    table_no: StrictInt = Field(..., gt=0)
    reserved_at: StrictStr = Field(..., min_length=10, description="ISO-8601 datetime")
    notes: StrictStr | None = Field(None, max_length=500)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


@dataclass
class SchemaResult(Generic[ModelT]):
    """Outcome of validating a payload against a schema.

    Attributes:
        success: Whether the payload is valid
        data: Parsed model when valid, None otherwise
        issues: Per-field issues when invalid
    """

    success: bool
    data: ModelT | None = None
    issues: list[dict[str, Any]] = field(default_factory=list)


def validate_schema(schema: type[ModelT], payload: Any) -> SchemaResult[ModelT]:
    """Validate a decoded JSON payload against a pydantic schema.

    Args:
        schema: Pydantic model class to validate with
        payload: Decoded JSON value

    Returns:
        SchemaResult with the parsed model or the list of issues
    """
    try:
        return SchemaResult(success=True, data=schema.model_validate(payload))
    except ValidationError as e:
        issues = [
            {"path": list(error["loc"]), "message": error["msg"], "code": error["type"]}
            for error in e.errors()
        ]
        return SchemaResult(success=False, issues=issues)
