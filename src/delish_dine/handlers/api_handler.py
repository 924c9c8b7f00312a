"""FastAPI application for the restaurant API and single-page frontend."""

import logging
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from delish_dine.auth.api_dependencies import require_role
from delish_dine.auth.token_service import TokenService
from delish_dine.errors import NotFound, PayloadTooLarge, RestaurantAPIError, ValidationFailed
from delish_dine.handlers.frontend import INDEX_HTML
from delish_dine.handlers.request_body import read_json_body
from delish_dine.models.restaurant_models import MenuItem, Order, Reservation
from delish_dine.repositories.restaurant_repositories import RestaurantStore
from delish_dine.services.contact_service import ContactService
from delish_dine.services.menu_service import MenuService
from delish_dine.services.order_service import OrderService
from delish_dine.services.reservation_service import ReservationService
from delish_dine.validation.schemas import MenuItemCreate, OrderStatusUpdate, validate_schema

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CONTACT_SUCCESS_MESSAGE = "Form submitted successfully!"

ADMIN_ROLES = ("admin", "manager")
STAFF_ROLES = ("admin", "manager", "staff")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class ContactCreatedResponse(BaseModel):
    id: int
    message: str


class OrderCreatedResponse(BaseModel):
    order_id: int


class ReservationCreatedResponse(BaseModel):
    id: int


def _error_response(status_code: int, body: dict[str, Any], **headers: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, headers=headers or None)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as a JSON ``{"error": ...}`` envelope."""

    @app.exception_handler(RestaurantAPIError)
    async def restaurant_error_handler(request: Request, exc: RestaurantAPIError) -> JSONResponse:
        if isinstance(exc, PayloadTooLarge):
            return _error_response(exc.status_code, exc.to_response_body(), Connection="close")
        return _error_response(exc.status_code, exc.to_response_body())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, {"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {"path": list(error["loc"]), "message": error["msg"], "code": error["type"]}
            for error in exc.errors()
        ]
        return _error_response(400, {"error": "Validation failed", "details": details})


def create_app(store: RestaurantStore, token_service: TokenService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: In-memory store shared by all handlers of this application
        token_service: Token service for the secured admin API; the admin
            routes are only mounted when one is given

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Delish Dine Restaurant API",
        description="Menu, contact, order and reservation endpoints for Delish Dine",
        version="1.0.0",
        # Every non-API path other than /health belongs to the single page
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store services in app state for access in route handlers
    menu_service = MenuService(store=store)
    app.state.store = store
    app.state.menu_service = menu_service
    app.state.contact_service = ContactService(store=store)
    app.state.order_service = OrderService(store=store, menu_service=menu_service)
    app.state.reservation_service = ReservationService(store=store)
    app.state.token_service = token_service

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/api/menu", response_model=list[MenuItem], tags=["Menu"])
    async def list_menu() -> list[MenuItem]:
        """List the active menu items."""
        items: list[MenuItem] = await app.state.menu_service.list_active_items()
        return items

    @app.post(
        "/api/contact",
        response_model=ContactCreatedResponse,
        status_code=201,
        tags=["Contact"],
    )
    async def submit_contact(request: Request) -> ContactCreatedResponse:
        """Store a message from the contact form."""
        payload = await read_json_body(request)
        message = await app.state.contact_service.submit(payload)
        return ContactCreatedResponse(id=message.id, message=CONTACT_SUCCESS_MESSAGE)

    @app.post(
        "/api/orders",
        response_model=OrderCreatedResponse,
        status_code=201,
        tags=["Orders"],
    )
    async def create_order(request: Request) -> OrderCreatedResponse:
        """Place an order for one or more active menu items."""
        payload = await read_json_body(request)
        order = await app.state.order_service.create_order(payload)
        return OrderCreatedResponse(order_id=order.id)

    @app.get("/api/orders", response_model=list[Order], tags=["Orders"])
    async def list_orders() -> list[Order]:
        """List all orders, newest first."""
        orders: list[Order] = await app.state.order_service.list_orders()
        return orders

    @app.post(
        "/api/reservations",
        response_model=ReservationCreatedResponse,
        status_code=201,
        tags=["Reservations"],
    )
    async def create_reservation(request: Request) -> ReservationCreatedResponse:
        """Book a table."""
        payload = await read_json_body(request)
        reservation = await app.state.reservation_service.create_reservation(payload)
        return ReservationCreatedResponse(id=reservation.id)

    @app.get("/api/reservations", response_model=list[Reservation], tags=["Reservations"])
    async def list_reservations() -> list[Reservation]:
        """List all reservations, latest reservation time first."""
        reservations: list[Reservation] = await app.state.reservation_service.list_reservations()
        return reservations

    if token_service is not None:
        register_admin_routes(app)
        logger.info("Secured admin API mounted")

    # Catch-alls go last so every route above takes precedence
    @app.api_route("/api/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def api_not_found(path: str) -> JSONResponse:
        raise NotFound()

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def single_page(path: str) -> HTMLResponse:
        return HTMLResponse(INDEX_HTML)

    return app


def register_admin_routes(app: FastAPI) -> None:
    """Mount the bearer-token protected admin routes.

    Request bodies are validated against pydantic schemas; a failure answers
    400 with every issue listed under ``details``.
    """

    async def _validated(request: Request, schema: type[BaseModel]) -> Any:
        result = validate_schema(schema, await read_json_body(request))
        if not result.success:
            raise ValidationFailed("Validation failed", details=result.issues)
        return result.data

    @app.post("/api/admin/menu", response_model=MenuItem, status_code=201, tags=["Admin"])
    async def create_menu_item(
        request: Request,
        _user: Any = Depends(require_role(*ADMIN_ROLES)),
    ) -> MenuItem:
        """Add a dish to the menu."""
        data: MenuItemCreate = await _validated(request, MenuItemCreate)
        item: MenuItem = await app.state.menu_service.create_item(data)
        return item

    @app.post("/api/admin/menu/{menu_item_id}/deactivate", response_model=MenuItem, tags=["Admin"])
    async def deactivate_menu_item(
        menu_item_id: int,
        _user: Any = Depends(require_role(*ADMIN_ROLES)),
    ) -> MenuItem:
        """Take a dish off the menu."""
        item: MenuItem = await app.state.menu_service.deactivate_item(menu_item_id)
        return item

    @app.get("/api/admin/orders", response_model=list[Order], tags=["Admin"])
    async def list_orders_for_staff(
        _user: Any = Depends(require_role(*STAFF_ROLES)),
    ) -> list[Order]:
        """List all orders, newest first."""
        orders: list[Order] = await app.state.order_service.list_orders()
        return orders

    @app.patch("/api/admin/orders/{order_id}/status", response_model=Order, tags=["Admin"])
    async def update_order_status(
        order_id: int,
        request: Request,
        _user: Any = Depends(require_role(*STAFF_ROLES)),
    ) -> Order:
        """Move an order through Pending, Confirmed, Served or Cancelled."""
        data: OrderStatusUpdate = await _validated(request, OrderStatusUpdate)
        order: Order = await app.state.order_service.update_status(order_id, data.status)
        return order
