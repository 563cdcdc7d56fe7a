"""Payments resource handlers.

Handler functions for payment endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_payment         - Create a pending payment
    purchase_ticket        - Create and process a payment in one call
    search_payments        - Filtered payment list
    get_payment_stats      - Payment statistics
    get_total_revenue      - Revenue over a timeframe
    get_payment            - Payment details
    check_payment_status   - Compare local and processor status
    process_payment        - Charge a pending payment
    refund_payment         - Refund a completed payment
    cancel_payment         - Cancel a pending payment
    list_user_payments     - All payments of a user
    list_event_payments    - All payments for an event
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.cancel_payment_handler import (
    CancelPaymentHandler,
)
from src.application.commands.handlers.create_payment_handler import (
    CreatePaymentHandler,
)
from src.application.commands.handlers.process_payment_handler import (
    ProcessPaymentHandler,
)
from src.application.commands.handlers.purchase_ticket_handler import (
    PurchaseTicketHandler,
)
from src.application.commands.handlers.refund_payment_handler import (
    RefundPaymentHandler,
)
from src.application.commands.payment_commands import (
    CancelPayment,
    CreatePayment,
    ProcessPayment,
    PurchaseTicket,
    RefundPayment,
)
from src.application.queries.handlers.get_payment_handler import (
    CheckPaymentStatusHandler,
    GetPaymentHandler,
)
from src.application.queries.handlers.list_payments_handler import (
    ListEventPaymentsHandler,
    ListUserPaymentsHandler,
    SearchPaymentsHandler,
)
from src.application.queries.handlers.payment_stats_handler import (
    GetPaymentStatsHandler,
    GetTotalRevenueHandler,
)
from src.application.queries.payment_queries import (
    CheckPaymentStatus,
    GetPayment,
    GetPaymentStats,
    GetTotalRevenue,
    ListEventPayments,
    ListUserPayments,
    SearchPayments,
)
from src.core.container import (
    get_cancel_payment_handler,
    get_check_payment_status_handler,
    get_create_payment_handler,
    get_get_payment_handler,
    get_list_event_payments_handler,
    get_list_user_payments_handler,
    get_payment_stats_handler,
    get_process_payment_handler,
    get_purchase_ticket_handler,
    get_refund_payment_handler,
    get_search_payments_handler,
    get_total_revenue_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.payment_schemas import (
    CreatePaymentRequest,
    PaymentListResponse,
    PaymentResponse,
    PaymentStatsResponse,
    PaymentStatusCheckResponse,
    RefundPaymentRequest,
    RevenueResponse,
)

PaymentId = Annotated[UUID, Path(description="Payment UUID")]


# =============================================================================
# Payment Collection
# =============================================================================


async def create_payment(
    request: Request,
    data: CreatePaymentRequest,
    handler: CreatePaymentHandler = Depends(get_create_payment_handler),
) -> PaymentResponse | JSONResponse:
    """Create a pending payment.

    POST /api/v1/payments → 201 Created
    """
    command = CreatePayment(
        user_id=data.user_id,
        event_id=data.event_id,
        amount=data.amount,
        currency=data.currency,
        provider=data.provider,
        payment_method=data.payment_method,
        ticket_id=data.ticket_id,
        description=data.description,
        metadata=data.metadata,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return PaymentResponse.from_dto(result.value)


async def purchase_ticket(
    request: Request,
    data: CreatePaymentRequest,
    handler: PurchaseTicketHandler = Depends(get_purchase_ticket_handler),
) -> PaymentResponse | JSONResponse:
    """Create a payment and charge it immediately.

    POST /api/v1/payments/purchase → 201 Created

    When the charge fails the payment is kept as FAILED and its id is
    returned in the problem ``details.payment_id``.
    """
    command = PurchaseTicket(
        user_id=data.user_id,
        event_id=data.event_id,
        amount=data.amount,
        currency=data.currency,
        provider=data.provider,
        payment_method=data.payment_method,
        ticket_id=data.ticket_id,
        description=data.description,
        metadata=data.metadata,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return PaymentResponse.from_dto(result.value)


async def search_payments(
    request: Request,
    user_id: Annotated[UUID | None, Query(description="Filter by user")] = None,
    event_id: Annotated[UUID | None, Query(description="Filter by event")] = None,
    status: Annotated[str | None, Query(description="Filter by status")] = None,
    provider: Annotated[str | None, Query(description="Filter by provider")] = None,
    payment_method: Annotated[
        str | None, Query(description="Filter by payment method")
    ] = None,
    min_amount: Annotated[Decimal | None, Query(description="Minimum amount")] = None,
    max_amount: Annotated[Decimal | None, Query(description="Maximum amount")] = None,
    start_date: Annotated[
        datetime | None, Query(description="Created at or after")
    ] = None,
    end_date: Annotated[datetime | None, Query(description="Created at or before")] = None,
    handler: SearchPaymentsHandler = Depends(get_search_payments_handler),
) -> PaymentListResponse | JSONResponse:
    """List payments matching every given filter, newest first.

    GET /api/v1/payments → 200 OK

    Unknown status/provider/method values are rejected with 400.
    """
    query = SearchPayments(
        user_id=user_id,
        event_id=event_id,
        status=status,
        provider=provider,
        payment_method=payment_method,
        min_amount=min_amount,
        max_amount=max_amount,
        start_date=start_date,
        end_date=end_date,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return PaymentListResponse.from_dto(result.value)


# =============================================================================
# Reporting
# =============================================================================


async def get_payment_stats(
    request: Request,
    start_date: Annotated[datetime | None, Query(description="Window start")] = None,
    end_date: Annotated[datetime | None, Query(description="Window end")] = None,
    handler: GetPaymentStatsHandler = Depends(get_payment_stats_handler),
) -> PaymentStatsResponse | JSONResponse:
    """Payment statistics.

    GET /api/v1/payments/stats → 200 OK
    """
    result = await handler.handle(
        GetPaymentStats(start_date=start_date, end_date=end_date)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return PaymentStatsResponse.from_dto(result.value)


async def get_total_revenue(
    request: Request,
    timeframe: Annotated[
        str,
        Query(description="daily, weekly, monthly, yearly or all"),
    ] = "all",
    handler: GetTotalRevenueHandler = Depends(get_total_revenue_handler),
) -> RevenueResponse | JSONResponse:
    """Revenue from completed payments over a timeframe.

    GET /api/v1/payments/revenue → 200 OK
    """
    result = await handler.handle(GetTotalRevenue(timeframe=timeframe))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return RevenueResponse.from_dto(result.value)


# =============================================================================
# Single Payment
# =============================================================================


async def get_payment(
    request: Request,
    payment_id: PaymentId,
    handler: GetPaymentHandler = Depends(get_get_payment_handler),
) -> PaymentResponse | JSONResponse:
    """Get a specific payment.

    GET /api/v1/payments/{payment_id} → 200 OK
    """
    result = await handler.handle(GetPayment(payment_id=payment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return PaymentResponse.from_dto(result.value)


async def check_payment_status(
    request: Request,
    payment_id: PaymentId,
    handler: CheckPaymentStatusHandler = Depends(get_check_payment_status_handler),
) -> PaymentStatusCheckResponse | JSONResponse:
    """Ask the processor for the payment's status (read-only).

    GET /api/v1/payments/{payment_id}/processor-status → 200 OK
    """
    result = await handler.handle(CheckPaymentStatus(payment_id=payment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return PaymentStatusCheckResponse.from_dto(result.value)


async def process_payment(
    request: Request,
    payment_id: PaymentId,
    handler: ProcessPaymentHandler = Depends(get_process_payment_handler),
) -> PaymentResponse | JSONResponse:
    """Charge a pending payment.

    POST /api/v1/payments/{payment_id}/process → 200 OK
    """
    result = await handler.handle(ProcessPayment(payment_id=payment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return PaymentResponse.from_dto(result.value)


async def refund_payment(
    request: Request,
    payment_id: PaymentId,
    data: RefundPaymentRequest | None = None,
    handler: RefundPaymentHandler = Depends(get_refund_payment_handler),
) -> PaymentResponse | JSONResponse:
    """Refund a completed payment in full.

    POST /api/v1/payments/{payment_id}/refund → 200 OK
    """
    command = RefundPayment(
        payment_id=payment_id,
        reason=data.reason if data else None,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return PaymentResponse.from_dto(result.value)


async def cancel_payment(
    request: Request,
    payment_id: PaymentId,
    handler: CancelPaymentHandler = Depends(get_cancel_payment_handler),
) -> PaymentResponse | JSONResponse:
    """Cancel a pending payment.

    POST /api/v1/payments/{payment_id}/cancel → 200 OK
    """
    result = await handler.handle(CancelPayment(payment_id=payment_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return PaymentResponse.from_dto(result.value)


# =============================================================================
# User / Event scoped
# =============================================================================


async def list_user_payments(
    request: Request,
    user_id: Annotated[UUID, Path(description="User UUID")],
    handler: ListUserPaymentsHandler = Depends(get_list_user_payments_handler),
) -> PaymentListResponse | JSONResponse:
    """List all payments of a user.

    GET /api/v1/users/{user_id}/payments → 200 OK
    """
    result = await handler.handle(ListUserPayments(user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return PaymentListResponse.from_dto(result.value)


async def list_event_payments(
    request: Request,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    handler: ListEventPaymentsHandler = Depends(get_list_event_payments_handler),
) -> PaymentListResponse | JSONResponse:
    """List all payments for an event.

    GET /api/v1/events/{event_id}/payments → 200 OK
    """
    result = await handler.handle(ListEventPayments(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return PaymentListResponse.from_dto(result.value)
