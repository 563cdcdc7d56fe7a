"""Payment handler dependency factories.

Request-scoped handler instances for the payment lifecycle:
- Commands (create, process, purchase ticket, refund, cancel)
- Queries (get, remote status check, list by user/event, filtered search,
  statistics, total revenue)

Repositories and the processor registry are injected with Depends, so a
request shares one session and tests can override them.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger
from src.core.container.payments import get_payment_processors
from src.core.container.repositories import get_payment_repository
from src.domain.enums.currency import Currency

if TYPE_CHECKING:
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
    from src.domain.protocols.payment_processor_protocol import (
        PaymentProcessorRegistryProtocol,
    )
    from src.domain.protocols.payment_repository import PaymentRepository


# ============================================================================
# Payment Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_payment_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "CreatePaymentHandler":
    """Get CreatePayment command handler (request-scoped).

    Creates handler with:
    - PaymentRepository (request-scoped)
    - EventBus (app-scoped)
    - Logger (app-scoped)
    """
    from src.application.commands.handlers.create_payment_handler import (
        CreatePaymentHandler,
    )

    return CreatePaymentHandler(
        payment_repo=payment_repo,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_process_payment_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
    processors: "PaymentProcessorRegistryProtocol" = Depends(get_payment_processors),
) -> "ProcessPaymentHandler":
    """Get ProcessPayment command handler (request-scoped).

    Creates handler with:
    - PaymentRepository (request-scoped)
    - Payment processor registry (app-scoped)
    - EventBus (app-scoped)
    - Logger (app-scoped)
    """
    from src.application.commands.handlers.process_payment_handler import (
        ProcessPaymentHandler,
    )

    return ProcessPaymentHandler(
        payment_repo=payment_repo,
        processors=processors,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_purchase_ticket_handler(
    create_handler: "CreatePaymentHandler" = Depends(get_create_payment_handler),
    process_handler: "ProcessPaymentHandler" = Depends(get_process_payment_handler),
) -> "PurchaseTicketHandler":
    """Get PurchaseTicket handler (create + process in one call)."""
    from src.application.commands.handlers.purchase_ticket_handler import (
        PurchaseTicketHandler,
    )

    return PurchaseTicketHandler(
        create_handler=create_handler,
        process_handler=process_handler,
    )


async def get_refund_payment_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
    processors: "PaymentProcessorRegistryProtocol" = Depends(get_payment_processors),
) -> "RefundPaymentHandler":
    """Get RefundPayment command handler (request-scoped)."""
    from src.application.commands.handlers.refund_payment_handler import (
        RefundPaymentHandler,
    )

    return RefundPaymentHandler(
        payment_repo=payment_repo,
        processors=processors,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_cancel_payment_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
    processors: "PaymentProcessorRegistryProtocol" = Depends(get_payment_processors),
) -> "CancelPaymentHandler":
    """Get CancelPayment command handler (request-scoped)."""
    from src.application.commands.handlers.cancel_payment_handler import (
        CancelPaymentHandler,
    )

    return CancelPaymentHandler(
        payment_repo=payment_repo,
        processors=processors,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


# ============================================================================
# Payment Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_get_payment_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "GetPaymentHandler":
    """Get GetPayment query handler (request-scoped)."""
    from src.application.queries.handlers.get_payment_handler import (
        GetPaymentHandler,
    )

    return GetPaymentHandler(payment_repo=payment_repo)


async def get_check_payment_status_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
    processors: "PaymentProcessorRegistryProtocol" = Depends(get_payment_processors),
) -> "CheckPaymentStatusHandler":
    """Get CheckPaymentStatus query handler (request-scoped)."""
    from src.application.queries.handlers.get_payment_handler import (
        CheckPaymentStatusHandler,
    )

    return CheckPaymentStatusHandler(
        payment_repo=payment_repo,
        processors=processors,
        logger=get_logger(),
    )


async def get_list_user_payments_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "ListUserPaymentsHandler":
    """Get ListUserPayments query handler (request-scoped)."""
    from src.application.queries.handlers.list_payments_handler import (
        ListUserPaymentsHandler,
    )

    return ListUserPaymentsHandler(payment_repo=payment_repo)


async def get_list_event_payments_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "ListEventPaymentsHandler":
    """Get ListEventPayments query handler (request-scoped)."""
    from src.application.queries.handlers.list_payments_handler import (
        ListEventPaymentsHandler,
    )

    return ListEventPaymentsHandler(payment_repo=payment_repo)


async def get_search_payments_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "SearchPaymentsHandler":
    """Get SearchPayments query handler (request-scoped)."""
    from src.application.queries.handlers.list_payments_handler import (
        SearchPaymentsHandler,
    )

    return SearchPaymentsHandler(payment_repo=payment_repo)


async def get_payment_stats_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "GetPaymentStatsHandler":
    """Get GetPaymentStats query handler (request-scoped).

    The fallback reporting currency comes from settings.default_currency.
    """
    from src.application.queries.handlers.payment_stats_handler import (
        GetPaymentStatsHandler,
    )

    return GetPaymentStatsHandler(
        payment_repo=payment_repo,
        default_currency=Currency.parse(settings.default_currency),
    )


async def get_total_revenue_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "GetTotalRevenueHandler":
    """Get GetTotalRevenue query handler (request-scoped)."""
    from src.application.queries.handlers.payment_stats_handler import (
        GetTotalRevenueHandler,
    )

    return GetTotalRevenueHandler(
        payment_repo=payment_repo,
        default_currency=Currency.parse(settings.default_currency),
    )
