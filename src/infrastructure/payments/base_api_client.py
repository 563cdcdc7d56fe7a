"""Base API client for payment processor HTTP communication.

Handles what every processor client needs:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with processor context

Subclasses build their authentication headers and call the base methods.

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for processor errors)
"""

from typing import Any

import httpx
import structlog

from src.core.constants import PROCESSOR_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors.payment_processor_error import (
    PaymentProcessorError,
    PaymentProcessorRejectedError,
    PaymentProcessorUnavailableError,
)


class BaseProcessorAPIClient:
    """Base class for processor API clients with shared HTTP handling.

    Attributes:
        _base_url: Processor API base URL (without trailing slash).
        _provider_name: Provider identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with processor context.
    """

    def __init__(
        self,
        *,
        base_url: str,
        provider_name: str,
        timeout: float = PROCESSOR_TIMEOUT_DEFAULT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._provider_name = provider_name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{provider_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        form_data: dict[str, str] | None = None,
        operation: str,
    ) -> Result[httpx.Response, PaymentProcessorError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url.
            headers: HTTP headers including authentication.
            params: Optional query parameters.
            form_data: Optional form-encoded body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(PaymentProcessorUnavailableError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    data=form_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._provider_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=PaymentProcessorUnavailableError(
                    code=ErrorCode.PAYMENT_PROCESSOR_UNAVAILABLE,
                    message=f"{self._provider_name.title()} API request timed out",
                    provider_name=self._provider_name,
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._provider_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=PaymentProcessorUnavailableError(
                    code=ErrorCode.PAYMENT_PROCESSOR_UNAVAILABLE,
                    message=f"Failed to connect to {self._provider_name.title()} API: {e}",
                    provider_name=self._provider_name,
                    is_transient=True,
                )
            )

    def _error_payload(self, response: httpx.Response) -> dict[str, Any]:
        """Processor error object, empty when the body is not JSON."""
        try:
            body = response.json()
        except ValueError:
            return {}
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return body["error"]
        return {}

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[PaymentProcessorError] | None:
        """Check HTTP response for errors and return the matching processor error.

        Returns:
            Failure(PaymentProcessorError) if error detected, None if response is OK.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status == 429 or status >= 500:
            self._logger.warning(
                f"{self._provider_name}_api_unavailable",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=PaymentProcessorUnavailableError(
                    code=ErrorCode.PAYMENT_PROCESSOR_UNAVAILABLE,
                    message=f"{self._provider_name.title()} API unavailable: {status}",
                    provider_name=self._provider_name,
                    is_transient=True,
                    details={"status_code": status},
                )
            )

        if status in (401, 403):
            self._logger.error(
                f"{self._provider_name}_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=PaymentProcessorError(
                    code=ErrorCode.PAYMENT_PROCESSOR_ERROR,
                    message=f"{self._provider_name.title()} rejected the API credentials",
                    provider_name=self._provider_name,
                    details={"status_code": status},
                )
            )

        payload = self._error_payload(response)
        processor_code = payload.get("decline_code") or payload.get("code")
        self._logger.warning(
            f"{self._provider_name}_api_rejected",
            operation=operation,
            status_code=status,
            processor_code=processor_code,
        )
        return Failure(
            error=PaymentProcessorRejectedError(
                code=ErrorCode.PAYMENT_PROCESSOR_REJECTED,
                message=payload.get("message")
                or f"{self._provider_name.title()} rejected the request: {status}",
                provider_name=self._provider_name,
                processor_code=processor_code,
                details={
                    "status_code": status,
                    "response_body": response.text[:RESPONSE_BODY_MAX_LENGTH],
                },
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], PaymentProcessorError]:
        """Parse response as JSON object with error handling."""
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._provider_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            data = None

        if not isinstance(data, dict):
            return Failure(
                error=PaymentProcessorError(
                    code=ErrorCode.PAYMENT_PROCESSOR_ERROR,
                    message=f"Invalid response from {self._provider_name.title()}",
                    provider_name=self._provider_name,
                    details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
                )
            )

        self._logger.debug(
            f"{self._provider_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=data)

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        form_data: dict[str, str] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], PaymentProcessorError]:
        """Execute request and parse response as JSON object."""
        result = await self._execute_request(
            method=method,
            path=path,
            headers=headers,
            params=params,
            form_data=form_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)
