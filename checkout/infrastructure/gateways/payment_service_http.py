import asyncio
import json
import logging
from typing import Any

import httpx

from checkout.application.interfaces.payment_service import PaymentService, TransactionResponse
from checkout.domain.entities.transaction import PreauthTransactionRequest
from checkout.infrastructure.circuit_breaker import CircuitBreakerError, payment_breaker

logger = logging.getLogger(__name__)


class PaymentServiceHTTP(PaymentService):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        HTTP client for the transaction/payment service.

        Args:
            base_url: Base URL of the payment service API
            timeout_seconds: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self._timeout, transport=self._transport)

    def _get(self, url: str) -> httpx.Response:
        with self._client() as client:
            return client.get(url)

    def _post(self, url: str, payload: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        with self._client() as client:
            return client.post(url, json=payload, headers=headers)

    async def can_receive_payment(self, community_id: str, author_id: str) -> bool:
        url = f"{self._base_url}/communities/{community_id}/payment_accounts/{author_id}"
        try:
            # pybreaker has no reliable async support; the sync call runs in a
            # worker thread so the breaker sees its failures.
            response = await asyncio.to_thread(payment_breaker.call, self._get, url)
        except CircuitBreakerError as exc:
            logger.error(
                "Payment service circuit breaker is open - service unavailable",
                extra={"community_id": community_id, "circuit_state": str(exc)},
            )
            return False
        except httpx.HTTPError as exc:
            logger.error(
                "Payment service HTTP error",
                exc_info=exc,
                extra={"community_id": community_id, "author_id": author_id},
            )
            return False

        if response.status_code == 404:
            return False
        if not response.is_success:
            logger.warning(
                "Payment account lookup failed",
                extra={"community_id": community_id, "http_status": response.status_code},
            )
            return False
        body = _json_body(response)
        return bool(body and body.get("can_receive_payment"))

    async def create_preauth_transaction(
        self,
        request: PreauthTransactionRequest,
        use_async: bool = False,
    ) -> TransactionResponse:
        """
        Create the transaction with the payment service, protected by the
        Circuit Breaker.

        Transport failures never raise; they come back as an unsuccessful
        TransactionResponse.
        """
        url = f"{self._base_url}/transactions"
        headers = {"X-Gateway-Async": "true" if use_async else "false"}
        payload = request.to_payload()

        try:
            response = await asyncio.to_thread(
                payment_breaker.call, self._post, url, payload, headers
            )
        except CircuitBreakerError as exc:
            logger.error(
                "Payment service circuit breaker is open - service unavailable",
                extra={"listing_id": request.listing_id, "circuit_state": str(exc)},
            )
            return TransactionResponse(
                success=False,
                error_code="CIRCUIT_OPEN",
                error_message="Payment service temporarily unavailable (circuit breaker open)",
            )
        except httpx.TimeoutException as exc:
            logger.warning(
                "Payment service request timeout",
                extra={"listing_id": request.listing_id, "timeout": self._timeout},
            )
            return TransactionResponse(success=False, error_code="TIMEOUT", error_message=str(exc))
        except httpx.HTTPError as exc:
            logger.error(
                "Payment service HTTP error",
                exc_info=exc,
                extra={"listing_id": request.listing_id},
            )
            return TransactionResponse(
                success=False, error_code="HTTP_ERROR", error_message=str(exc)
            )

        body = _json_body(response)
        if not response.is_success or not body or not body.get("success"):
            return TransactionResponse(
                success=False,
                error_code=(body or {}).get("error_code") or "NON_2XX",
                error_message=(body or {}).get("error_msg") or response.text,
            )

        data = body.get("data") or {}
        gateway_fields = data.get("gateway_fields") or {}
        return TransactionResponse(
            success=True,
            redirect_url=gateway_fields.get("redirect_url"),
            process_token=gateway_fields.get("process_token"),
            transaction_id=data.get("transaction_id"),
        )


def _json_body(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except json.JSONDecodeError:
        return None
    return body if isinstance(body, dict) else None
