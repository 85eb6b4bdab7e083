from uuid import uuid4

from checkout.application.interfaces.payment_service import PaymentService, TransactionResponse
from checkout.domain.entities.transaction import PreauthTransactionRequest


class StubPaymentService(PaymentService):
    """
    Records every request and simulates the gateway answer.

    Authors listed in `payment_accounts` as (community_id, author_id) can
    receive payments. Set `fail_with` to simulate a gateway failure.
    """

    def __init__(
        self,
        payment_accounts: set[tuple[str, str]] | None = None,
        redirect_base_url: str = "https://www.sandbox.paypal.com/checkoutnow",
    ) -> None:
        self.payment_accounts = payment_accounts if payment_accounts is not None else set()
        self.redirect_base_url = redirect_base_url
        self.fail_with: str | None = None
        self.created: list[tuple[PreauthTransactionRequest, bool]] = []

    async def can_receive_payment(self, community_id: str, author_id: str) -> bool:
        return (community_id, author_id) in self.payment_accounts

    async def create_preauth_transaction(
        self,
        request: PreauthTransactionRequest,
        use_async: bool = False,
    ) -> TransactionResponse:
        self.created.append((request, use_async))
        if self.fail_with:
            return TransactionResponse(
                success=False, error_code="GATEWAY_ERROR", error_message=self.fail_with
            )

        transaction_id = f"tx_{uuid4().hex[:12]}"
        if use_async:
            # Async gateways answer with a token to poll instead of a redirect
            return TransactionResponse(
                success=True,
                process_token=uuid4().hex,
                transaction_id=transaction_id,
            )
        return TransactionResponse(
            success=True,
            redirect_url=f"{self.redirect_base_url}?token=EC-{uuid4().hex[:17].upper()}",
            transaction_id=transaction_id,
        )
