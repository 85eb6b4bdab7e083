from abc import ABC, abstractmethod
from dataclasses import dataclass

from checkout.domain.entities.transaction import PreauthTransactionRequest


@dataclass
class TransactionResponse:
    success: bool
    redirect_url: str | None = None
    process_token: str | None = None
    transaction_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None


class PaymentService(ABC):
    @abstractmethod
    async def can_receive_payment(self, community_id: str, author_id: str) -> bool:
        """
        Whether the listing author has connected a payout account.
        """
        pass

    @abstractmethod
    async def create_preauth_transaction(
        self,
        request: PreauthTransactionRequest,
        use_async: bool = False,
    ) -> TransactionResponse:
        """
        Creates the transaction and starts the gateway preauthorization.

        With use_async the gateway may answer with a process token to poll
        instead of a redirect URL.
        """
        pass
