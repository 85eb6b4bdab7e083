from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.api.deps import AsyncSessionLocal
from checkout.application.dtos.checkout_dto import RequestContext
from checkout.application.messages import LOGIN_REQUIRED_MESSAGE
from checkout.application.use_cases.guards import CheckoutGuards
from checkout.application.use_cases.initiate_transaction import InitiateTransactionUseCase
from checkout.application.use_cases.initiated_transaction import InitiatedTransactionUseCase
from checkout.config import Settings, get_settings
from checkout.infrastructure.db.queries.community_query_sql import CommunityQuerySQL
from checkout.infrastructure.db.queries.listing_query_sql import ListingQuerySQL
from checkout.infrastructure.db.queries.person_query_sql import PersonQuerySQL
from checkout.infrastructure.gateways.payment_service_http import PaymentServiceHTTP
from checkout.infrastructure.in_memory.community_query import InMemoryCommunityQuery
from checkout.infrastructure.in_memory.demo_data import seed_demo_data
from checkout.infrastructure.in_memory.listing_query import InMemoryListingQuery
from checkout.infrastructure.in_memory.payment_service import StubPaymentService
from checkout.infrastructure.in_memory.person_query import InMemoryPersonQuery

XHR_MARKER = "XMLHttpRequest"


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_bundle():
    bundle = {
        "listing_query": InMemoryListingQuery(),
        "person_query": InMemoryPersonQuery(),
        "community_query": InMemoryCommunityQuery(),
        "payment_service": StubPaymentService(),
    }
    # The queries are read-only, so in-memory mode starts from demo data
    seed_demo_data(**bundle)
    return bundle


def get_collaborators(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if settings.use_in_memory:
        return _in_memory_bundle()

    if not session:
        raise RuntimeError("DB session not available")
    if not settings.payment_service_base_url:
        raise RuntimeError("PAYMENT_SERVICE_BASE_URL is required outside in-memory mode")

    return {
        "listing_query": ListingQuerySQL(session),
        "person_query": PersonQuerySQL(session),
        "community_query": CommunityQuerySQL(session),
        "payment_service": PaymentServiceHTTP(
            base_url=settings.payment_service_base_url,
            timeout_seconds=settings.payment_service_timeout_seconds,
        ),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    collaborators=Depends(get_collaborators),
):
    guards = CheckoutGuards(
        listing_query=collaborators["listing_query"],
        person_query=collaborators["person_query"],
        payment_service=collaborators["payment_service"],
    )
    return {
        "initiate": InitiateTransactionUseCase(
            guards=guards,
            person_query=collaborators["person_query"],
        ),
        "initiated": InitiatedTransactionUseCase(
            guards=guards,
            payment_service=collaborators["payment_service"],
            success_url=settings.paypal_success_url,
            cancel_url=settings.paypal_cancel_url,
        ),
    }


async def get_request_context(
    community_id: str | None = Header(default=None, alias="X-Community-Id"),
    person_id: str | None = Header(default=None, alias="X-Person-Id"),
    requested_with: str | None = Header(default=None, alias="X-Requested-With"),
    collaborators=Depends(get_collaborators),
) -> RequestContext:
    """Resolves the tenant and the buyer the request is made for."""
    if not person_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=LOGIN_REQUIRED_MESSAGE)
    community = (
        await collaborators["community_query"].get(community_id) if community_id else None
    )
    if community is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Community not found")
    return RequestContext(
        community=community,
        current_user_id=person_id,
        is_xhr=requested_with == XHR_MARKER,
    )
