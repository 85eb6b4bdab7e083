from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from checkout.api.dependencies import get_request_context, get_use_cases
from checkout.api.responses import render_outcome
from checkout.api.schemas.checkout import InitiatedOrderForm, PreviewResponse
from checkout.application.dtos.checkout_dto import PreviewViewModel, RequestContext

router = APIRouter()


@router.get(
    "/listings/{listing_id}/initiate",
    response_model=PreviewResponse,
    responses={303: {"description": "Validation failed, back to the listing"}},
)
async def initiate(
    listing_id: str,
    request: Request,
    context: RequestContext = Depends(get_request_context),
    use_cases=Depends(get_use_cases),
) -> PreviewResponse | Response:
    """Preview step: totals and form defaults. Query params: delivery, start_on, end_on, quantity."""
    outcome = await use_cases["initiate"].execute(
        listing_id=listing_id,
        raw_params=dict(request.query_params),
        context=context,
    )
    if isinstance(outcome, PreviewViewModel):
        return PreviewResponse.model_validate(outcome)
    return render_outcome(outcome)


@router.post(
    "/listings/{listing_id}/initiated",
    response_model=None,
    responses={
        200: {"description": "JSON for XHR callers: redirect_url, op_status_url or error_msg"},
        303: {"description": "Redirect to the gateway, or back with a flash error"},
    },
)
async def initiated(
    listing_id: str,
    payload: InitiatedOrderForm,
    context: RequestContext = Depends(get_request_context),
    use_cases=Depends(get_use_cases),
) -> Response:
    outcome = await use_cases["initiated"].execute(
        listing_id=listing_id,
        raw_params=payload.model_dump(),
        context=context,
    )
    return render_outcome(outcome)
