from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from checkout.application.dtos.checkout_dto import CheckoutJson, CheckoutOutcome

FLASH_ERROR_COOKIE = "flash_error"


def redirect_with_flash(location: str, flash_error: str | None = None) -> RedirectResponse:
    response = RedirectResponse(url=location, status_code=status.HTTP_303_SEE_OTHER)
    if flash_error:
        response.set_cookie(FLASH_ERROR_COOKIE, flash_error, httponly=True, samesite="lax")
    return response


def render_outcome(outcome: CheckoutOutcome) -> Response:
    if isinstance(outcome, CheckoutJson):
        return JSONResponse(content=outcome.body)
    return redirect_with_flash(outcome.location, outcome.flash_error)
