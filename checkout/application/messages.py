"""User-facing messages keyed by error code."""

from checkout.domain.errors import ErrorCode

ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DELIVERY_METHOD_MISSING: "Please select a delivery method.",
    ErrorCode.DATES_MISSING: "Please choose the start and end dates of your booking.",
    ErrorCode.END_CANT_BE_BEFORE_START: "The end date can't be before the start date.",
    ErrorCode.AGREEMENT_MISSING: "You need to accept the transaction agreement.",
    ErrorCode.LISTING_NOT_FOUND: "The listing could not be found.",
    ErrorCode.NOT_AUTHORIZED_TO_VIEW: "You are not authorized to view this content.",
    ErrorCode.CANNOT_MESSAGE_SELF: "You cannot send a message to yourself.",
    ErrorCode.LISTING_CLOSED: "You cannot reply to a closed offer.",
    ErrorCode.PAYMENT_DETAILS_MISSING: (
        "The listing author has not added payment details yet, "
        "so the listing cannot be bought right now."
    ),
    ErrorCode.PAYMENT_GATEWAY_GENERIC_ERROR: (
        "An error occurred with the payment service. Please try again."
    ),
}

LOGIN_REQUIRED_MESSAGE = "You must log in to do a transaction."


def error_message(code: ErrorCode | str) -> str | None:
    try:
        return ERROR_MESSAGES.get(ErrorCode(code))
    except ValueError:
        return None
