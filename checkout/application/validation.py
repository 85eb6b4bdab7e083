"""
Business rules for starting a transaction.

Each rule is a pure function over normalized params returning a Success or
an Error. The preview and commit steps chain the rules with run_chain, so
only the first violated rule is reported.
"""

from functools import partial

from checkout.application.normalization import TransactionParams
from checkout.application.result import Error, Result, Success, run_chain
from checkout.domain.errors import ErrorCode
from checkout.domain.value_objects.delivery_method import DeliveryMethod


def validate_delivery_method(
    params: TransactionParams,
    shipping_enabled: bool,
    pickup_enabled: bool,
) -> Result:
    delivery = params.delivery

    if delivery is DeliveryMethod.SHIPPING and shipping_enabled:
        return Success(DeliveryMethod.SHIPPING)
    if delivery is DeliveryMethod.PICKUP and pickup_enabled:
        return Success(DeliveryMethod.PICKUP)
    if delivery is None and not shipping_enabled and not pickup_enabled:
        return Success(None)
    return Error(ErrorCode.DELIVERY_METHOD_MISSING)


def validate_booking(params: TransactionParams, is_booking: bool) -> Result:
    if not is_booking:
        return Success()

    if params.start_on is None or params.end_on is None:
        return Error(ErrorCode.DATES_MISSING)
    if params.start_on > params.end_on:
        return Error(ErrorCode.END_CANT_BE_BEFORE_START)
    return Success()


def validate_transaction_agreement(
    params: TransactionParams,
    transaction_agreement_in_use: bool,
) -> Result:
    if transaction_agreement_in_use and not params.contract_agreed:
        return Error(ErrorCode.AGREEMENT_MISSING)
    return Success()


def validate_initiate_params(
    params: TransactionParams,
    is_booking: bool,
    shipping_enabled: bool,
    pickup_enabled: bool,
) -> Result:
    return run_chain(
        [
            partial(
                validate_delivery_method,
                params,
                shipping_enabled=shipping_enabled,
                pickup_enabled=pickup_enabled,
            ),
            partial(validate_booking, params, is_booking=is_booking),
        ]
    )


def validate_initiated_params(
    params: TransactionParams,
    is_booking: bool,
    shipping_enabled: bool,
    pickup_enabled: bool,
    transaction_agreement_in_use: bool,
) -> Result:
    # The agreement is only checked on commit: the preview is where the
    # buyer reads and accepts it.
    return run_chain(
        [
            partial(
                validate_delivery_method,
                params,
                shipping_enabled=shipping_enabled,
                pickup_enabled=pickup_enabled,
            ),
            partial(validate_booking, params, is_booking=is_booking),
            partial(
                validate_transaction_agreement,
                params,
                transaction_agreement_in_use=transaction_agreement_in_use,
            ),
        ]
    )
