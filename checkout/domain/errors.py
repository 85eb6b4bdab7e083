"""Excepciones y códigos de error de dominio para el flujo de checkout."""

from enum import Enum


class ErrorCode(str, Enum):
    """Códigos simbólicos de error; el texto visible se resuelve en el catálogo de mensajes."""

    DELIVERY_METHOD_MISSING = "delivery_method_missing"
    DATES_MISSING = "dates_missing"
    END_CANT_BE_BEFORE_START = "end_cant_be_before_start"
    AGREEMENT_MISSING = "agreement_missing"
    LISTING_NOT_FOUND = "listing_not_found"
    NOT_AUTHORIZED_TO_VIEW = "not_authorized_to_view"
    CANNOT_MESSAGE_SELF = "cannot_message_self"
    LISTING_CLOSED = "listing_closed"
    PAYMENT_DETAILS_MISSING = "payment_details_missing"
    PAYMENT_GATEWAY_GENERIC_ERROR = "payment_gateway_generic_error"


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de acceso al anuncio ===


class ListingNotFoundError(DomainError):
    """El anuncio no existe en la comunidad actual."""

    def __init__(self, listing_id: str, community_id: str):
        super().__init__(
            message=f"Anuncio {listing_id} no encontrado en la comunidad {community_id}",
            code=ErrorCode.LISTING_NOT_FOUND,
        )
        self.listing_id = listing_id
        self.community_id = community_id


class GuardError(DomainError):
    """
    Una precondición del checkout no se cumple.

    Attributes:
        redirect_to: Ruta a la que se devuelve al comprador.
    """

    def __init__(self, message: str, code: ErrorCode, redirect_to: str):
        super().__init__(message=message, code=code)
        self.redirect_to = redirect_to


class ListingClosedError(GuardError):
    """El anuncio está cerrado y no acepta nuevas transacciones."""

    def __init__(self, listing_id: str, redirect_to: str):
        super().__init__(
            message=f"El anuncio {listing_id} está cerrado",
            code=ErrorCode.LISTING_CLOSED,
            redirect_to=redirect_to,
        )


class CannotMessageSelfError(GuardError):
    """El comprador es el autor del anuncio."""

    def __init__(self, person_id: str, redirect_to: str):
        super().__init__(
            message=f"La persona {person_id} no puede iniciar una transacción consigo misma",
            code=ErrorCode.CANNOT_MESSAGE_SELF,
            redirect_to=redirect_to,
        )


class NotAuthorizedToViewError(GuardError):
    """El anuncio no es visible para el comprador."""

    def __init__(self, listing_id: str, person_id: str, redirect_to: str):
        super().__init__(
            message=f"La persona {person_id} no puede ver el anuncio {listing_id}",
            code=ErrorCode.NOT_AUTHORIZED_TO_VIEW,
            redirect_to=redirect_to,
        )


class PaymentDetailsMissingError(GuardError):
    """El autor del anuncio no puede recibir pagos."""

    def __init__(self, author_id: str, redirect_to: str):
        super().__init__(
            message=f"El autor {author_id} no tiene datos de pago configurados",
            code=ErrorCode.PAYMENT_DETAILS_MISSING,
            redirect_to=redirect_to,
        )


# === Errores de entrada ===


class InvalidParamsError(DomainError):
    """Un parámetro de la petición no tiene un valor reconocible."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"Valor inválido para '{field}': {value!r}",
            code="INVALID_PARAMS",
        )
        self.field = field
        self.value = value


class InvalidDateRangeError(DomainError):
    """Rango de fechas inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class InvalidMoneyError(DomainError):
    """Monto monetario inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_MONEY")


# === Errores de programación ===


class UnknownErrorCodeError(DomainError):
    """Un código de error no tiene tratamiento en el paso actual."""

    def __init__(self, code: str):
        super().__init__(
            message=f"Código de error desconocido: {code}",
            code="UNKNOWN_ERROR_CODE",
        )
        self.unknown_code = code
