"""Value Object DeliveryMethod - cómo llega el artículo al comprador."""

from enum import Enum


class DeliveryMethod(str, Enum):
    """
    Métodos de entrega soportados.

    La ausencia de método (anuncio sin envío ni recogida) se representa con None.
    """

    SHIPPING = "shipping"
    PICKUP = "pickup"

    @classmethod
    def parse(cls, value: str | None) -> "DeliveryMethod | None":
        """
        Convierte el valor crudo de la petición.

        Raises:
            ValueError: si el valor no vacío no es un método conocido.
        """
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        return cls(value)
