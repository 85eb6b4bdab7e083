"""Value Objects de totales del pedido: artículos, envío y total."""

from dataclasses import dataclass

from checkout.domain.value_objects.money import Money


@dataclass(frozen=True)
class ItemTotal:
    """Precio unitario por cantidad (unidades o días)."""

    unit_price: Money
    quantity: int

    @property
    def total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class ShippingTotal:
    """
    Costo de envío escalonado.

    La primera unidad está cubierta por `initial`; cada unidad adicional
    cuesta `additional`. Si el anuncio no define alguno de los dos, vale cero.

    Attributes:
        initial: Precio de envío de la primera unidad.
        additional: Precio de envío de cada unidad adicional.
        quantity: Unidades (o días) enviadas, >= 1.
        currency_code: Moneda usada cuando falta algún precio.
    """

    initial: Money | None
    additional: Money | None
    quantity: int
    currency_code: str = "USD"

    def __post_init__(self) -> None:
        if self.initial is None:
            object.__setattr__(self, "initial", Money.zero(self.currency_code))
        if self.additional is None:
            object.__setattr__(self, "additional", Money.zero(self.currency_code))

    @property
    def total(self) -> Money:
        return self.initial + self.additional * (self.quantity - 1)

    @classmethod
    def none(cls, currency_code: str, quantity: int = 1) -> "ShippingTotal":
        """Envío sin costo (entrega por recogida o sin entrega)."""
        return cls(initial=None, additional=None, quantity=quantity, currency_code=currency_code)


@dataclass(frozen=True)
class OrderTotal:
    item_total: ItemTotal
    shipping_total: ShippingTotal

    @property
    def total(self) -> Money:
        return self.item_total.total + self.shipping_total.total
