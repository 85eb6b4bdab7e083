"""Value Object BookingPeriod - rango de días reservados de un anuncio."""

from dataclasses import dataclass
from datetime import date

from checkout.domain.errors import InvalidDateRangeError


@dataclass(frozen=True)
class BookingPeriod:
    """
    Value Object inmutable que representa un rango de días de reserva.

    Ambos extremos son inclusivos: una reserva de un solo día tiene
    start_on == end_on.

    Attributes:
        start_on: Primer día reservado.
        end_on: Último día reservado.
    """

    start_on: date
    end_on: date

    def __post_init__(self) -> None:
        if self.start_on is None or self.end_on is None:
            raise InvalidDateRangeError("start_on y end_on son obligatorios")
        if self.start_on > self.end_on:
            raise InvalidDateRangeError(
                f"start_on no puede ser posterior a end_on: {self.start_on} > {self.end_on}"
            )

    @property
    def days(self) -> int:
        """
        Calcula los días reservados.

        Regla de negocio: se cuentan ambos extremos.
        Ejemplo: 2024-01-01 -> 2024-01-03 = 3 días.
        """
        return max(1, (self.end_on - self.start_on).days + 1)

    def contains(self, day: date) -> bool:
        """Verifica si un día está dentro del rango."""
        return self.start_on <= day <= self.end_on

    def __str__(self) -> str:
        return f"{self.start_on.isoformat()} -> {self.end_on.isoformat()}"
