"""Entidad PersonSnapshot - miembro de una comunidad."""

from dataclasses import dataclass

from checkout.domain.constants import (
    NAME_DISPLAY_FIRST_NAME_ONLY,
    NAME_DISPLAY_FULL_NAME,
)


@dataclass(frozen=True)
class PersonSnapshot:
    """Persona vista desde una comunidad concreta."""

    id: str
    community_id: str
    username: str
    given_name: str | None = None
    family_name: str | None = None

    def display_name(self, name_display_type: str | None = None) -> str:
        """
        Nombre a mostrar según la configuración de la comunidad.

        Sin nombre de pila se usa el username.
        """
        if not self.given_name:
            return self.username
        if name_display_type == NAME_DISPLAY_FIRST_NAME_ONLY or not self.family_name:
            return self.given_name
        if name_display_type == NAME_DISPLAY_FULL_NAME:
            return f"{self.given_name} {self.family_name}"
        return f"{self.given_name} {self.family_name[0]}"
