import re

from checkout.domain.entities.listing import ListingSnapshot

_COUNTRY_CODE = re.compile(r"^[A-Z]{2}$")


def unit_label_from_listing(listing: ListingSnapshot) -> str | None:
    if not listing.unit_type:
        return None
    return listing.unit_tr_key or f"listings.unit_types.{listing.unit_type}"


def selector_label_from_listing(listing: ListingSnapshot) -> str | None:
    if not listing.unit_type:
        return None
    return listing.unit_selector_tr_key or f"listings.quantity.{listing.unit_type}"


def valid_country_code(country: str | None) -> str | None:
    """ISO 3166 alpha-2 code of the community, or None when not set/invalid."""
    if not country:
        return None
    code = country.strip().upper()
    return code if _COUNTRY_CODE.match(code) else None
