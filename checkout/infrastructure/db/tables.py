from sqlalchemy import Boolean, Column, DateTime, MetaData, Numeric, String, Table

metadata = MetaData()

communities = Table(
    "communities",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name_display_type", String(32), nullable=False, default="first_name_with_initial"),
    Column("country", String(2)),
    Column("transaction_agreement_in_use", Boolean, nullable=False, default=False),
    Column("payment_gateway", String(32)),
    Column("wide_logo_url", String(500)),
    Column("logo_updated_at", DateTime),
)

listings = Table(
    "listings",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("community_id", String(36), nullable=False, index=True),
    Column("author_id", String(36), nullable=False),
    Column("title", String(255), nullable=False),
    Column("price", Numeric(12, 2), nullable=False),
    Column("currency", String(3), nullable=False),
    Column("unit_type", String(32)),
    Column("unit_tr_key", String(64)),
    Column("unit_selector_tr_key", String(64)),
    Column("action_button_tr_key", String(64)),
    Column("shipping_price", Numeric(12, 2)),
    Column("shipping_price_additional", Numeric(12, 2)),
    Column("require_shipping_address", Boolean, nullable=False, default=False),
    Column("pickup_enabled", Boolean, nullable=False, default=False),
    Column("open", Boolean, nullable=False, default=True),
    Column("privacy", String(16), nullable=False, default="public"),
)

people = Table(
    "people",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("username", String(64), nullable=False, unique=True),
    Column("given_name", String(255)),
    Column("family_name", String(255)),
)

community_memberships = Table(
    "community_memberships",
    metadata,
    Column("person_id", String(36), primary_key=True),
    Column("community_id", String(36), primary_key=True),
    Column("status", String(32), nullable=False, default="accepted"),
)
