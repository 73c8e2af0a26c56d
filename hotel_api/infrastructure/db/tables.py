from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    func,
)

metadata = MetaData()

hotels = Table(
    "hotels",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
)

rooms = Table(
    "rooms",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("beds", Integer, nullable=False),
    Column("pets_allowed", Boolean, nullable=False, default=False),
    Column("price_in_cents", Integer, nullable=False),
    Column("hotel_id", Integer, ForeignKey("hotels.id"), nullable=False),
)

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False),
    Column("billing_street", String(255), nullable=False),
    Column("billing_street_add", String(255), nullable=False, default=""),
    Column("billing_city", String(150), nullable=False),
    Column("billing_postcode", String(32), nullable=False),
    Column("billing_country", String(64), nullable=False),
)

orders = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", Integer, ForeignKey("customers.id"), nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
)

order_items = Table(
    "order_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("order_id", Integer, ForeignKey("orders.id"), nullable=False),
    Column("room_id", Integer, ForeignKey("rooms.id"), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
)

# One row per order; the unique constraint is what serializes concurrent
# payment handle creation.
order_payments = Table(
    "order_payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("order_id", Integer, ForeignKey("orders.id"), nullable=False, unique=True),
    Column("stripe_intent_id", String(255), nullable=False),
)
