"""
db/init_db.py
-------------
Creates the customers and reservations tables if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Customers: people who book tables at the restaurant
CREATE TABLE IF NOT EXISTS customers (
    id              SERIAL PRIMARY KEY,
    first_name      TEXT NOT NULL,
    middle_name     TEXT,
    last_name       TEXT NOT NULL,
    phone           TEXT,
    notes           TEXT NOT NULL DEFAULT ''
);

-- Reservations: one row per booked party
CREATE TABLE IF NOT EXISTS reservations (
    id              SERIAL PRIMARY KEY,
    customer_id     INTEGER NOT NULL REFERENCES customers(id) ON DELETE CASCADE,
    start_at        TIMESTAMP NOT NULL,
    num_guests      INTEGER NOT NULL CHECK (num_guests >= 1),
    notes           TEXT NOT NULL DEFAULT ''
);

CREATE INDEX IF NOT EXISTS idx_reservations_customer ON reservations(customer_id);
"""


def create_tables() -> None:
    """Create all tables. Safe to call repeatedly."""
    try:
        with connection() as conn, conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise
    logger.info("Database schema is up to date.")


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
