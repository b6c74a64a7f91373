"""
repositories/customer_repo.py
------------------------------
Data access layer for customers.
All SQL queries related to the `customers` table live here, including
name search and the "best customers" ranking.
"""

from typing import Optional

from config import BEST_CUSTOMERS_LIMIT
from db.connection import query
from errors import NotFoundError
from models.customer import Customer
from models.reservation import Reservation
from repositories.reservation_repo import ReservationRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = """
    c.id,
    c.first_name AS "firstName",
    c.middle_name AS "middleName",
    c.last_name AS "lastName",
    c.phone,
    c.notes
"""


class CustomerRepository:
    """Repository for reading, searching and saving rows of the customers table."""

    def __init__(self, reservations: Optional[ReservationRepository] = None):
        self.reservations = reservations or ReservationRepository()

    # ── READ ──────────────────────────────────────────────

    def all(self) -> list[Customer]:
        """
        Fetch every customer.

        Returns:
            List of Customer objects ordered by last name, then first name.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM customers AS c
            ORDER BY c.last_name, c.first_name;
        """
        return [Customer.from_row(r) for r in query(sql)]

    def get(self, customer_id: int) -> Customer:
        """
        Fetch a single customer by ID.

        Raises:
            NotFoundError: If no customer has this id.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM customers AS c
            WHERE c.id = %s;
        """
        rows = query(sql, [customer_id])
        if not rows:
            raise NotFoundError(f"No such customer: {customer_id}")
        return Customer.from_row(rows[0])

    def search_by_name(self, term: str) -> list[Customer]:
        """
        Find customers whose name contains `term`, ignoring case.

        The term is matched as a plain substring against both
        "first middle last" and "first last", so customers without a middle
        name are found too. An empty term matches everyone.

        Returns:
            List of Customer objects ordered by last name, then first name.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM customers AS c
            WHERE CONCAT(c.first_name, ' ', c.middle_name, ' ', c.last_name) ILIKE %s
               OR CONCAT(c.first_name, ' ', c.last_name) ILIKE %s
            ORDER BY c.last_name, c.first_name;
        """
        pattern = f"%{term}%"
        return [Customer.from_row(r) for r in query(sql, [pattern, pattern])]

    def get_best_customers(self, limit: int = BEST_CUSTOMERS_LIMIT) -> list[Customer]:
        """
        Rank customers by how many reservations they have made.

        Customers without reservations never appear. Ties are ordered by
        first name, then last name.

        Returns:
            At most `limit` Customer objects, busiest first.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM customers AS c
            INNER JOIN reservations AS r ON c.id = r.customer_id
            GROUP BY c.id
            ORDER BY COUNT(r.id) DESC, c.first_name, c.last_name
            LIMIT %s;
        """
        return [Customer.from_row(r) for r in query(sql, [limit])]

    def get_reservations(self, customer: Customer) -> list[Reservation]:
        """All reservations of `customer`, latest start time first."""
        return self.reservations.get_for_customer(customer.id)

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, customer: Customer) -> Customer:
        """
        Insert the customer if it has never been saved, otherwise update it.

        Returns:
            The same Customer; a new one gets its `id` populated.
        """
        if not customer.is_saved:
            sql = """
                INSERT INTO customers (first_name, middle_name, last_name, phone, notes)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING id;
            """
            rows = query(sql, [
                customer.first_name, customer.middle_name, customer.last_name,
                customer.phone, customer.notes,
            ])
            customer.mark_saved(rows[0]["id"])
            logger.info(f"Added customer #{customer.id} ({customer.full_name})")
        else:
            sql = """
                UPDATE customers
                SET first_name = %s, middle_name = %s, last_name = %s, phone = %s, notes = %s
                WHERE id = %s;
            """
            query(sql, [
                customer.first_name, customer.middle_name, customer.last_name,
                customer.phone, customer.notes, customer.id,
            ])
            logger.info(f"Updated customer #{customer.id}")
        return customer
