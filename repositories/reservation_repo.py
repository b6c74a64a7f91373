"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
All SQL queries related to the `reservations` table live here.
"""

from db.connection import query
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for reading and saving rows of the reservations table."""

    # ── READ ──────────────────────────────────────────────

    def get_for_customer(self, customer_id: int) -> list[Reservation]:
        """
        Fetch all reservations belonging to a customer.

        Returns:
            List of Reservation objects, latest start time first.
        """
        sql = """
            SELECT id,
                   customer_id AS "customerId",
                   num_guests AS "numGuests",
                   start_at AS "startAt",
                   notes
            FROM reservations
            WHERE customer_id = %s
            ORDER BY start_at DESC;
        """
        return [Reservation.from_row(r) for r in query(sql, [customer_id])]

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, reservation: Reservation) -> Reservation:
        """
        Insert the reservation if it has never been saved, otherwise update it.

        Returns:
            The same Reservation; a new one gets its `id` populated.
        """
        if not reservation.is_saved:
            sql = """
                INSERT INTO reservations (customer_id, start_at, num_guests, notes)
                VALUES (%s, %s, %s, %s)
                RETURNING id;
            """
            rows = query(sql, [
                reservation.customer_id, reservation.start_at,
                reservation.num_guests, reservation.notes,
            ])
            reservation.mark_saved(rows[0]["id"])
            logger.info(
                f"Added reservation #{reservation.id} for customer {reservation.customer_id}"
            )
        else:
            sql = """
                UPDATE reservations
                SET customer_id = %s, start_at = %s, num_guests = %s, notes = %s
                WHERE id = %s;
            """
            query(sql, [
                reservation.customer_id, reservation.start_at,
                reservation.num_guests, reservation.notes, reservation.id,
            ])
            logger.info(f"Updated reservation #{reservation.id}")
        return reservation
