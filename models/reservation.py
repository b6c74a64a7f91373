"""
models/reservation.py
---------------------
Domain model for table reservations.
"""

from datetime import datetime
from typing import Any, Optional

from errors import BadRequestError, ForbiddenError
from utils.time import from_now, to_datetime

# Marks a customer_id that has never been assigned (None and 0 are values).
_UNASSIGNED = object()


class Reservation:
    """
    A reservation for a party.

    Attributes:
        id: Database primary key (None until the reservation is first saved).
        customer_id: Owning customer; can be assigned only once.
        num_guests: Party size, at least 1.
        start_at: When the party arrives.
        notes: Free-text notes.
    """

    def __init__(
        self,
        num_guests: int,
        start_at: Any,
        customer_id: Optional[int] = None,
        notes: Optional[str] = "",
        id: Optional[int] = None,
    ):
        self._id: Optional[int] = None
        self._customer_id: Any = _UNASSIGNED
        self.customer_id = customer_id
        self.num_guests = num_guests
        self.start_at = start_at
        self.notes = notes
        if id is not None:
            self.mark_saved(id)

    @classmethod
    def from_row(cls, row: dict) -> "Reservation":
        """Build a Reservation from a row keyed by the aliased column names."""
        return cls(
            id=row["id"],
            customer_id=row["customerId"],
            num_guests=row["numGuests"],
            start_at=row["startAt"],
            notes=row.get("notes") or "",
        )

    # ── Identity / lifecycle ──────────────────────────────

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def is_saved(self) -> bool:
        """True once storage has assigned an id."""
        return self._id is not None

    def mark_saved(self, reservation_id: int) -> None:
        """Record the id assigned by storage. Only an unsaved reservation can be marked."""
        if self.is_saved:
            raise RuntimeError(f"Reservation is already saved as #{self._id}")
        self._id = reservation_id

    # ── Validated fields ──────────────────────────────────

    @property
    def customer_id(self) -> Optional[int]:
        if self._customer_id is _UNASSIGNED:
            return None
        return self._customer_id

    @customer_id.setter
    def customer_id(self, customer_id: Optional[int]) -> None:
        if self._customer_id is not _UNASSIGNED:
            raise ForbiddenError(f"Cannot change customerId: {self._customer_id}")
        if customer_id is None:
            return
        self._customer_id = customer_id

    @property
    def num_guests(self) -> int:
        return self._num_guests

    @num_guests.setter
    def num_guests(self, num_guests: int) -> None:
        if isinstance(num_guests, bool):
            raise BadRequestError("# of Guests must be at least 1")
        try:
            count = int(num_guests)
        except (TypeError, ValueError, OverflowError):
            raise BadRequestError("# of Guests must be at least 1") from None
        if not isinstance(num_guests, str) and count != num_guests:
            raise BadRequestError("# of Guests must be a whole number")
        if count < 1:
            raise BadRequestError("# of Guests must be at least 1")
        self._num_guests = count

    @property
    def start_at(self) -> datetime:
        return self._start_at

    @start_at.setter
    def start_at(self, value: Any) -> None:
        try:
            self._start_at = to_datetime(value)
        except ValueError:
            raise BadRequestError("Invalid date") from None

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, notes: Optional[str]) -> None:
        self._notes = notes or ""

    def formatted_start_at(self) -> str:
        """Start time relative to now, e.g. 'in 3 days'."""
        return from_now(self.start_at)

    def __repr__(self) -> str:
        return (
            f"<Reservation #{self._id} customer={self.customer_id} "
            f"guests={self._num_guests} at={self._start_at:%Y-%m-%d %H:%M}>"
        )
