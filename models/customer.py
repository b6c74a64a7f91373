"""
models/customer.py
------------------
Domain model for restaurant customers.
"""

from typing import Optional

from errors import BadRequestError


class Customer:
    """
    A customer of the restaurant.

    Attributes:
        id: Database primary key (None until the customer is first saved).
        first_name: Required, never empty.
        middle_name: Optional.
        last_name: Required, never empty.
        phone: Free-form phone number.
        notes: Free-text notes.
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        middle_name: Optional[str] = None,
        phone: Optional[str] = None,
        notes: Optional[str] = "",
        id: Optional[int] = None,
    ):
        self._id: Optional[int] = None
        self.first_name = first_name
        self.middle_name = middle_name
        self.last_name = last_name
        self.phone = phone
        self.notes = notes
        if id is not None:
            self.mark_saved(id)

    @classmethod
    def from_row(cls, row: dict) -> "Customer":
        """Build a Customer from a row keyed by the aliased column names."""
        return cls(
            id=row["id"],
            first_name=row["firstName"],
            middle_name=row.get("middleName"),
            last_name=row["lastName"],
            phone=row.get("phone"),
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

    def mark_saved(self, customer_id: int) -> None:
        """Record the id assigned by storage. Only an unsaved customer can be marked."""
        if self.is_saved:
            raise RuntimeError(f"Customer is already saved as #{self._id}")
        self._id = customer_id

    # ── Validated fields ──────────────────────────────────

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, name: str) -> None:
        if not name:
            raise BadRequestError("First name is required")
        self._first_name = name

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, name: str) -> None:
        if not name:
            raise BadRequestError("Last name is required")
        self._last_name = name

    @property
    def notes(self) -> str:
        return self._notes

    @notes.setter
    def notes(self, notes: Optional[str]) -> None:
        self._notes = notes or ""

    @property
    def full_name(self) -> str:
        """
        "First Middle Last". An empty middle name is left out rather than
        rendered as "None" or a double space, giving "First Last".
        """
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    def __repr__(self) -> str:
        return f"<Customer #{self._id} {self.full_name}>"
