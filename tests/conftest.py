"""
Shared fixtures.

`fake_db` replaces the repositories' `query` entrypoint with a recorder that
returns queued row sets, so repository logic can be exercised without a
PostgreSQL server.
"""

import logging

import pytest

# Keep repository INFO logs out of test output
logging.getLogger("repositories").setLevel(logging.WARNING)


class FakeQuery:
    """Callable stand-in for db.connection.query."""

    def __init__(self):
        self.calls: list[tuple[str, list]] = []
        self._results: list[list[dict]] = []

    def returns(self, *row_sets: list[dict]) -> "FakeQuery":
        self._results.extend(row_sets)
        return self

    def __call__(self, sql: str, params=()) -> list[dict]:
        self.calls.append((" ".join(sql.split()), list(params)))
        return self._results.pop(0) if self._results else []

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> list:
        return self.calls[-1][1]


@pytest.fixture
def fake_db(monkeypatch):
    fake = FakeQuery()
    monkeypatch.setattr("repositories.customer_repo.query", fake)
    monkeypatch.setattr("repositories.reservation_repo.query", fake)
    return fake
