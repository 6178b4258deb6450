"""
In-memory State Store.

Suitable for tests and for hosts that persist defaults themselves.
"""

from datetime import datetime
from typing import Any

from review_kit.config import DEFAULT_SUITE_NAME
from review_kit.stores.base import ReviewStateStore, as_utc


class InMemoryStateStore(ReviewStateStore):
    """
    Dict-backed store.

    Pass the same ``backing`` dict to several instances to share one
    process-wide set of defaults; entries are keyed by (suite_name, key).
    """

    def __init__(
        self,
        suite_name: str = DEFAULT_SUITE_NAME,
        backing: dict[tuple[str, str], Any] | None = None,
    ) -> None:
        super().__init__(suite_name)
        self._values: dict[tuple[str, str], Any] = backing if backing is not None else {}

    def _get(self, key: str, kind: type) -> Any:
        value = self._values.get((self.suite_name, key))
        if isinstance(value, kind) and not (kind is int and isinstance(value, bool)):
            return value
        return None

    def _set(self, key: str, value: Any) -> None:
        self._values[(self.suite_name, key)] = value

    def get_integer(self, key: str) -> int:
        value = self._get(key, int)
        return value if value is not None else 0

    def set_integer(self, key: str, value: int) -> None:
        self._set(key, value)

    def get_date(self, key: str) -> datetime | None:
        value = self._get(key, datetime)
        return as_utc(value) if value is not None else None

    def set_date(self, key: str, value: datetime) -> None:
        self._set(key, as_utc(value))

    def get_string(self, key: str) -> str | None:
        return self._get(key, str)

    def set_string(self, key: str, value: str) -> None:
        self._set(key, value)

    def __len__(self) -> int:
        return sum(1 for suite, _ in self._values if suite == self.suite_name)
