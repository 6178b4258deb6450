"""
SQL State Store - durable review state over SQLAlchemy.

Every write commits immediately so state survives process restarts.
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from structlog import get_logger

from review_kit.config import DEFAULT_SUITE_NAME
from review_kit.db.models import ReviewDefault
from review_kit.db.session import get_session_factory, init_db
from review_kit.exceptions import StateStoreError
from review_kit.stores.base import ReviewStateStore, as_utc

logger = get_logger(__name__)


class SQLStateStore(ReviewStateStore):
    """
    Store backed by the review_defaults table.

    Usage:
        init_db()
        store = SQLStateStore(suite_name="com.example.notes.reviews")
        store.set_integer("reviewCountThreshold", 3)
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session] | None = None,
        suite_name: str = DEFAULT_SUITE_NAME,
    ) -> None:
        super().__init__(suite_name)
        self._session_factory = session_factory or get_session_factory()

    def _find(self, session: Session, key: str) -> ReviewDefault | None:
        stmt = select(ReviewDefault).where(
            ReviewDefault.suite_name == self.suite_name,
            ReviewDefault.key == key,
        )
        return session.execute(stmt).scalar_one_or_none()

    def _read(self, key: str) -> ReviewDefault | None:
        try:
            with self._session_factory() as session:
                return self._find(session, key)
        except SQLAlchemyError as e:
            logger.error("review_state_read_failed", suite=self.suite_name, key=key, error=str(e))
            raise StateStoreError(key, str(e)) from e

    def _write(
        self,
        key: str,
        integer_value: int | None = None,
        date_value: datetime | None = None,
        string_value: str | None = None,
    ) -> None:
        try:
            with self._session_factory() as session:
                row = self._find(session, key)
                if row is None:
                    row = ReviewDefault(suite_name=self.suite_name, key=key)
                    session.add(row)
                row.integer_value = integer_value
                row.date_value = date_value
                row.string_value = string_value
                session.commit()
        except SQLAlchemyError as e:
            logger.error("review_state_write_failed", suite=self.suite_name, key=key, error=str(e))
            raise StateStoreError(key, str(e)) from e

        logger.debug("review_state_written", suite=self.suite_name, key=key)

    def get_integer(self, key: str) -> int:
        row = self._read(key)
        if row is None or row.integer_value is None:
            return 0
        return row.integer_value

    def set_integer(self, key: str, value: int) -> None:
        self._write(key, integer_value=value)

    def get_date(self, key: str) -> datetime | None:
        row = self._read(key)
        if row is None or row.date_value is None:
            return None
        # SQLite drops tzinfo; values are always written as UTC
        return as_utc(row.date_value)

    def set_date(self, key: str, value: datetime) -> None:
        self._write(key, date_value=as_utc(value))

    def get_string(self, key: str) -> str | None:
        row = self._read(key)
        if row is None:
            return None
        return row.string_value

    def set_string(self, key: str, value: str) -> None:
        self._write(key, string_value=value)


def default_sql_store(suite_name: str) -> SQLStateStore:
    """Durable store for the configured database, creating tables on first use."""
    init_db()
    return SQLStateStore(suite_name=suite_name)
