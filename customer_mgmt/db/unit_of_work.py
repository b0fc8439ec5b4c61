from __future__ import annotations

import logging

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.orm import Session

from customer_mgmt.core.exceptions import ConstraintViolationError, TransientStoreError
from customer_mgmt.core.flow_logging import flow_info

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    A bounded set of staged writes committed atomically as one transaction.

    Repositories never commit on their own. They stage inserts, updates and
    deletes on the wrapped session and the caller decides when to `commit()`.
    Several repositories sharing one UnitOfWork therefore commit together,
    which is how a customer and its primary address land in one transaction.

    Repositories call `flush()` before reads whose result depends on staged
    writes (active filters, primary-address siblings). Flushed rows stay
    inside the open transaction until commit or rollback.
    """

    def __init__(self, session: Session):
        self.session = session

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()

    @property
    def has_pending_changes(self) -> bool:
        return bool(self.session.new or self.session.dirty or self.session.deleted)

    def _write(self, action, event: str) -> None:
        try:
            action()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("%s_constraint_violation error=%s", event, e.orig)
            raise ConstraintViolationError(
                message=f"Write violates a store constraint: {e.orig}"
            ) from e
        except OperationalError as e:
            self.session.rollback()
            logger.warning("%s_store_unavailable error=%s", event, e.orig)
            raise TransientStoreError(message=f"Store unavailable: {e.orig}") from e
        except DBAPIError as e:
            self.session.rollback()
            if e.connection_invalidated:
                raise TransientStoreError(message=f"Store connection lost: {e.orig}") from e
            raise

    def flush(self) -> None:
        """
        Send staged writes to the open transaction without committing.

        Reads issued afterwards see them and new rows get their ids. A later
        rollback still discards everything.
        """
        if self.has_pending_changes:
            self._write(self.session.flush, "unit_of_work_flush")

    def commit(self) -> None:
        staged = (
            len(self.session.new),
            len(self.session.dirty),
            len(self.session.deleted),
        )
        self._write(self.session.commit, "unit_of_work")
        flow_info(
            logger,
            "unit_of_work_committed new=%s dirty=%s deleted=%s",
            *staged,
            category="repository",
        )

    def rollback(self) -> None:
        self.session.rollback()

    def close(self) -> None:
        self.session.close()
