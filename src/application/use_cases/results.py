"""Result type and shared error handling for ledger use cases."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, TypeVar
import uuid

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.ledger_store import LedgerSession, LedgerStorePort
from src.domain.errors import FinanceError, ValidationError
from src.infrastructure.logging.logger import get_app_logger

T = TypeVar("T")


def new_record_id() -> str:
    """Return a fresh text id for a ledger record."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a mutation, ready to show in the UI.

    Attributes:
        success: Whether the unit of work committed.
        message: Human-readable outcome.
        record_id: Id of the created or updated record, when relevant.
        errors: Individual validation or storage messages.
    """

    success: bool
    message: str
    record_id: str | None = None
    errors: list[str] = field(default_factory=list)


class LedgerMutationUseCase:
    """Base class for use cases that write through the ledger store.

    Subclasses call ``_run`` with a callable doing the work inside one unit
    of work. Domain errors become failed results carrying their message;
    storage errors are logged and reported with ``failure_message``. Nothing
    is retried.
    """

    failure_message = "The operation could not be completed."

    def __init__(
        self,
        store: LedgerStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Ledger store opening units of work.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current time.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def _run(
        self,
        action: Callable[[], str | None],
        success_message: str,
    ) -> OperationResult:
        name = type(self).__name__
        try:
            record_id = action()
        except ValidationError as exc:
            self._logger.warning(f"{name} rejected: {exc}")
            return OperationResult(
                success=False, message=str(exc), errors=exc.messages
            )
        except FinanceError as exc:
            self._logger.warning(f"{name} rejected: {exc}")
            return OperationResult(
                success=False, message=str(exc), errors=[str(exc)]
            )
        except SQLAlchemyError as exc:
            self._logger.error(f"{name} failed: {exc}")
            return OperationResult(
                success=False,
                message=self.failure_message,
                errors=[str(exc)],
            )
        self._logger.info(f"{name}: {success_message} (id={record_id})")
        return OperationResult(
            success=True, message=success_message, record_id=record_id
        )


class LedgerQueryUseCase:
    """Base class for read-only use cases.

    Storage errors are logged and replaced by an empty result.
    """

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def _read(
        self,
        reader: Callable[[LedgerSession], T],
        empty: Callable[[], T],
    ) -> T:
        try:
            with self._store.unit_of_work() as session:
                return reader(session)
        except SQLAlchemyError as exc:
            self._logger.error(f"{type(self).__name__} failed: {exc}")
            return empty()


__all__ = [
    "OperationResult",
    "LedgerMutationUseCase",
    "LedgerQueryUseCase",
    "new_record_id",
]
