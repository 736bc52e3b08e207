"""Use cases listing and resolving reminders."""

from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
)
from src.domain.constants import REMINDER_RESOLVED
from src.domain.errors import RecordNotFoundError
from src.domain.models import Reminder


class ListRemindersUseCase(LedgerQueryUseCase):
    """Return reminders ordered by due date, optionally by status."""

    def execute(
        self, user_id: str, status: str | None = None
    ) -> list[Reminder]:
        return self._read(
            lambda session: session.list_reminders(user_id, status=status),
            list,
        )


class ResolveReminderUseCase(LedgerMutationUseCase):
    """Mark a reminder as resolved."""

    failure_message = "Could not update the reminder."

    def execute(self, user_id: str, reminder_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                if session.get_reminder(user_id, reminder_id) is None:
                    raise RecordNotFoundError("Reminder", reminder_id)
                session.set_reminder_status(
                    user_id, reminder_id, REMINDER_RESOLVED, self._clock()
                )
                return reminder_id

        return self._run(action, "Reminder resolved.")


__all__ = ["ListRemindersUseCase", "ResolveReminderUseCase"]
