"""Tests for administrative payments and reminders."""

from datetime import date
from decimal import Decimal

from src.application.use_cases import (
    DeleteAdminPaymentUseCase,
    ListAdminPaymentsUseCase,
    ListRemindersUseCase,
    ResolveReminderUseCase,
    SaveAdminPaymentUseCase,
)
from src.domain.models import AdminPaymentDraft

USER_ID = "user-1"


def _draft(**overrides) -> AdminPaymentDraft:
    values = {
        "concept_name": "Internet",
        "category": "Servicios Básicos",
        "provider_name": "Netlife",
        "payment_amount": Decimal("35"),
        "payment_frequency": "Mensual",
        "contract_number": "CN-001",
        "payment_due_date": date(2024, 3, 20),
    }
    values.update(overrides)
    return AdminPaymentDraft(**values)


def test_save_admin_payment_creates_reminder(store, logger, clock) -> None:
    """A due date produces one pending reminder keyed by the payment."""
    result = SaveAdminPaymentUseCase(
        store, logger=logger, clock=clock
    ).execute(USER_ID, _draft())

    assert result.success is True
    (reminder,) = ListRemindersUseCase(store).execute(USER_ID)
    assert reminder.admin_payment_id == result.record_id
    assert reminder.status == "pending"
    assert reminder.message == (
        "Payment reminder: Internet is due on 2024-03-20."
    )


def test_edit_without_due_date_removes_reminder(
    store, logger, clock
) -> None:
    """Clearing the due date removes the reminder."""
    use_case = SaveAdminPaymentUseCase(store, logger=logger, clock=clock)
    created = use_case.execute(USER_ID, _draft())

    result = use_case.execute(
        USER_ID,
        _draft(payment_due_date=None),
        payment_id=created.record_id,
    )

    assert result.success is True
    assert ListRemindersUseCase(store).execute(USER_ID) == []
    (payment,) = ListAdminPaymentsUseCase(store).execute(USER_ID)
    assert payment.payment_due_date is None


def test_delete_admin_payment_removes_reminder(store, logger, clock) -> None:
    """Deleting a payment deletes its reminder."""
    created = SaveAdminPaymentUseCase(
        store, logger=logger, clock=clock
    ).execute(USER_ID, _draft())

    result = DeleteAdminPaymentUseCase(store, logger=logger).execute(
        USER_ID, created.record_id
    )

    assert result.success is True
    assert ListAdminPaymentsUseCase(store).execute(USER_ID) == []
    assert ListRemindersUseCase(store).execute(USER_ID) == []


def test_resolve_reminder_moves_it_to_resolved(store, logger, clock) -> None:
    """Resolved reminders leave the pending list."""
    created = SaveAdminPaymentUseCase(
        store, logger=logger, clock=clock
    ).execute(USER_ID, _draft())

    result = ResolveReminderUseCase(
        store, logger=logger, clock=clock
    ).execute(USER_ID, created.record_id)

    assert result.success is True
    listing = ListRemindersUseCase(store)
    assert listing.execute(USER_ID, status="pending") == []
    (resolved,) = listing.execute(USER_ID, status="resolved")
    assert resolved.resolved_at == clock()


def test_resolve_unknown_reminder_fails(store, logger) -> None:
    """Unknown reminders are reported as not found."""
    result = ResolveReminderUseCase(store, logger=logger).execute(
        USER_ID, "nope"
    )

    assert result.success is False


def test_list_filters_by_category_and_search(store, logger, clock) -> None:
    """Category and free-text filters combine."""
    use_case = SaveAdminPaymentUseCase(store, logger=logger, clock=clock)
    use_case.execute(USER_ID, _draft())
    use_case.execute(
        USER_ID,
        _draft(
            concept_name="Office rent",
            category="Alquiler",
            provider_name="Landlord",
            contract_number="RENT-9",
        ),
    )

    listing = ListAdminPaymentsUseCase(store)

    assert len(listing.execute(USER_ID)) == 2
    (rent,) = listing.execute(USER_ID, category="Alquiler")
    assert rent.concept_name == "Office rent"
    (internet,) = listing.execute(USER_ID, search="netlife")
    assert internet.concept_name == "Internet"
    assert listing.execute(USER_ID, category="Alquiler", search="cn-") == []

