"""Tests for the create, update and delete entry use cases."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.errors import EntryNotFoundError, PersistenceError
from src.application.use_cases.manage_entries import (
    CreateEntryUseCase,
    DeleteEntryUseCase,
    UpdateEntryUseCase,
)
from src.domain.models import Asset, EntryKind
from src.domain.services.validation import INVALID_VALUE_MESSAGE


def _build_repository(kind: EntryKind = EntryKind.ASSET) -> MagicMock:
    repository = MagicMock()
    repository.kind = kind
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    repository.create_entry.return_value = Asset(
        id="entry-1",
        user_id="user-1",
        name="Car",
        category="Vehicle",
        value=Decimal("15000.50"),
        description=None,
        created_at=now,
        updated_at=now,
    )
    return repository


def _form(value: str = "15000.50") -> dict:
    return {"name": "Car", "category": "Vehicle", "value": value}


def test_create_persists_validated_draft() -> None:
    """A valid form reaches the repository and logs the action."""
    repository = _build_repository()
    usage_logger = MagicMock()
    use_case = CreateEntryUseCase(
        repository,
        logger=MagicMock(),
        usage_logger=usage_logger,
    )

    result = use_case.execute("user-1", _form())

    assert result.success is True
    assert result.error is None
    user_id, draft = repository.create_entry.call_args.args
    assert user_id == "user-1"
    assert draft.value == Decimal("15000.50")
    usage_logger.info.assert_called_once()


def test_create_rejects_invalid_value_without_touching_repository() -> None:
    """Validation failures never reach the data store."""
    for raw in ("-5", "abc"):
        repository = _build_repository()
        use_case = CreateEntryUseCase(
            repository,
            logger=MagicMock(),
            usage_logger=MagicMock(),
        )

        result = use_case.execute("user-1", _form(raw))

        assert result.success is False
        assert result.field_errors == {"value": INVALID_VALUE_MESSAGE}
        repository.create_entry.assert_not_called()


def test_create_reports_generic_message_on_persistence_error() -> None:
    """Store failures surface as a generic message, details go to the log."""
    repository = _build_repository(EntryKind.LIABILITY)
    repository.create_entry.side_effect = PersistenceError("disk full")
    logger = MagicMock()
    use_case = CreateEntryUseCase(
        repository,
        logger=logger,
        usage_logger=MagicMock(),
    )

    result = use_case.execute("user-1", _form())

    assert result.success is False
    assert result.error == "Failed to create liability"
    assert result.field_errors == {}
    assert "disk full" in logger.error.call_args.args[0]


def test_update_overwrites_entry() -> None:
    repository = _build_repository()
    use_case = UpdateEntryUseCase(
        repository,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    result = use_case.execute("user-1", "entry-1", _form("16000"))

    assert result.success is True
    user_id, entry_id, draft = repository.update_entry.call_args.args
    assert (user_id, entry_id) == ("user-1", "entry-1")
    assert draft.value == Decimal("16000")


def test_update_missing_entry_fails() -> None:
    """Updating an unknown or foreign entry reports a failure."""
    repository = _build_repository()
    repository.update_entry.side_effect = EntryNotFoundError("missing")
    use_case = UpdateEntryUseCase(
        repository,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    result = use_case.execute("user-2", "entry-1", _form())

    assert result.success is False
    assert result.error == "Failed to update asset"


def test_update_validation_error_skips_repository() -> None:
    repository = _build_repository()
    use_case = UpdateEntryUseCase(
        repository,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    result = use_case.execute("user-1", "entry-1", {"value": "1"})

    assert result.success is False
    assert set(result.field_errors) == {"name", "category"}
    repository.update_entry.assert_not_called()


def test_delete_success_and_failure() -> None:
    repository = _build_repository()
    use_case = DeleteEntryUseCase(
        repository,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    assert use_case.execute("user-1", "entry-1").success is True
    repository.delete_entry.assert_called_once_with("user-1", "entry-1")

    repository.delete_entry.side_effect = EntryNotFoundError("missing")
    result = use_case.execute("user-1", "entry-1")
    assert result.success is False
    assert result.error == "Failed to delete asset"
