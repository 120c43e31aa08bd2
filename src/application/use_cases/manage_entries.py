"""Use cases to create, update and delete assets and liabilities.

Each action validates form input before touching the repository, converts
persistence failures into a generic ``ActionResult`` and records successful
actions in the usage log.
"""

from collections.abc import Mapping

from src.application.errors import PersistenceError
from src.application.ports.entries_repository import EntriesRepositoryPort
from src.application.results import ActionResult
from src.domain.errors import EntryValidationError
from src.domain.models import EntryKind
from src.domain.services.validation import validate_entry_form
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class _EntryAction:
    """Shared wiring for entry actions."""

    _verb = "save"

    def __init__(
        self,
        repository: EntriesRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Repository for the assets or liabilities table.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger receiving user action records.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    @property
    def kind(self) -> EntryKind:
        return self._repository.kind

    def _failure_message(self) -> str:
        return f"Failed to {self._verb} {self.kind.value}"

    def _persistence_failure(self, exc: PersistenceError) -> ActionResult:
        self._logger.error(f"{self._failure_message()}: {exc}")
        return ActionResult.failed(self._failure_message())

    def _validation_failure(self, exc: EntryValidationError) -> ActionResult:
        self._logger.warning(
            f"Rejected {self.kind.value} form: {sorted(exc.field_errors)}"
        )
        return ActionResult.failed(str(exc), exc.field_errors)


class CreateEntryUseCase(_EntryAction):
    """Create an asset or liability from a submitted form."""

    _verb = "create"

    def execute(self, user_id: str, form: Mapping) -> ActionResult:
        """Validate the form and insert a new entry.

        Args:
            user_id: Owner of the new entry.
            form: Raw form fields.

        Returns:
            ActionResult: Success, validation failure or persistence failure.
        """
        try:
            draft = validate_entry_form(form, self.kind)
        except EntryValidationError as exc:
            return self._validation_failure(exc)

        try:
            entry = self._repository.create_entry(user_id, draft)
        except PersistenceError as exc:
            return self._persistence_failure(exc)

        self._usage_logger.info(
            f"user={user_id} created {self.kind.value} id={entry.id}"
        )
        return ActionResult.ok()


class UpdateEntryUseCase(_EntryAction):
    """Update an existing asset or liability from a submitted form."""

    _verb = "update"

    def execute(
        self,
        user_id: str,
        entry_id: str,
        form: Mapping,
    ) -> ActionResult:
        """Validate the form and overwrite the entry fields.

        Args:
            user_id: Owner of the entry.
            entry_id: Identifier of the entry to update.
            form: Raw form fields.

        Returns:
            ActionResult: Success, validation failure or persistence failure.
        """
        try:
            draft = validate_entry_form(form, self.kind)
        except EntryValidationError as exc:
            return self._validation_failure(exc)

        try:
            self._repository.update_entry(user_id, entry_id, draft)
        except PersistenceError as exc:
            return self._persistence_failure(exc)

        self._usage_logger.info(
            f"user={user_id} updated {self.kind.value} id={entry_id}"
        )
        return ActionResult.ok()


class DeleteEntryUseCase(_EntryAction):
    """Delete an asset or liability by id."""

    _verb = "delete"

    def execute(self, user_id: str, entry_id: str) -> ActionResult:
        """Delete the entry.

        Args:
            user_id: Owner of the entry.
            entry_id: Identifier of the entry to delete.

        Returns:
            ActionResult: Success or persistence failure.
        """
        try:
            self._repository.delete_entry(user_id, entry_id)
        except PersistenceError as exc:
            return self._persistence_failure(exc)

        self._usage_logger.info(
            f"user={user_id} deleted {self.kind.value} id={entry_id}"
        )
        return ActionResult.ok()


__all__ = ["CreateEntryUseCase", "UpdateEntryUseCase", "DeleteEntryUseCase"]
