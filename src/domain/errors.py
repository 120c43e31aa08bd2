"""Domain exceptions."""


class EntryValidationError(ValueError):
    """Raised when entry form input is rejected.

    Attributes:
        field_errors: Mapping of form field name to a user-facing message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        summary = "; ".join(
            f"{name}: {message}" for name, message in self.field_errors.items()
        )
        super().__init__(summary or "Invalid entry")


__all__ = ["EntryValidationError"]
