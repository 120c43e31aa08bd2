"""Result objects returned by action use cases."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a create, update, delete or snapshot action.

    Attributes:
        success: True when the action reached the data store successfully.
        error: Generic, user-facing failure message.
        field_errors: Per-field validation messages for form actions.
    """

    success: bool
    error: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls) -> "ActionResult":
        return cls(success=True)

    @classmethod
    def failed(
        cls,
        error: str,
        field_errors: dict[str, str] | None = None,
    ) -> "ActionResult":
        return cls(
            success=False,
            error=error,
            field_errors=dict(field_errors or {}),
        )


__all__ = ["ActionResult"]
