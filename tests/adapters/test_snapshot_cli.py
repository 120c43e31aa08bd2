"""Tests for the snapshot_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import snapshot_cli
from src.application.results import ActionResult
from src.infrastructure.settings import AppSettings


def _patch(monkeypatch, result: ActionResult) -> MagicMock:
    use_case = MagicMock()
    use_case.execute.return_value = result
    monkeypatch.setattr(
        snapshot_cli.AppSettings,
        "from_env",
        classmethod(lambda cls: AppSettings(local_user_id="local-me")),
    )
    monkeypatch.setattr(
        snapshot_cli,
        "build_database_adapter",
        lambda settings: "adapter",
    )
    monkeypatch.setattr(
        snapshot_cli,
        "build_take_snapshot_use_case",
        lambda adapter, settings: use_case,
    )
    monkeypatch.setattr(snapshot_cli, "get_app_logger", lambda: MagicMock())
    return use_case


def test_main_snapshots_configured_user(monkeypatch, capsys):
    """NETWORTH_SNAPSHOT_USER_ID selects the snapshot owner."""
    monkeypatch.setenv("NETWORTH_SNAPSHOT_USER_ID", "user-42")
    use_case = _patch(monkeypatch, ActionResult.ok())

    exit_code = snapshot_cli.main()

    assert exit_code == 0
    use_case.execute.assert_called_once_with("user-42")
    assert "user-42" in capsys.readouterr().out


def test_main_falls_back_to_local_user(monkeypatch):
    monkeypatch.delenv("NETWORTH_SNAPSHOT_USER_ID", raising=False)
    use_case = _patch(monkeypatch, ActionResult.ok())

    snapshot_cli.main()

    use_case.execute.assert_called_once_with("local-me")


def test_main_reports_failure(monkeypatch, capsys):
    monkeypatch.delenv("NETWORTH_SNAPSHOT_USER_ID", raising=False)
    _patch(monkeypatch, ActionResult.failed("Failed to create snapshot"))

    exit_code = snapshot_cli.main()

    assert exit_code == 1
    assert "Failed to create snapshot" in capsys.readouterr().out
