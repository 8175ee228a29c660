"""Tests for database CLI commands."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

# Add backend to path
backend_dir = Path(__file__).parent.parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from typer.testing import CliRunner  # noqa: E402

from scripts.cli.commands.db import app  # noqa: E402

runner = CliRunner()


class TestDbCommands:
    """Tests for db commands."""

    @patch("scripts.cli.commands.db.command")
    def test_migrate_command(self, mock_command):
        """Test migrate upgrades to head by default."""
        result = runner.invoke(app, ["migrate"])

        assert result.exit_code == 0
        mock_command.upgrade.assert_called_once()
        assert mock_command.upgrade.call_args.args[1] == "head"

    @patch("scripts.cli.commands.db.SessionLocal")
    def test_seed_command_runs_seeder(self, mock_session_local):
        """Test seed runs the requested seeder and closes the session."""
        db = MagicMock()
        mock_session_local.return_value = db
        seeder = MagicMock()

        with patch.dict("scripts.cli.commands.db.SEEDERS", {"TaskStatusesSeeder": seeder}):
            result = runner.invoke(app, ["seed", "--class", "TaskStatusesSeeder"])

        assert result.exit_code == 0
        seeder.return_value.run.assert_called_once_with(db)
        db.close.assert_called_once()

    def test_seed_command_unknown_seeder(self):
        """Test seed fails on an unknown seeder class."""
        result = runner.invoke(app, ["seed", "--class", "NopeSeeder"])

        assert result.exit_code == 1
        assert "Unknown seeder" in result.output

    @patch("scripts.cli.commands.db.SessionLocal")
    def test_seed_command_skips_disabled_seeder(self, mock_session_local):
        """Test seed does not run a seeder whose module is disabled."""
        seeder = MagicMock()
        seeder.return_value.is_enabled.return_value = False

        with patch.dict("scripts.cli.commands.db.SEEDERS", {"DemoTaskBoardsSeeder": seeder}):
            result = runner.invoke(app, ["seed", "--class", "DemoTaskBoardsSeeder"])

        assert result.exit_code == 0
        assert "skipped" in result.output
        seeder.return_value.run.assert_not_called()
