"""Tests for the command line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest

from airac_explorer.core.config import AppConfig
from airac_explorer.main import main, parse_args
from airac_explorer.settings.preferences import UserPreferences


@pytest.fixture
def prefs(tmp_path: Path) -> UserPreferences:
    """Preferences backed by a temp file."""
    return UserPreferences(_settings_path=tmp_path / "settings.json")


@pytest.fixture
def run(prefs: UserPreferences, capsys):
    """Run the CLI with isolated config and preferences.

    Returns a callable giving (exit code, stdout, stderr).
    """

    def _run(*argv: str) -> tuple[int, str, str]:
        with (
            patch("airac_explorer.main.initialize_logging"),
            patch("airac_explorer.main.get_app_config", return_value=AppConfig()),
            patch("airac_explorer.main.get_preferences", return_value=prefs),
        ):
            code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


class TestParseArgs:
    """Tests for argument parsing."""

    def test_export_options(self) -> None:
        """Test export arguments."""
        args = parse_args(["export", "--format", "ical", "--year", "2026"])

        assert args.command == "export"
        assert args.export_format == "ical"
        assert args.year == "2026"

    def test_date_option(self) -> None:
        """Test the evaluation day is parsed."""
        args = parse_args(["--date", "2025-02-15", "current"])
        assert args.date.isoformat() == "2025-02-15"

    def test_command_required(self) -> None:
        """Test a subcommand must be given."""
        with pytest.raises(SystemExit):
            parse_args([])

    def test_invalid_date(self) -> None:
        """Test malformed dates are rejected."""
        with pytest.raises(SystemExit):
            parse_args(["--date", "15/02/2025", "current"])

    def test_invalid_page_size(self) -> None:
        """Test page sizes below 1 are rejected."""
        with pytest.raises(SystemExit):
            parse_args(["list", "--page-size", "0"])


class TestCurrentCommand:
    """Tests for the current command."""

    def test_current_cycle(self, run) -> None:
        """Test the cycle in effect and the next ones."""
        code, out, _ = run("--date", "2025-02-15", "current")

        assert code == 0
        assert "AIRAC 2501 (2025-01)" in out
        assert "Remaining: 4 days" in out
        assert "Upcoming:" in out
        assert "2502" in out

    def test_before_first_cycle(self, run) -> None:
        """Test days before the catalog have no current cycle."""
        code, out, _ = run("--date", "2024-06-01", "current")

        assert code == 0
        assert "No AIRAC cycle in effect on Jun 01, 2024" in out
        assert "2501" in out


class TestListCommand:
    """Tests for the list command."""

    def test_filtered_page(self, run) -> None:
        """Test year filter and page size."""
        code, out, _ = run("--date", "2026-06-01", "list", "--year", "2026", "--page-size", "5")
        lines = out.splitlines()

        assert code == 0
        assert lines[0].startswith("2601")
        assert len(lines) == 6
        assert lines[-1] == "Page 1 of 3 (13 of 975 cycles)"

    def test_no_matches(self, run) -> None:
        """Test an empty result."""
        code, out, _ = run("list", "--search", "zzz")

        assert code == 0
        assert "No cycles match the current filters" in out

    def test_config_default_page_size(self, prefs: UserPreferences, capsys) -> None:
        """Test the configured page size applies when none is saved."""
        with (
            patch("airac_explorer.main.initialize_logging"),
            patch(
                "airac_explorer.main.get_app_config",
                return_value=AppConfig(default_page_size=5),
            ),
            patch("airac_explorer.main.get_preferences", return_value=prefs),
        ):
            code = main(["--date", "2025-02-15", "list"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert len(lines) == 6
        assert lines[-1] == "Page 1 of 195 (975 of 975 cycles)"

    def test_saved_page_size_beats_config(self, run, prefs: UserPreferences) -> None:
        """Test a saved page size overrides the configured default."""
        prefs.set_items_per_page(100)
        _, out, _ = run("--date", "2025-02-15", "list")

        assert out.splitlines()[-1] == "Page 1 of 10 (975 of 975 cycles)"

    def test_saved_sort_order(self, run, prefs: UserPreferences) -> None:
        """Test the saved sort preference is used."""
        prefs.set_sort_by("date-desc")
        _, out, _ = run("--date", "2025-02-15", "list", "--page-size", "1")

        assert out.splitlines()[0].startswith("9913")

    def test_invalid_year(self, run) -> None:
        """Test a malformed year is an error."""
        code, _, err = run("list", "--year", "next")

        assert code == 1
        assert "Error" in err


class TestShowCommand:
    """Tests for the show command."""

    def test_show_records_recent(self, run, prefs: UserPreferences) -> None:
        """Test showing a cycle saves it as recently viewed."""
        code, out, _ = run("--date", "2026-06-01", "show", "2026-03")

        assert code == 0
        assert "AIRAC 2603 (2026-03)" in out
        assert "Status:   past" in out
        assert prefs.recently_viewed == ["2603"]
        assert prefs.settings_path.exists()

    def test_outside_range(self, run) -> None:
        """Test a valid identifier outside the catalog."""
        code, _, err = run("show", "2401")

        assert code == 1
        assert "outside the supported range" in err

    def test_malformed_identifier(self, run) -> None:
        """Test an unparseable identifier."""
        code, _, err = run("show", "hello")

        assert code == 1
        assert "Error" in err


class TestStatsCommand:
    """Tests for the stats command."""

    def test_statistics(self, run) -> None:
        """Test catalog totals."""
        code, out, _ = run("--date", "2025-02-15", "stats")

        assert code == 0
        assert "Total cycles:     975" in out
        assert "Years:            2025-2099 (75 years)" in out
        assert "Current cycle:    2501" in out
        assert "Upcoming cycles:  2502, 2503, 2504" in out


class TestExportCommand:
    """Tests for the export command."""

    def test_export_ical(self, run, tmp_path: Path) -> None:
        """Test exporting a year to an iCalendar file."""
        out_dir = tmp_path / "out"
        code, out, _ = run("export", "--format", "ical", "--year", "2026", "--output", str(out_dir))

        files = list(out_dir.glob("airac-cycles-*.ics"))
        assert code == 0
        assert "Exported 13 cycles to" in out
        assert len(files) == 1
        assert files[0].read_text(encoding="utf-8").count("BEGIN:VEVENT") == 13

    def test_export_named_file(self, run, tmp_path: Path) -> None:
        """Test an explicit filename."""
        code, _, _ = run(
            "export",
            "--status",
            "upcoming",
            "--year",
            "2099",
            "--output",
            str(tmp_path),
            "--filename",
            "late.csv",
        )

        assert code == 0
        assert len((tmp_path / "late.csv").read_text(encoding="utf-8").splitlines()) == 14


class TestBookmarkCommands:
    """Tests for bookmark and bookmarks."""

    def test_toggle(self, run, prefs: UserPreferences) -> None:
        """Test bookmarking then removing a cycle."""
        _, out, _ = run("bookmark", "2501")
        assert "Bookmarked 2501" in out
        assert prefs.bookmarked_cycles == ["2501"]

        _, out, _ = run("bookmark", "2025-01")
        assert "Removed bookmark for 2501" in out
        assert prefs.bookmarked_cycles == []

    def test_list_bookmarks(self, run, prefs: UserPreferences) -> None:
        """Test listing bookmarked cycles."""
        _, out, _ = run("bookmarks")
        assert "No bookmarked cycles" in out

        prefs.add_bookmark("2603")
        prefs.add_bookmark("bogus")
        code, out, _ = run("bookmarks")

        lines = out.splitlines()
        assert code == 0
        assert len(lines) == 1
        assert lines[0].startswith("2603")
