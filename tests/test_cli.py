"""Console flow tests driven through click's ``CliRunner``."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from trip_estimator.cli import cli
from trip_estimator.domain.errors import PersistenceFailure

GOA_INPUT = "\n".join(
    [
        "1",  # create trip
        "Goa",
        "2",  # days
        "1",  # petrol car
        "15",
        "100",
        "n",  # sightseeing
        "n",  # shopping
        "y",  # luxury stay
        "150", "500", "1000", "50",
        "100", "400", "1000", "30",
        "3",  # exit
    ]
) + "\n"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _run(runner, log_path, user_input, *args):
    return runner.invoke(
        cli, ["--history-file", str(log_path), *args], input=user_input
    )


class TestMenu:
    def test_exit_immediately(self, runner, log_path):
        result = _run(runner, log_path, "3\n")
        assert result.exit_code == 0
        assert "Thank you. Goodbye!" in result.output

    def test_non_numeric_choice_keeps_looping(self, runner, log_path):
        result = _run(runner, log_path, "abc\n9\n3\n")
        assert result.exit_code == 0
        assert "Please enter a valid number." in result.output
        assert "Invalid choice. Try again." in result.output

    def test_menu_subcommand(self, runner, log_path):
        result = _run(runner, log_path, "3\n", "menu")
        assert result.exit_code == 0
        assert "Main Menu" in result.output


class TestCreateTrip:
    def test_goa_trip_report_and_log(self, runner, log_path):
        result = _run(runner, log_path, GOA_INPUT)

        assert result.exit_code == 0, result.output
        assert "Total Trip Cost       : ₹ 6479.00" in result.output
        assert "Options   : Luxury stay" in result.output
        assert "Trip summary saved to file" in result.output

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines[:5] == [
            "Trip: Goa",
            "Vehicle: Petrol Car",
            "Days: 2",
            "Options: Luxury stay",
            "Total Cost: 6479.00",
        ]

    def test_bad_day_values_are_re_requested(self, runner, log_path):
        user_input = "\n".join(
            ["1", "Short", "1", "2", "40", "100", "n", "n", "n",
             "abc", "-5", "80", "0", "0", "0", "3"]
        ) + "\n"
        result = _run(runner, log_path, user_input)

        assert result.exit_code == 0, result.output
        assert "Invalid number. Try again." in result.output
        assert "Value cannot be negative. Try again." in result.output
        assert "Fuel Cost            : ₹ 200.00" in result.output

    def test_invalid_vehicle_choice_re_asked(self, runner, log_path):
        user_input = "\n".join(
            ["1", "EV trip", "1", "7", "x", "3", "200", "300", "n", "n", "n",
             "250", "0", "0", "0", "3"]
        ) + "\n"
        result = _run(runner, log_path, user_input)

        assert result.exit_code == 0, result.output
        assert "Invalid choice, try again." in result.output
        assert "Vehicle   : EV" in result.output
        assert "Fuel Cost            : ₹ 600.00" in result.output

    def test_non_numeric_day_count_cancels(self, runner, log_path):
        result = _run(runner, log_path, "1\nTrip\ntwo\n3\n")
        assert "Invalid numeric input. Trip creation cancelled." in result.output
        assert not log_path.exists()

    def test_non_positive_day_count_cancels(self, runner, log_path):
        result = _run(runner, log_path, "1\nTrip\n0\n3\n")
        assert "Number of days must be positive." in result.output
        assert result.exit_code == 0

    def test_save_failure_is_reported(self, runner, log_path):
        with patch(
            "trip_estimator.cli.TripLog.append",
            side_effect=PersistenceFailure("disk full"),
        ):
            result = _run(runner, log_path, GOA_INPUT)
        assert result.exit_code == 0
        assert "Unable to save trip data: disk full" in result.output

    def test_unexpected_error_returns_to_menu(self, runner, log_path):
        with patch(
            "trip_estimator.cli.TripEstimator.estimate",
            side_effect=RuntimeError("boom"),
        ):
            result = _run(runner, log_path, GOA_INPUT)
        assert result.exit_code == 0
        assert "Unexpected error: boom" in result.output
        assert "Thank you. Goodbye!" in result.output


class TestHistory:
    def test_no_history_file(self, runner, log_path):
        result = _run(runner, log_path, "", "history")
        assert result.exit_code == 0
        assert "No history file found." in result.output

    def test_empty_history(self, runner, log_path):
        log_path.write_text("")
        result = _run(runner, log_path, "", "history")
        assert "No trips saved yet." in result.output

    def test_history_after_saving(self, runner, log_path):
        _run(runner, log_path, GOA_INPUT)
        result = _run(runner, log_path, "2\n3\n")
        assert "SAVED TRIP HISTORY" in result.output
        assert "Trip: Goa" in result.output
        assert "Total Cost: 6479.00" in result.output

    def test_unreadable_history(self, runner, tmp_path):
        result = _run(runner, tmp_path, "", "history")
        assert result.exit_code == 0
        assert "Error reading history:" in result.output
