"""
Unit tests for the command line entry point.
"""

import pytest
from unittest.mock import patch, AsyncMock

from grocery_list.cli import main
from grocery_list.errors import FormServerUnavailable
from grocery_list.models.grocery import ReplayReport, SubmissionResult
from grocery_list.services.csv_export import read_items_csv, write_items_csv


class TestParseCommand:
    """Tests for `grocery-list parse`."""

    @pytest.mark.unit
    def test_parse_writes_csv_and_summary(self, sample_list_file, tmp_path, capsys):
        output = tmp_path / "out.csv"
        assert main(["parse", str(sample_list_file), "-o", str(output)]) == 0

        assert len(read_items_csv(output)) == 11
        out = capsys.readouterr().out
        assert "Found 11 items across 4 categories" in out
        assert "  Meats: Chicken Breast (2)" in out
        assert "  Cleaning Supplies: 2 items" in out

    @pytest.mark.unit
    def test_parse_missing_input(self, tmp_path):
        assert main(["parse", str(tmp_path / "missing.txt"), "-o", str(tmp_path / "x.csv")]) == 1


class TestSubmitCommand:
    """Tests for `grocery-list submit`."""

    @pytest.mark.unit
    def test_submit_reports_results(self, sample_items, tmp_path, capsys):
        csv_path = tmp_path / "list.csv"
        write_items_csv(sample_items, csv_path)
        report = ReplayReport(results=[
            SubmissionResult(index=1, item=sample_items[0], success=True),
            SubmissionResult(index=2, item=sample_items[1], success=False, error="boom"),
        ])

        with patch("grocery_list.cli.replay_items", new=AsyncMock(return_value=report)) as mock:
            code = main(["submit", str(csv_path), "--base-url", "http://form.test"])

        assert code == 2
        mock.assert_awaited_once()
        assert mock.await_args.kwargs["base_url"] == "http://form.test"
        assert mock.await_args.args[0] == sample_items
        out = capsys.readouterr().out
        assert "Submitted 1/2 items" in out
        assert "[2] Ground Beef: boom" in out

    @pytest.mark.unit
    def test_submit_server_down(self, sample_items, tmp_path):
        csv_path = tmp_path / "list.csv"
        write_items_csv(sample_items, csv_path)
        error = FormServerUnavailable("http://form.test")

        with patch("grocery_list.cli.replay_items", new=AsyncMock(side_effect=error)):
            assert main(["submit", str(csv_path)]) == 1
