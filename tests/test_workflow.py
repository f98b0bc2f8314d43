"""End-to-end tests for the demonstration workflow."""

import io
import unittest
from unittest.mock import MagicMock, patch

import pytest

from regexloops import _get_version
from regexloops.config import load_default_config, parse_config
from regexloops.workflow import run_demonstrations

EXPECTED_DEFAULT_OUTPUT = "false\ntrue\ntrue\ntrue\n0\n1\n2\n3\n4\n5\n6\nJavaScript\nPython\nGoLang\n"


class TestWorkflow(unittest.TestCase):
    """Integration test suite for run_demonstrations."""

    def _run(self, names: list[str] | None = None) -> str:
        stream = io.StringIO()
        run_demonstrations(load_default_config(), names=names, stream=stream)
        return stream.getvalue()

    def test_default_output(self) -> None:
        """1. E2E: The built-in list prints exactly the expected fourteen lines."""
        assert self._run() == EXPECTED_DEFAULT_OUTPUT

    def test_output_is_idempotent(self) -> None:
        """2. Idempotence: Two runs produce byte-identical output."""
        assert self._run() == self._run()

    def test_context_records_lines_per_demo(self) -> None:
        """3. Context: Each demonstration's lines are recorded in order."""
        context = run_demonstrations(load_default_config(), stream=io.StringIO())
        by_name = {result.demo.name: result.lines for result in context.results}
        assert by_name["find-string"] == ["false"]
        assert by_name["password-check"] == ["true"]
        assert by_name["username-global"] == ["true"]
        assert by_name["username"] == ["true"]
        assert by_name["count"] == ["0", "1", "2", "3", "4", "5", "6"]
        assert by_name["languages"] == ["JavaScript", "Python", "GoLang"]
        assert context.line_count == 14

    def test_accumulate_when_selected(self) -> None:
        """4. Accumulate: The disabled demonstration prints the growing array when named."""
        lines = self._run(["accumulate"]).splitlines()
        assert len(lines) == 7
        assert lines[0] == "[ 0 ]"
        assert lines[1] == "[ 0, 1 ]"
        assert lines[-1] == "[ 0, 1, 2, 3, 4, 5, 6 ]"

    def test_unknown_selection_writes_nothing(self) -> None:
        """5. Selection: An unknown name fails before any line is written."""
        stream = io.StringIO()
        with pytest.raises(ValueError, match="Unknown demonstration"):
            run_demonstrations(load_default_config(), names=["nope"], stream=stream)
        assert stream.getvalue() == ""

    def test_custom_config(self) -> None:
        """6. Custom: A user-supplied document runs in its declared order."""
        config = parse_config("demonstrations:\n  - name: 'down'\n    kind: 'count'\n    start: 2\n    stop: 0\n    step: -1\n  - name: 'vowel'\n    kind: 'pattern'\n    text: 'xyz'\n    pattern: '[aeiou]'\n")
        stream = io.StringIO()
        run_demonstrations(config, stream=stream)
        assert stream.getvalue() == "2\n1\n0\nfalse\n"

    @patch("regexloops.workflow.SummaryReporter.generate")
    def test_reporter_called(self, mock_generate: MagicMock) -> None:
        """7. Reporting: The summary reporter runs once per run."""
        context = run_demonstrations(load_default_config(), stream=io.StringIO())
        mock_generate.assert_called_once_with(context)

    def test_defaults_to_stdout(self) -> None:
        """8. Stream: Without a stream, lines go to standard output."""
        fake_stdout = io.StringIO()
        with patch("sys.stdout", fake_stdout):
            run_demonstrations(load_default_config(), names=["find-string"])
        assert fake_stdout.getvalue() == "false\n"


class TestVersion(unittest.TestCase):
    """Test suite for the package version lookup."""

    @patch("importlib.metadata.version")
    def test_version_import_success(self, mock_version: MagicMock) -> None:
        """1. Version: Loaded from metadata when the package is installed."""
        mock_version.return_value = "1.2.3"
        assert _get_version() == "1.2.3"
        mock_version.assert_called_once_with("RegexLoops")

    @patch("importlib.metadata.version")
    def test_version_import_fails_gracefully(self, mock_version: MagicMock) -> None:
        """2. Version: Falls back to a development version when not installed."""
        from importlib.metadata import PackageNotFoundError

        mock_version.side_effect = PackageNotFoundError
        assert _get_version() == "0.0.0-dev"
