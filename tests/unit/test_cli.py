import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from hizuke.core.chain.codec import decode_url
from hizuke.core.configuration import ConfigManager, EnvironmentManager, TomlConfigRepository

KICKOFF_QUERY = (
    "?lineFormat=%7Bdate%7D+%7Bname%7D&startDate=2024-01-10"
    "&milestone%5B0%5D.name=Kickoff&milestone%5B0%5D.duration=0"
    "&milestone%5B1%5D.name=Review&milestone%5B1%5D.duration=5"
)


class CLITestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self.tmp.name) / "config.toml"
        self.config_manager = ConfigManager(
            repository=TomlConfigRepository(self.config_path),
            environment=EnvironmentManager({}),
        )
        manager_patch = patch("hizuke.cli.bootstrap.get_config_manager", return_value=self.config_manager)
        logging_patch = patch("hizuke.cli.bootstrap.configure_logging")
        manager_patch.start()
        self.mock_configure_logging = logging_patch.start()
        self.addCleanup(manager_patch.stop)
        self.addCleanup(logging_patch.stop)
        self.runner = CliRunner()

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def invoke(self, *args: str):
        from hizuke import cli

        return self.runner.invoke(cli.app, list(args))

    def last_line(self, output: str) -> str:
        return output.strip().splitlines()[-1]


class RenderCommandTests(CLITestCase):
    def test_render_prints_one_line_per_milestone(self) -> None:
        result = self.invoke("render", "https://example.com/hizuke/" + KICKOFF_QUERY)

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output, "01/10 Kickoff\n01/15 Review\n")
        self.mock_configure_logging.assert_called_once_with(logging.WARNING)

    def test_render_without_source_prints_nothing(self) -> None:
        result = self.invoke("render")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output, "")

    def test_render_keeps_brackets_in_default_format(self) -> None:
        result = self.invoke("render", "startDate=2024-03-01&milestone[0].name=[x] Kickoff&milestone[0].duration=0")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output, "- [ ] 03/01 [x] Kickoff\n")

    def test_render_uses_configured_line_format(self) -> None:
        self.config_manager.set_line_format("{name} @ {date}")

        result = self.invoke("render", "startDate=2024-03-01&milestone[0].name=Kickoff&milestone[0].duration=0")

        self.assertEqual(result.output, "Kickoff @ 03/01\n")

    def test_render_dates_table(self) -> None:
        result = self.invoke("render", KICKOFF_QUERY, "--dates")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("2024-01-15", result.output)
        self.assertIn("Review", result.output)

    def test_render_dates_table_shows_missing_duration_as_nan(self) -> None:
        result = self.invoke("render", KICKOFF_QUERY.replace("duration=5", "duration=soon"), "--dates")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("NaN", result.output)
        self.assertNotIn("nan", result.output)
        self.assertIn("Invalid Date", result.output)

    def test_encode_normalizes_query(self) -> None:
        result = self.invoke("encode", "startDate=soon&milestone[0].name=x&milestone[0].duration=later")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        url = self.last_line(result.output)
        self.assertTrue(url.startswith("?lineFormat=-+%5B+%5D+%7Bdate%7D+%7Bname%7D&startDate="))
        self.assertIn("milestone%5B0%5D.duration=NaN", url)
        self.assertRegex(decode_url(url).start_date, r"^\d{4}-\d{2}-\d{2}$")

    def test_encode_prefixes_configured_base_url(self) -> None:
        self.config_manager.set_base_url("https://example.com/hizuke/")

        result = self.invoke("encode", KICKOFF_QUERY)

        self.assertEqual(result.output.strip(), "https://example.com/hizuke/" + KICKOFF_QUERY)


class MilestoneCommandTests(CLITestCase):
    def test_add_after_with_name_and_duration(self) -> None:
        result = self.invoke(
            "milestone",
            "add",
            KICKOFF_QUERY,
            "--after",
            "1",
            "--name",
            "Ship",
            "--duration",
            "3",
            "--render",
        )

        self.assertEqual(result.exit_code, 0, msg=result.output)
        lines = result.output.strip().splitlines()
        self.assertEqual(lines[1:], ["01/10 Kickoff", "01/15 Review", "01/18 Ship"])
        state = decode_url(lines[0])
        self.assertEqual([m.name for m in state.milestones], ["Kickoff", "Review", "Ship"])

    def test_add_defaults_to_blank_head(self) -> None:
        result = self.invoke("milestone", "add", KICKOFF_QUERY)

        self.assertEqual(result.exit_code, 0, msg=result.output)
        state = decode_url(self.last_line(result.output))
        self.assertEqual([m.name for m in state.milestones], ["", "Kickoff", "Review"])
        self.assertEqual([m.duration_days_from_previous_one for m in state.milestones], [0, 0, 5])

    def test_remove(self) -> None:
        result = self.invoke("milestone", "remove", KICKOFF_QUERY, "0", "--render")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(self.last_line(result.output), "01/10 Review")

    def test_remove_out_of_range_is_bad_parameter(self) -> None:
        result = self.invoke("milestone", "remove", KICKOFF_QUERY, "5")

        self.assertEqual(result.exit_code, 2)
        self.assertIn("out of range", result.output)

    def test_rename(self) -> None:
        result = self.invoke("milestone", "rename", KICKOFF_QUERY, "1", "Final review")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        state = decode_url(self.last_line(result.output))
        self.assertEqual(state.milestones[1].name, "Final review")

    def test_negative_duration(self) -> None:
        result = self.invoke("milestone", "duration", "--render", "--", KICKOFF_QUERY, "1", "-2")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(self.last_line(result.output), "01/08 Review")


class ChainCommandTests(CLITestCase):
    def test_start_date(self) -> None:
        result = self.invoke("start", KICKOFF_QUERY, "2024-02-28", "--render")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip().splitlines()[1:], ["02/28 Kickoff", "03/04 Review"])

    def test_start_today(self) -> None:
        with patch("hizuke.core.chain.edits.today_canonical", return_value="2026-10-19"):
            result = self.invoke("start", KICKOFF_QUERY, "--today")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(decode_url(self.last_line(result.output)).start_date, "2026-10-19")

    def test_start_rejects_malformed_date(self) -> None:
        result = self.invoke("start", KICKOFF_QUERY, "28/02/2024")

        self.assertEqual(result.exit_code, 2)
        self.assertIn("yyyy-MM-dd", result.output)

    def test_start_requires_exactly_one_source(self) -> None:
        self.assertEqual(self.invoke("start", KICKOFF_QUERY).exit_code, 2)
        self.assertEqual(self.invoke("start", KICKOFF_QUERY, "2024-01-01", "--today").exit_code, 2)

    def test_format(self) -> None:
        result = self.invoke("format", KICKOFF_QUERY, "* {name} ({date})", "--render")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip().splitlines()[1:], ["* Kickoff (01/10)", "* Review (01/15)"])


class ConfigCommandTests(CLITestCase):
    def test_verbosity_is_persisted(self) -> None:
        result = self.invoke("config", "verbosity", "verbose")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn('verbosity = "verbose"', self.config_path.read_text(encoding="utf-8"))

    def test_unknown_verbosity_is_rejected(self) -> None:
        result = self.invoke("config", "verbosity", "loud")

        self.assertEqual(result.exit_code, 2)
        self.assertFalse(self.config_path.exists())

    def test_base_url_set_and_clear(self) -> None:
        self.assertEqual(self.invoke("config", "base-url", "https://example.com/").exit_code, 0)
        self.assertEqual(self.config_manager.get_base_url(), "https://example.com/")

        self.assertEqual(self.invoke("config", "base-url", "--clear").exit_code, 0)
        self.assertIsNone(self.config_manager.get_base_url())

    def test_line_format_set_and_show(self) -> None:
        self.assertEqual(self.invoke("config", "line-format", "[{date}] {name}").exit_code, 0)

        result = self.invoke("config", "show")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("[{date}] {name}", result.output)
