import io
import sys
import tempfile
import unittest
from pathlib import Path

from rich.console import Console

sys.path.append(str(Path(__file__).resolve().parents[1]))

from botdetector.analyzer import BotDetector  # noqa: E402
from botdetector.models import FlagCategory, FlagEvent  # noqa: E402
from botdetector.output import (  # noqa: E402
    format_flag,
    format_rate,
    print_report,
    render_report,
    summary_lines,
    write_report,
)
from botdetector.summary import SummaryAccumulator  # noqa: E402

from helpers import make_line  # noqa: E402


def make_event(category):
    return FlagEvent(
        ip="10.0.0.1",
        timestamp="01/01/2024:00:00:00",
        method="GET",
        path="/a.html",
        user_agent="curl/7.1",
        category=category,
    )


class TestFormatFlag(unittest.TestCase):
    def test_labels(self):
        expected = {
            FlagCategory.BAD_USER_AGENT: "BAD UA",
            FlagCategory.NO_STATIC_ASSETS: "NO STATIC",
            FlagCategory.TOO_FREQUENT: "FREQUENT",
        }
        for category, label in expected.items():
            self.assertEqual(
                format_flag(make_event(category)),
                f'FLAGGED FOR {label}: 10.0.0.1 [01/01/2024:00:00:00]'
                f' GET "/a.html" UA="curl/7.1"',
            )


class TestSummaryLines(unittest.TestCase):
    def test_empty_summary(self):
        lines = summary_lines(SummaryAccumulator().finalize())
        self.assertEqual(lines, [
            "Total Checked: 0",
            "Bad UA: 0",
            "No Static: 0",
            "Too Frequent: 0",
            "Total flagged: 0",
            "Flag rate: NaN%",
        ])

    def test_format_rate(self):
        self.assertEqual(format_rate(float("nan")), "NaN")
        self.assertEqual(format_rate(100.0), "100.0")
        self.assertEqual(format_rate(0.0), "0.0")
        self.assertEqual(format_rate(12.5), "12.5")

    def test_format_rate_e_notation(self):
        self.assertEqual(format_rate(0.001), "0.001")
        self.assertEqual(format_rate(0.00025), "2.5E-4")
        self.assertEqual(format_rate(0.0001), "1.0E-4")
        self.assertEqual(format_rate(9999999.5), "9999999.5")
        self.assertEqual(format_rate(1e7), "1.0E7")
        self.assertEqual(format_rate(12345678.0), "1.2345678E7")
        self.assertEqual(format_rate(float("inf")), "Infinity")


class TestRenderReport(unittest.TestCase):
    def test_layout(self):
        report = BotDetector().analyze_lines([make_line(agent="curl/7.1")])
        self.assertEqual(
            render_report(report),
            "Potential Bot Requests:\n"
            'FLAGGED FOR BAD UA: 10.0.0.1 [01/01/2024:00:00:00]'
            ' GET "/a.html" UA="curl/7.1"\n'
            "\n"
            "Total Checked: 1\n"
            "Bad UA: 1\n"
            "No Static: 0\n"
            "Too Frequent: 0\n"
            "Total flagged: 1\n"
            "Flag rate: 100.0%",
        )

    def test_no_flags(self):
        report = BotDetector().analyze_lines([])
        text = render_report(report)
        self.assertTrue(text.startswith("Potential Bot Requests:\n\nTotal Checked: 0"))
        self.assertTrue(text.endswith("Flag rate: NaN%"))

    def test_write_report(self):
        report = BotDetector().analyze_lines([make_line(agent="")])
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "report.txt"
            write_report(report, str(out))
            self.assertEqual(out.read_text(encoding="utf-8"), render_report(report))


class TestPrintReport(unittest.TestCase):
    def test_panel_contents(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=100, force_terminal=False)
        summary = BotDetector().analyze_lines([make_line(agent="curl")]).summary
        print_report(summary, console)
        text = buffer.getvalue()
        self.assertIn("Bot Detector Summary", text)
        self.assertIn("Total Checked: 1", text)
        self.assertIn("Flag rate: 100.0%", text)


if __name__ == "__main__":
    unittest.main()
