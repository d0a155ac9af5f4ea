"""Bot Detector - Core analysis pipeline"""

import logging
from pathlib import Path
from typing import Iterable, List

from rich.progress import Progress, SpinnerColumn, TextColumn

from .classifier import ClassificationEngine
from .models import FlagCategory, FlagEvent, Report
from .parser import parse_line
from .summary import SummaryAccumulator

logger = logging.getLogger(__name__)


class BotDetector:
    """Runs access log lines through the parser, classifier and summary"""

    def __init__(self, console=None):
        self.console = console
        self.engine = ClassificationEngine()
        self.summary = SummaryAccumulator()
        self.flags: List[FlagEvent] = []

    def reset(self):
        self.engine.reset()
        self.summary.reset()
        self.flags = []

    def process_line(self, line: str) -> List[FlagEvent]:
        request = parse_line(line)
        if request is None:
            return []

        categories = self.engine.classify(request)
        self.summary.record(categories)

        events = [
            FlagEvent.from_request(request, category)
            for category in FlagCategory
            if category in categories
        ]
        self.flags.extend(events)
        return events

    def analyze_lines(self, lines: Iterable[str]) -> Report:
        for line in lines:
            self.process_line(line)
        return self.generate_report()

    def analyze_file(self, filepath: str) -> Report:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        self.reset()

        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            lines = f.readlines()
        logger.info("Read %d lines from %s", len(lines), path)

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console
            ) as progress:
                task = progress.add_task("Scanning for bots...", total=len(lines))

                for line in lines:
                    self.process_line(line)
                    progress.update(task, advance=1)
        else:
            for line in lines:
                self.process_line(line)

        return self.generate_report()

    def generate_report(self) -> Report:
        summary = self.summary.finalize()
        logger.info(
            "Checked %d requests, %d flags raised across %d clients",
            summary.total_checked, summary.total_flagged, len(self.engine.clients)
        )
        return Report(flags=list(self.flags), summary=summary)
