"""Bot Detector - Running flag totals"""

from collections import Counter
from typing import Iterable

from .models import FlagCategory, Summary


class SummaryAccumulator:
    """Counts checked requests and flags per category"""

    def __init__(self):
        self.total_checked = 0
        self.category_counts: Counter = Counter()

    def record(self, flags: Iterable[FlagCategory]):
        """Record one matched request and the categories it was flagged under"""
        self.total_checked += 1
        for category in set(flags):
            self.category_counts[category] += 1

    def reset(self):
        self.total_checked = 0
        self.category_counts = Counter()

    def finalize(self) -> Summary:
        bad_user_agent = self.category_counts[FlagCategory.BAD_USER_AGENT]
        no_static_assets = self.category_counts[FlagCategory.NO_STATIC_ASSETS]
        too_frequent = self.category_counts[FlagCategory.TOO_FREQUENT]
        total_flagged = bad_user_agent + no_static_assets + too_frequent

        # Nothing checked leaves the rate undefined rather than zero
        if self.total_checked == 0:
            flag_rate = float("nan")
        else:
            flag_rate = total_flagged / self.total_checked * 100

        return Summary(
            total_checked=self.total_checked,
            bad_user_agent=bad_user_agent,
            no_static_assets=no_static_assets,
            too_frequent=too_frequent,
            total_flagged=total_flagged,
            flag_rate=flag_rate
        )
