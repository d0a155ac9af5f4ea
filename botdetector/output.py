"""Bot Detector - Report output"""

import math
from decimal import Decimal
from pathlib import Path
from typing import List

from rich.panel import Panel

from .models import FlagEvent, Report, Summary
from .patterns import REPORT_HEADER


def format_flag(event: FlagEvent) -> str:
    return (
        f'FLAGGED FOR {event.category.label}: {event.ip} [{event.timestamp}] '
        f'{event.method} "{event.path}" UA="{event.user_agent}"'
    )


def format_rate(rate: float) -> str:
    """Format like Java's ``Double.toString``: E notation outside [1e-3, 1e7)"""
    if math.isnan(rate):
        return "NaN"
    if math.isinf(rate):
        return "Infinity" if rate > 0 else "-Infinity"
    if rate == 0 or 1e-3 <= abs(rate) < 1e7:
        return repr(rate)

    mantissa, exponent = format(Decimal(repr(rate)).normalize(), "E").split("E")
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}E{int(exponent)}"


def summary_lines(summary: Summary) -> List[str]:
    return [
        f"Total Checked: {summary.total_checked}",
        f"Bad UA: {summary.bad_user_agent}",
        f"No Static: {summary.no_static_assets}",
        f"Too Frequent: {summary.too_frequent}",
        f"Total flagged: {summary.total_flagged}",
        f"Flag rate: {format_rate(summary.flag_rate)}%",
    ]


def render_report(report: Report) -> str:
    """Plain-text report: header, one line per flag, blank line, summary"""
    parts = [REPORT_HEADER + "\n"]
    parts.extend(format_flag(event) + "\n" for event in report.flags)
    parts.append("\n" + "\n".join(summary_lines(report.summary)))
    return "".join(parts)


def write_report(report: Report, filepath: str):
    Path(filepath).write_text(render_report(report), encoding='utf-8')


def print_report(summary: Summary, console):
    rate_color = 'red' if summary.total_flagged > 0 else 'green'
    console.print(Panel.fit(
        f"Total Checked: [cyan]{summary.total_checked:,}[/]\n"
        f"Bad UA: [yellow]{summary.bad_user_agent:,}[/]\n"
        f"No Static: [yellow]{summary.no_static_assets:,}[/]\n"
        f"Too Frequent: [yellow]{summary.too_frequent:,}[/]\n"
        f"Total flagged: [{rate_color}]{summary.total_flagged:,}[/]\n"
        f"Flag rate: [{rate_color}]{format_rate(summary.flag_rate)}%[/]",
        title="Bot Detector Summary",
        border_style="cyan"
    ))
