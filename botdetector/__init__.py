"""Bot Detector package"""

from .patterns import VERSION
from .models import ClientState, FlagCategory, FlagEvent, ParsedRequest, Report, Summary
from .parser import parse_line
from .classifier import ClassificationEngine
from .summary import SummaryAccumulator
from .analyzer import BotDetector
from .output import print_report, render_report, write_report

__all__ = [
    'VERSION', 'BotDetector', 'ClassificationEngine', 'SummaryAccumulator',
    'ClientState', 'FlagCategory', 'FlagEvent', 'ParsedRequest', 'Report', 'Summary',
    'parse_line', 'print_report', 'render_report', 'write_report'
]
