"""Bot Detector - Constants and patterns"""

import re
from datetime import timedelta

VERSION = "1.0.0"

# Access log line:
# <ip> - <ident> - [<timestamp>] "<METHOD> <path> HTTP/x.y" <status> <bytes> "<referrer>" "<user-agent>" <extra>
LOG_PATTERN = re.compile(
    r'(?P<ip>\S+) - (?P<ident>\S+) - '
    r'\[(?P<timestamp>\d{2}/\d{2}/\d{4}:\d{2}:\d{2}:\d{2})\] '
    r'"(?P<method>GET|POST) (?P<path>\S+) HTTP/\d\.\d" '
    r'(?P<status>\d{3}) (?P<bytes>\d+) '
    r'"(?P<referrer>[^"]*)" "(?P<user_agent>[^"]*)" (?P<extra>\d+)',
    re.ASCII
)

# Timestamps carry no zone; they are always read as UTC
TIMESTAMP_FORMAT = "%d/%m/%Y:%H:%M:%S"

# Bot heuristics
BAD_USER_AGENT_TOKENS = ("curl", "python", "java")

STATIC_ASSET_SUFFIXES = (".jpg", ".png", ".css", ".js")

RAPID_FIRE_WINDOW = timedelta(seconds=10)
RAPID_FIRE_MAX_REQUESTS = 5

NO_STATIC_MIN_REQUESTS = 3

# Default locations used by the command line tool
DEFAULT_LOG_FILE = "sample-log.log"
DEFAULT_OUTPUT_FILE = "botdetector-output.txt"

REPORT_HEADER = "Potential Bot Requests:"
