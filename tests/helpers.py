from datetime import datetime, timedelta, timezone

from botdetector.models import ParsedRequest

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_line(ip="10.0.0.1", second=0, method="GET", path="/a.html",
              agent="Mozilla/5.0", status=200):
    stamp = (BASE_TIME + timedelta(seconds=second)).strftime("%d/%m/%Y:%H:%M:%S")
    return (
        f'{ip} - - [{stamp}] "{method} {path} HTTP/1.1" {status} 100'
        f' "-" "{agent}" 5'
    )


def make_request(ip="10.0.0.1", second=0, path="/a.html", agent="Mozilla/5.0"):
    timestamp = BASE_TIME + timedelta(seconds=second)
    return ParsedRequest(
        ip=ip,
        timestamp=timestamp,
        timestamp_raw=timestamp.strftime("%d/%m/%Y:%H:%M:%S"),
        method="GET",
        path=path,
        user_agent=agent,
    )
