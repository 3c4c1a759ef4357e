#!/usr/bin/env python3
import os
import time
import urllib.error
import urllib.parse
import urllib.request

API_URL = os.getenv("API_URL", "http://localhost:4447")

# NOTE: Requires a running API (python -m src.api.app).
# This is a smoke test for end-to-end wiring, not exhaustive layout coverage.

QUERIES = [
    # Special month/day date with time of day
    {"date": "01月02日", "hour": "true"},
    # Same input, date only
    {"date": "01月02日"},
    # English month layout
    {"date": "2 January, 2006"},
    # Relative phrase
    {"date": "5分钟前", "hour": "true"},
    # Date-time truncated to its date
    {"date": "2006-01-02T15:04:05Z"},
    # Unparseable input, expects 400
    {"date": "not-a-date"},
]


def get_text(url: str) -> tuple[int, str]:
    try:
        with urllib.request.urlopen(url, timeout=10) as resp:
            return resp.status, resp.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read().decode("utf-8")


def main() -> int:
    status, body = get_text(f"{API_URL}/api")
    print(f"==> /api [{status}]")
    print(body)

    for params in QUERIES:
        url = f"{API_URL}/convert?{urllib.parse.urlencode(params)}"
        status, body = get_text(url)
        print(f"==> {params} [{status}] {body}")
        time.sleep(0.2)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
