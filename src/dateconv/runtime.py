import argparse
from typing import Optional, Sequence

from dotenv import load_dotenv

from .core.config import DateAPIConfig
from .core.errors import DateConversionError
from .core.logging_utils import configure_logging
from .normalizer.service import normalize_date


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Normalize a date or relative-time phrase from CLI")
    parser.add_argument("--date", required=True, help="Date text to normalize")
    parser.add_argument("--hour", action="store_true", help="Include HH:MM:SS in the output")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(DateAPIConfig.from_env().log_level)

    try:
        result = normalize_date(args.date, include_hour=args.hour)
    except DateConversionError as exc:
        print(f"error={exc}")
        return 2

    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
