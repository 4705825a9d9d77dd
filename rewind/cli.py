"""Command line interface: print yearly stats and comparisons as JSON"""

import argparse
import json
from datetime import datetime, timezone
from dotenv import load_dotenv

from rewind.config import get_github_token
from rewind.github.fetcher import YearStatsFetcher
from rewind.stats.comparison import compare_years
from rewind.stats.models import year_summary_from_dict

load_dotenv()


def load_summary(path: str):
    """Load a YearSummary previously written by the summary command"""
    with open(path) as f:
        return year_summary_from_dict(json.load(f))


def require_token() -> str:
    token = get_github_token()
    if not token:
        raise ValueError("GITHUB_TOKEN environment variable not set")
    return token


def main(argv=None):
    parser = argparse.ArgumentParser(description="Yearly GitHub activity statistics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary_parser = subparsers.add_parser("summary", help="Print the summary for a year")
    summary_parser.add_argument("--year", type=int, help="Year to summarize (defaults to the current year)")
    summary_parser.add_argument("--output", "-o", help="Write the summary JSON to this file")

    compare_parser = subparsers.add_parser("compare", help="Compare a year with the previous one")
    compare_parser.add_argument("--year", type=int, help="Year to compare (defaults to the current year)")

    files_parser = subparsers.add_parser("compare-files", help="Compare two saved summaries")
    files_parser.add_argument("current", help="Path to the current year's summary JSON")
    files_parser.add_argument("previous", help="Path to the previous year's summary JSON")

    args = parser.parse_args(argv)

    if args.command == "compare-files":
        comparison = compare_years(load_summary(args.current), load_summary(args.previous))
        print(json.dumps(comparison.to_dict(), indent=2))
        return

    year = args.year or datetime.now(timezone.utc).year
    fetcher = YearStatsFetcher(require_token())

    if args.command == "summary":
        summary = fetcher.fetch_year_summary(year)
        if args.output:
            with open(args.output, 'w') as f:
                json.dump(summary.to_dict(), f, indent=2)
            print(f"Summary written to {args.output}")
        else:
            print(json.dumps(summary.to_dict(), indent=2))
    else:
        result = fetcher.fetch_comparison(year)
        comparison = result["comparison"]
        print(json.dumps(comparison.to_dict(), indent=2))
        print()
        for insight in comparison.narrative_insights:
            print(f"  - {insight}")


if __name__ == "__main__":
    main()
