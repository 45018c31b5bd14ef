"""
NPS - Net Promoter Score calculator

CLI entry point for scoring survey responses.
"""

import argparse
import logging
import sys

from nps.ingestion.loader import load_responses_csv, parse_rating_quantities
from nps.models.errors import SurveyValidationError
from nps.survey.survey import Survey
from nps.utils.report import export_report
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, settings.resolve_log_level(log_level)),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the Net Promoter Score of survey responses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score a CSV export with respondent_id and rating columns
  python main.py --responses responses.csv

  # Score rating quantities (ids are generated 1..N)
  python main.py --bulk "1:2,4:1,5:2,7:8,8:10,10:10"

  # Also write a breakdown report
  python main.py --responses responses.csv --output-dir output
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--responses",
        help="CSV file of survey responses"
    )
    source.add_argument(
        "--bulk",
        help="Comma-separated rating:quantity entries (e.g. 9:10,7:3,0:2)"
    )

    parser.add_argument(
        "--id-column",
        default=settings.DEFAULT_ID_COLUMN,
        help=f"Respondent id column in the CSV (default: {settings.DEFAULT_ID_COLUMN})"
    )

    parser.add_argument(
        "--rating-column",
        default=settings.DEFAULT_RATING_COLUMN,
        help=f"Rating column in the CSV (default: {settings.DEFAULT_RATING_COLUMN})"
    )

    parser.add_argument(
        "--name",
        default="survey",
        help="Survey name used in the report (default: survey)"
    )

    parser.add_argument(
        "--output-dir",
        help="Write a CSV breakdown report to this directory"
    )

    parser.add_argument(
        "--report-name",
        default=settings.DEFAULT_REPORT_NAME,
        help=f"Report file name without extension (default: {settings.DEFAULT_REPORT_NAME})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=settings.LOG_LEVELS,
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """
    Build the survey described by args, print its score and optionally export a report.

    Returns:
        Process exit code
    """
    logger = logging.getLogger(__name__)

    try:
        if args.responses:
            pairs = load_responses_csv(args.responses, args.id_column, args.rating_column)
            survey = Survey.from_responses(pairs)
        else:
            survey = Survey()
            survey.add_bulk_responses_auto_id(parse_rating_quantities(args.bulk))
    except SurveyValidationError as e:
        for error in e.errors:
            logger.error(str(error))
        print(f"\n❌ {len(e.errors)} invalid rating(s), no score computed")
        return 1
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Could not load responses: {e}")
        print(f"\n❌ {e}")
        return 1

    breakdown = survey.breakdown()

    print("=" * 60)
    print(f"Survey: {args.name}")
    print("=" * 60)
    print(f"Responses:  {breakdown.total}")
    print(f"Promoters:  {breakdown.promoters} ({breakdown.promoter_percent:.1f}%)")
    print(f"Passives:   {breakdown.passives} ({breakdown.passive_percent:.1f}%)")
    print(f"Detractors: {breakdown.detractors} ({breakdown.detractor_percent:.1f}%)")
    print(f"NPS:        {survey.score()}")
    print("=" * 60)

    if args.output_dir:
        output_path = export_report({args.name: survey}, args.output_dir, args.report_name)
        print(f"Report: {output_path}")

    return 0


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()
    setup_logging(args.log_level)
    sys.exit(run(args))


if __name__ == "__main__":
    main()


# Design Rationale and Trade-offs:
#
# 1. Input sources
#    - --responses and --bulk are mutually exclusive; exactly one is required
#    - CSV input goes through Survey.from_responses, bulk input through
#      add_bulk_responses_auto_id (ids 1..N)
#
# 2. Exit codes
#    - 0 when a score was printed
#    - 1 on invalid ratings, malformed --bulk entries or unreadable CSV files
#    - Trade-off: one invalid rating means no score at all; every invalid
#      rating is logged on its own line first
#
# 3. Logging
#    - stdout only, format and default level from config.settings
#    - --log-level accepts level names in any case
