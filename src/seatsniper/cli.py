"""Command-line interface for testing the value score engine."""

import argparse
import json
import logging
import sys

from seatsniper.config import get_settings
from seatsniper.scoring.engine import ValueScoreEngine
from seatsniper.scoring.models import (
    EventContext,
    Listing,
    Platform,
    SectionTier,
    ValueScoreConfig,
)
from seatsniper.scoring.resale_predictor import estimate_roi


def positive_int(value: str) -> int:
    """Argparse type for counts of 1 or more."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def score_value(value: str) -> int:
    """Argparse type for a 0-100 value score."""
    number = int(value)
    if not 0 <= number <= 100:
        raise argparse.ArgumentTypeError(f"must be between 0 and 100, got {value}")
    return number


def create_example_batch() -> tuple[EventContext, list[Listing]]:
    """Create an example event with a handful of listings."""
    context = EventContext(
        event_id="example-event-001",
        event_name="Arena Tour - Night One",
        popularity=82,
        days_until_event=14,
    )
    listings = [
        Listing(
            platform_listing_id="sh-1001",
            platform=Platform.STUBHUB,
            event_id=context.event_id,
            section="Floor A",
            row="3",
            quantity=2,
            price_per_ticket=189.00,
            section_tier=SectionTier.PREMIUM,
        ),
        Listing(
            platform_listing_id="tm-2001",
            platform=Platform.TICKETMASTER,
            event_id=context.event_id,
            section="Section 104",
            row="K",
            quantity=2,
            price_per_ticket=95.00,
        ),
        Listing(
            platform_listing_id="sg-3001",
            platform=Platform.SEATGEEK,
            event_id=context.event_id,
            section="Upper 312",
            row="AA",
            quantity=4,
            price_per_ticket=48.00,
        ),
        Listing(
            platform_listing_id="sg-3002",
            platform=Platform.SEATGEEK,
            event_id=context.event_id,
            section="215",
            row="B",
            quantity=2,
            price_per_ticket=72.50,
        ),
        Listing(
            platform_listing_id="vs-4001",
            platform=Platform.VIVIDSEATS,
            event_id=context.event_id,
            section="Obstructed View 5",
            row="GA",
            quantity=1,
            price_per_ticket=35.00,
        ),
    ]
    return context, listings


def top_picks_command(args: argparse.Namespace) -> None:
    """Rank listings from JSON or use the example batch."""
    if args.json:
        data = json.loads(args.json)
        context = EventContext(**data["context"])
        listings = [Listing(**item) for item in data["listings"]]
    else:
        context, listings = create_example_batch()
        print("Using example batch (use --json to provide your own)\n")

    settings = get_settings()
    config = ValueScoreConfig(
        top_n=args.limit if args.limit is not None else settings.top_picks_count,
        min_score=settings.alert_score_threshold,
    )
    engine = ValueScoreEngine(config)

    picks = engine.get_top_value_picks(listings, context, min_score=args.min_score)

    # Output
    print(f"Event: {context.event_name or context.event_id}")
    print(f"{'=' * 60}")
    if not picks:
        print("No listings qualified.")
        return

    for pick in picks:
        print(
            f"#{pick.rank}  {pick.value_score:3}/100  {pick.recommendation:16} "
            f"Sec {pick.section}, Row {pick.row or '-'}  "
            f"${pick.price_per_ticket:.2f} x{pick.quantity}  ({pick.platform.value})"
        )
    print(f"{'=' * 60}")


def roi_command(args: argparse.Namespace) -> None:
    """Estimate resale ROI."""
    estimate = estimate_roi(args.popularity, args.days, args.price_delta)
    print(f"Estimated ROI: {estimate.estimated_roi:+d}%")
    print(f"Confidence:    {estimate.confidence.value}")
    print(f"Note:          {estimate.recommendation}")


def main() -> int:
    """Main CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="seatsniper",
        description="Resale Ticket Value Scoring Engine",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Top picks command
    picks_parser = subparsers.add_parser("top-picks", help="Rank a listing batch")
    picks_parser.add_argument(
        "--json",
        type=str,
        help='Batch as JSON: {"context": {...}, "listings": [...]}',
    )
    picks_parser.add_argument(
        "--limit",
        type=positive_int,
        help="Number of picks (default: TOP_PICKS_COUNT setting)",
    )
    picks_parser.add_argument(
        "--min-score",
        type=score_value,
        help="Drop picks scoring below this (default: ALERT_SCORE_THRESHOLD setting)",
    )

    # ROI command
    roi_parser = subparsers.add_parser("roi", help="Estimate resale ROI")
    roi_parser.add_argument("--popularity", type=float, required=True, help="Event popularity 0-100")
    roi_parser.add_argument("--days", type=int, required=True, help="Days until the event")
    roi_parser.add_argument(
        "--price-delta",
        type=float,
        required=True,
        help="Price vs average in percent (negative = cheaper)",
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example",
        help="Show example batch JSON",
    )
    example_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print JSON",
    )

    args = parser.parse_args()

    if args.command == "top-picks":
        top_picks_command(args)
    elif args.command == "roi":
        roi_command(args)
    elif args.command == "example":
        context, listings = create_example_batch()
        data = {
            "context": context.model_dump(mode="json"),
            "listings": [listing.model_dump(mode="json") for listing in listings],
        }
        if args.pretty:
            print(json.dumps(data, indent=2))
        else:
            print(json.dumps(data))
    else:
        parser.print_help()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
