"""Typerank CLI entry point."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv(Path.cwd() / ".env")

from typerank import __version__
from typerank.config import get_settings
from typerank.scoring.analytics import summarize_batch, summarize_roster
from typerank.scoring.calculations import medal_for_rank
from typerank.scoring.ordering import is_retest_required
from typerank.scoring.ranker import top_n
from typerank.storage import (
    ParticipantEntry,
    RosterError,
    load_roster,
    save_roster,
)

logger = logging.getLogger("typerank")

_MEDAL_ICONS = {"gold": "🥇", "silver": "🥈", "bronze": "🥉"}


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _init_logfire() -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from typerank.observability import initialize_logfire

        initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def _positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _print_validation_error(e: ValidationError) -> None:
    print("\n❌ Invalid input:\n")
    for error in e.errors():
        print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
    print()


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize data directory and configuration file."""
    data_dir = get_settings().data_dir

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created data directory: {data_dir}")

        config_path = data_dir / "config.yaml"
        if not config_path.exists():
            config_template = """# Typerank Configuration
# Secrets (LOGFIRE_TOKEN) belong in .env, not here.

leaderboard:
  default_top: 10
  podium_size: 3

storage:
  roster_file: roster.yaml
"""
            config_path.write_text(config_template, encoding="utf-8")
            logger.info(f"Created config template: {config_path}")
        else:
            logger.info(f"Config file already exists: {config_path}")

        print(f"\n✓ Data directory initialized at {data_dir}\n")
        return 0

    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== Typerank Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}")
        print(f"Roster File: {settings.roster_path}")
        print(f"Environment: {settings.environment}\n")

        print("Leaderboard:")
        print(f"  Default Top: {settings.leaderboard.default_top}")
        print(f"  Podium Size: {settings.leaderboard.podium_size}\n")

        print(f"Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")
        return 0

    except ValidationError as e:
        _print_validation_error(e)
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def cmd_add(args: argparse.Namespace) -> int:
    """Score and add a participant."""
    try:
        entry = ParticipantEntry(
            name=args.name,
            batch=args.batch,
            wpm=args.wpm,
            accuracy=args.accuracy,
            errors=args.errors,
        )
        roster = load_roster()
        participant = roster.add_participant(entry)
        save_roster(roster)

        print(f"\n✓ Added {participant.name} ({participant.id})")
        print(f"Final Score: {participant.final_score:.2f}\n")
        return 0

    except ValidationError as e:
        _print_validation_error(e)
        return 1
    except Exception as e:
        logger.error(f"Failed to add participant: {e}")
        print(f"\n❌ Failed to add participant: {e}\n")
        return 1


def cmd_remove(args: argparse.Namespace) -> int:
    """Remove a participant."""
    try:
        roster = load_roster()
        participant = roster.remove_participant(args.participant_id)
        save_roster(roster)
        print(f"\n✓ Removed {participant.name} ({participant.id})\n")
        return 0

    except RosterError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Failed to remove participant: {e}")
        print(f"\n❌ Failed to remove participant: {e}\n")
        return 1


def cmd_batch(args: argparse.Namespace) -> int:
    """Create, delete, or list batches."""
    try:
        roster = load_roster()

        if args.batch_command == "create":
            batch = roster.create_batch(args.name)
            save_roster(roster)
            print(f"\n✓ Created batch {batch.batch_name} ({batch.batch_id})\n")
        elif args.batch_command == "delete":
            batch = roster.delete_batch(args.batch_id)
            save_roster(roster)
            print(f"\n✓ Deleted batch {batch.batch_name} and its participants\n")
        else:
            print("\n=== Batches ===\n")
            if not roster.batches:
                print("  (None)")
            for batch in roster.batches:
                marker = "*" if batch.batch_id == roster.active_batch_id else " "
                print(
                    f" {marker} {batch.batch_id}  {batch.batch_name} "
                    f"({len(batch.participant_ids)} participants)"
                )
            print()
        return 0

    except RosterError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Batch command failed: {e}")
        print(f"\n❌ Batch command failed: {e}\n")
        return 1


def cmd_leaderboard(args: argparse.Namespace) -> int:
    """Print the ranked leaderboard."""
    try:
        settings = get_settings()
        roster = load_roster()
        ranked = roster.ranked(args.batch)
        top = args.top if args.top is not None else settings.leaderboard.default_top

        print("\n=== Leaderboard ===\n")
        if not ranked:
            print("  (No participants)\n")
            return 0

        print(f"{'Rank':>4}  {'Name':<20} {'Batch':<12} {'WPM':>6} {'Acc%':>6} {'Err':>4} {'Score':>7}")
        shown = top_n(ranked, top)
        podium_size = settings.leaderboard.podium_size
        for p in shown:
            icon = _MEDAL_ICONS.get(medal_for_rank(p.rank, podium_size), "  ")
            print(
                f"{p.rank:>4}{icon} {p.name:<20} {p.batch:<12} "
                f"{p.wpm:>6g} {p.accuracy:>6g} {p.errors:>4} {p.final_score:>7.2f}"
            )
        if len(ranked) > len(shown):
            print(f"  ... and {len(ranked) - len(shown)} more")
        print()
        return 0

    except Exception as e:
        logger.error(f"Failed to build leaderboard: {e}")
        print(f"\n❌ Failed to build leaderboard: {e}\n")
        return 1


def cmd_compare(args: argparse.Namespace) -> int:
    """Compare two participants head to head."""
    try:
        roster = load_roster()
        a = roster.get_participant(args.participant_a)
        b = roster.get_participant(args.participant_b)
        result = roster.compare(a.id, b.id)

        print(f"\n=== {a.name} vs {b.name} ===\n")
        for row in result.metrics:
            side = {"A": a.name, "B": b.name}.get(row.winner, "Tie")
            print(f"  {row.metric:<12} {row.value_a:>8g} {row.value_b:>8g}   → {side}")
        print()

        if result.winner is None:
            print("Result: Tie")
            if is_retest_required(a, b):
                print("Re-test required")
        else:
            print(f"Winner: {result.winner.name}")
        print(f"Why: {result.explanation}")
        print(f"{result.motivation}\n")
        return 0

    except RosterError as e:
        print(f"\n❌ {e}\n")
        return 1
    except Exception as e:
        logger.error(f"Comparison failed: {e}")
        print(f"\n❌ Comparison failed: {e}\n")
        return 1


def cmd_stats(args: argparse.Namespace) -> int:
    """Display roster overview and per-batch summaries."""
    try:
        roster = load_roster()
        overview = summarize_roster(roster.participants, len(roster.batches))

        print("\n=== Roster Stats ===\n")
        print(f"Participants: {overview.total_participants}")
        print(f"Batches: {overview.total_batches}")
        print(f"Average Score: {overview.average_score:.1f}")
        print(f"Top Score: {overview.top_score:.2f}\n")

        for batch in roster.batches:
            summary = summarize_batch(roster.participants, batch.batch_name)
            top = summary.top_performer.name if summary.top_performer else "—"
            print(f"{summary.batch}:")
            print(f"  Participants: {summary.participants}")
            print(f"  Avg WPM: {summary.average_wpm:g}  Avg Accuracy: {summary.average_accuracy:g}%")
            print(f"  Avg Score: {summary.average_score:g}  Top: {top}\n")
        return 0

    except Exception as e:
        logger.error(f"Failed to compute stats: {e}")
        print(f"\n❌ Failed to compute stats: {e}\n")
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typerank",
        description="Typerank: scoring and ranking for typing competitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Typerank {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser("init", help="Initialize data directory and config file")
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser("config", help="Display merged configuration")
    parser_config.set_defaults(func=cmd_config)

    parser_add = subparsers.add_parser("add", help="Score and add a participant")
    parser_add.add_argument("--name", required=True)
    parser_add.add_argument("--batch", default="")
    parser_add.add_argument("--wpm", type=float, required=True)
    parser_add.add_argument("--accuracy", type=float, required=True)
    parser_add.add_argument("--errors", type=int, default=0)
    parser_add.set_defaults(func=cmd_add)

    parser_remove = subparsers.add_parser("remove", help="Remove a participant")
    parser_remove.add_argument("participant_id")
    parser_remove.set_defaults(func=cmd_remove)

    parser_batch = subparsers.add_parser("batch", help="Manage batches")
    batch_sub = parser_batch.add_subparsers(dest="batch_command")
    batch_create = batch_sub.add_parser("create", help="Create a batch")
    batch_create.add_argument("name")
    batch_delete = batch_sub.add_parser("delete", help="Delete a batch and its participants")
    batch_delete.add_argument("batch_id")
    batch_sub.add_parser("list", help="List batches")
    parser_batch.set_defaults(func=cmd_batch)

    parser_leaderboard = subparsers.add_parser("leaderboard", help="Show the ranked leaderboard")
    parser_leaderboard.add_argument("--batch", help="Batch ID to scope the ranking to")
    parser_leaderboard.add_argument(
        "--top", type=_positive_int, help="Number of rows to show (at least 1)"
    )
    parser_leaderboard.set_defaults(func=cmd_leaderboard)

    parser_compare = subparsers.add_parser("compare", help="Compare two participants")
    parser_compare.add_argument("participant_a")
    parser_compare.add_argument("participant_b")
    parser_compare.set_defaults(func=cmd_compare)

    parser_stats = subparsers.add_parser("stats", help="Show roster statistics")
    parser_stats.set_defaults(func=cmd_stats)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    _configure_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    _init_logfire()

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
