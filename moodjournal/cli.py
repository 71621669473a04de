"""
Command-line interface for moodjournal.

Provides subcommands for writing and browsing entries, viewing insights,
reading a daily quote and managing the user profile.
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from moodjournal import __version__
from moodjournal.config import (
    ALL_TIME_RANGE,
    DEFAULT_TIME_RANGE,
    LOG_LEVEL,
    STORE_PATH,
    TIME_RANGE_DAYS,
)
from moodjournal.insights import EntryFormatter, analyze, filter_by_time_range, score_sentiment
from moodjournal.journal import (
    EntryStore,
    JournalEntry,
    Mood,
    Theme,
    UserProfile,
    entries_on,
    marked_dates,
)
from moodjournal.quotes import QuoteProvider
from moodjournal.utils.timezone import format_time_for_user, resolve_timezone

MOOD_CHOICES = [Mood.POSITIVE.value, Mood.NEUTRAL.value, Mood.NEGATIVE.value]
TIME_RANGE_CHOICES = [*TIME_RANGE_DAYS, ALL_TIME_RANGE]
TEXT_STYLE_KEYS = ("bold", "italic", "underline")
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _store(args: argparse.Namespace) -> EntryStore:
    return EntryStore(args.store)


def _print_entry(entry: JournalEntry, timezone_str: Optional[str], full: bool = False) -> None:
    created_at = entry.created_at
    when = format_time_for_user(created_at, timezone_str) if created_at else "unknown date"
    print(f"[{entry.mood.value}] {entry.title or 'Untitled'} ({when})")
    print(f"  id: {entry.id}")
    if full:
        style = entry.text_style if isinstance(entry.text_style, dict) else {}
        styles = [key for key in TEXT_STYLE_KEYS if style.get(key)]
        if styles:
            print(f"  style: {', '.join(styles)}")
        if entry.text_color:
            print(f"  color: {entry.text_color}")
        print()
        print(entry.content)
    elif entry.content:
        preview = entry.content.strip().replace("\n", " ")
        print(f"  {preview[:80]}{'...' if len(preview) > 80 else ''}")


def _text_style(args: argparse.Namespace, current: Optional[dict[str, bool]] = None) -> Optional[dict[str, bool]]:
    """Merge --bold/--italic/--underline into an entry's text style."""
    flags = {key: getattr(args, key) for key in TEXT_STYLE_KEYS if getattr(args, key) is not None}
    if not flags:
        return current
    style = {key: False for key in TEXT_STYLE_KEYS}
    if isinstance(current, dict):
        style.update(current)
    style.update(flags)
    return style


def handle_write(args: argparse.Namespace) -> int:
    """Write a new journal entry."""
    entry = JournalEntry.create(
        title=args.title,
        content=args.content,
        mood=Mood.parse(args.mood),
        text_style=_text_style(args),
        text_color=args.text_color,
    )
    _store(args).upsert(entry)
    print(f"Saved journal entry: {entry.id}")
    return 0


def handle_edit(args: argparse.Namespace) -> int:
    """Update an existing journal entry."""
    store = _store(args)
    entry = store.get(args.id)
    if entry is None:
        print(f"Entry not found: {args.id}")
        return 1

    changes = {}
    if args.title is not None:
        changes["title"] = args.title
    if args.content is not None:
        changes["content"] = args.content
    if args.mood is not None:
        changes["mood"] = args.mood
    if args.text_color is not None:
        changes["text_color"] = args.text_color
    text_style = _text_style(args, entry.text_style)
    if text_style != entry.text_style:
        changes["text_style"] = text_style

    if not changes:
        print("Nothing to update.")
        return 0

    updated = entry.with_changes(**changes)
    updated.validate()
    store.upsert(updated)
    print(f"Updated journal entry: {entry.id}")
    return 0


def handle_delete(args: argparse.Namespace) -> int:
    """Delete a journal entry."""
    if _store(args).delete_by_id(args.id):
        print(f"Deleted journal entry: {args.id}")
        return 0
    print(f"Entry not found: {args.id}")
    return 1


def handle_list(args: argparse.Namespace) -> int:
    """List journal entries, newest first."""
    entries = _store(args).load_all()
    if not entries:
        print("No journal entries yet. Write one with 'moodjournal write'.")
        return 0

    # undated entries sort as oldest
    newest_first = sorted(entries, key=lambda e: e.created_at or OLDEST, reverse=True)
    for entry in newest_first[: args.limit]:
        _print_entry(entry, args.timezone)
    return 0


def handle_show(args: argparse.Namespace) -> int:
    """Show one journal entry in full."""
    entry = _store(args).get(args.id)
    if entry is None:
        print(f"Entry not found: {args.id}")
        return 1
    _print_entry(entry, args.timezone, full=True)
    return 0


def handle_calendar(args: argparse.Namespace) -> int:
    """Show days with entries, or the entries for one day."""
    entries = _store(args).load_all()

    if args.date:
        day = date.fromisoformat(args.date)
        selected = entries_on(entries, day, args.timezone)
        print(f"Showing entries for: {day.strftime('%B %d, %Y')}")
        if not selected:
            print("No entries for this date.")
        for entry in selected:
            _print_entry(entry, args.timezone)
        return 0

    marks = marked_dates(entries, args.timezone)
    if not marks:
        print("No journal entries yet.")
        return 0
    for day_str in sorted(marks):
        print(f"  {day_str}  {marks[day_str].value}")
    return 0


def handle_insights(args: argparse.Namespace) -> int:
    """Analyze entries within a time range."""
    entries = filter_by_time_range(_store(args).load_all(), args.range)
    report = analyze(entries, EntryFormatter(args.timezone))

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    if not entries:
        print("No journal entries to analyze. Start journaling to see insights.")
        return 0

    print(f"Insights ({args.range})")
    print("=" * 50)
    print("\nMood Distribution:")
    print(f"  Positive: {report.positive_count}")
    print(f"  Neutral: {report.neutral_count}")
    print(f"  Negative: {report.negative_count}")

    if report.mood_trend:
        print("\nMood Over Time:")
        for point in report.mood_trend:
            print(f"  {point.label or 'undated'}  {'*' * point.value}")

    if report.common_words:
        print("\nCommon Words:")
        for item in report.common_words:
            print(f"  {item.word}: {item.count}")
    return 0


def handle_sentiment(args: argparse.Namespace) -> int:
    """Score the sentiment of some text."""
    print(score_sentiment(args.text))
    return 0


def handle_quote(args: argparse.Namespace) -> int:
    """Show an inspirational quote."""
    with QuoteProvider() as provider:
        quote = provider.fetch_quote()
    print(f'"{quote.text}"')
    print(f"  - {quote.author}")
    return 0


def handle_profile_show(args: argparse.Namespace) -> int:
    """Show the saved profile."""
    profile = _store(args).load_profile()
    if profile is None:
        print("No profile saved. Create one with 'moodjournal profile set --name ...'.")
        return 0

    print(f"Name: {profile.name}")
    print(f"Email: {profile.email or '-'}")
    print(f"Reminders: {'on' if profile.reminder_enabled else 'off'}")
    print(f"Theme: {profile.theme.value}")
    return 0


def handle_profile_set(args: argparse.Namespace) -> int:
    """Create or update the profile."""
    store = _store(args)
    profile = store.load_profile() or UserProfile()

    if args.name is not None:
        profile.name = args.name
    if args.email is not None:
        profile.email = args.email
    if args.reminders is not None:
        profile.reminder_enabled = args.reminders
    if args.theme is not None:
        profile.theme = Theme(args.theme)

    profile.validate()
    store.save_profile(profile)
    print("Profile saved.")
    return 0


def _add_style_arguments(parser: argparse.ArgumentParser) -> None:
    """Add text presentation options to a write or edit parser."""
    group = parser.add_argument_group(
        "presentation",
        "Text color and style. Cover images are kept from imported records.",
    )
    group.add_argument("--text-color", help="Text color, e.g. #333333")
    for key in TEXT_STYLE_KEYS:
        group.add_argument(
            f"--{key}",
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Show the entry text in {key}",
        )


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the moodjournal CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="moodjournal",
        description="Mood-tagged journaling with insights",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=STORE_PATH,
        help=f"Path to the journal store (default: {STORE_PATH})",
    )
    parser.add_argument(
        "--timezone", "--tz",
        help="Timezone for calendar dates (IANA name or abbreviation)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # write command
    write_parser = subparsers.add_parser("write", help="Write a journal entry")
    write_parser.add_argument("--title", "-t", required=True, help="Entry title")
    write_parser.add_argument("--content", "-c", required=True, help="Entry content")
    write_parser.add_argument(
        "--mood", "-m",
        choices=MOOD_CHOICES,
        default=Mood.NEUTRAL.value,
        help="Mood tag (default: neutral)",
    )
    _add_style_arguments(write_parser)
    write_parser.set_defaults(func=handle_write)

    # edit command
    edit_parser = subparsers.add_parser("edit", help="Update a journal entry")
    edit_parser.add_argument("id", help="Entry ID")
    edit_parser.add_argument("--title", "-t", help="New title")
    edit_parser.add_argument("--content", "-c", help="New content")
    edit_parser.add_argument("--mood", "-m", choices=MOOD_CHOICES, help="New mood")
    _add_style_arguments(edit_parser)
    edit_parser.set_defaults(func=handle_edit)

    # delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a journal entry")
    delete_parser.add_argument("id", help="Entry ID")
    delete_parser.set_defaults(func=handle_delete)

    # list command
    list_parser = subparsers.add_parser("list", help="List journal entries")
    list_parser.add_argument(
        "--limit", "-n",
        type=int,
        default=20,
        help="Maximum entries to show (default: 20)",
    )
    list_parser.set_defaults(func=handle_list)

    # show command
    show_parser = subparsers.add_parser("show", help="Show a journal entry")
    show_parser.add_argument("id", help="Entry ID")
    show_parser.set_defaults(func=handle_show)

    # calendar command
    calendar_parser = subparsers.add_parser("calendar", help="Browse entries by date")
    calendar_parser.add_argument("--date", "-d", help="Show entries for a date (YYYY-MM-DD)")
    calendar_parser.set_defaults(func=handle_calendar)

    # insights command
    insights_parser = subparsers.add_parser("insights", help="Show mood insights")
    insights_parser.add_argument(
        "--range", "-r",
        choices=TIME_RANGE_CHOICES,
        default=DEFAULT_TIME_RANGE,
        help=f"Time range to analyze (default: {DEFAULT_TIME_RANGE})",
    )
    insights_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    insights_parser.set_defaults(func=handle_insights)

    # sentiment command
    sentiment_parser = subparsers.add_parser("sentiment", help="Score the sentiment of text")
    sentiment_parser.add_argument("text", help="Text to score")
    sentiment_parser.set_defaults(func=handle_sentiment)

    # quote command
    quote_parser = subparsers.add_parser("quote", help="Show an inspirational quote")
    quote_parser.set_defaults(func=handle_quote)

    # profile command
    profile_parser = subparsers.add_parser("profile", help="Profile operations")
    profile_subparsers = profile_parser.add_subparsers(dest="profile_command")

    # profile show
    profile_show_parser = profile_subparsers.add_parser("show", help="Show the profile")
    profile_show_parser.set_defaults(func=handle_profile_show)

    # profile set
    profile_set_parser = profile_subparsers.add_parser("set", help="Update the profile")
    profile_set_parser.add_argument("--name", help="Your name")
    profile_set_parser.add_argument("--email", help="Your email address")
    profile_set_parser.add_argument(
        "--reminders",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable daily reminders",
    )
    profile_set_parser.add_argument(
        "--theme",
        choices=[theme.value for theme in Theme],
        help="Display theme",
    )
    profile_set_parser.set_defaults(func=handle_profile_set)

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    args.timezone = resolve_timezone(args.timezone)

    try:
        return args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
