"""CLI entry point for the run-day planner."""

import argparse
import logging

from weatherrun.advice.labels import format_run_time
from weatherrun.config.loader import get_config_value, load_config, set_config_value
from weatherrun.pipeline.recommend_pipeline import RecommendPipeline, default_preferences
from weatherrun.reporting.formatters import (
    format_report_json,
    format_report_text,
    format_share_text,
)
from weatherrun.storage import preferences_repo
from weatherrun.storage.database import connect, run_migrations

DEFAULT_CONFIG = "configs/default.yaml"
DEFAULT_DB = "data/weatherrun.db"


def parse_run_time(value: str) -> tuple[int, int]:
    """Parse 'HH:MM' (24-hour) into (hour, minute)."""
    try:
        h, m = value.split(":")
        hour, minute = int(h), int(m)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid run time {value!r}, use HH:MM"
        ) from None
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise argparse.ArgumentTypeError(f"run time out of range: {value!r}")
    return hour, minute


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherrun",
        description="Find the best day to run this week",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="SQLite DB path")

    sub = parser.add_subparsers(dest="command")

    # runs
    runs_p = sub.add_parser("runs", help="Score the upcoming run days")
    runs_p.add_argument("location", nargs="?", help="Zip code or city")
    runs_p.add_argument(
        "--time", type=parse_run_time, help="Run start time as HH:MM (24-hour)"
    )
    runs_p.add_argument("--json", action="store_true", help="Print JSON")
    runs_p.add_argument(
        "--share", type=int, metavar="INDEX",
        help="Print the share report for the day at INDEX",
    )

    # prefs show / prefs set
    prefs_p = sub.add_parser("prefs", help="Stored preferences")
    prefs_sub = prefs_p.add_subparsers(dest="prefs_command")
    prefs_sub.add_parser("show", help="Display stored preferences")
    pset_p = prefs_sub.add_parser("set", help="Set a preference")
    pset_p.add_argument("keyvalue", help="location=..., time=HH:MM, hour=H or minute=M")

    # config show / get / set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. planner.window_days")
    set_p = config_sub.add_parser("set", help="Validate a config override")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "runs":
        return _cmd_runs(config, args)
    elif args.command == "prefs":
        return _cmd_prefs(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_runs(config, args) -> int:
    hour, minute = args.time if args.time else (None, None)
    pipeline = RecommendPipeline(config, args.db)
    report = pipeline.run(location=args.location, hour=hour, minute=minute)

    if report.error:
        print(format_report_text(report))
        return 1

    if args.share is not None:
        if not 0 <= args.share < len(report.days):
            print(f"Error: no run day at index {args.share}")
            return 1
        print(format_share_text(report, report.days[args.share]))
    elif args.json:
        print(format_report_json(report))
    else:
        print(format_report_text(report))
    return 0


def _cmd_prefs(config, args) -> int:
    conn = connect(args.db)
    try:
        run_migrations(conn)
        defaults = default_preferences(config)
        if args.prefs_command == "show":
            prefs = preferences_repo.load_preferences(conn, defaults)
            print(f"Location: {prefs.location or '(not set)'}")
            print(f"Run time: {format_run_time(prefs.run_hour, prefs.run_minute)}")
            return 0
        elif args.prefs_command == "set":
            return _set_preference(conn, args.keyvalue)
        else:
            print("Use: prefs show | prefs set key=value")
            return 1
    finally:
        conn.close()


def _set_preference(conn, kv: str) -> int:
    if "=" not in kv:
        print("Error: use key=value format")
        return 1
    key, value = (part.strip() for part in kv.split("=", 1))
    try:
        if key == "location":
            preferences_repo.set_preference(conn, preferences_repo.KEY_LOCATION, value)
        elif key == "time":
            hour, minute = parse_run_time(value)
            preferences_repo.set_preference(conn, preferences_repo.KEY_RUN_HOUR, str(hour))
            preferences_repo.set_preference(conn, preferences_repo.KEY_RUN_MINUTE, str(minute))
        elif key in ("hour", "minute"):
            number = int(value)
            upper = 23 if key == "hour" else 59
            if not 0 <= number <= upper:
                raise ValueError(f"{key} must be between 0 and {upper}")
            repo_key = (
                preferences_repo.KEY_RUN_HOUR if key == "hour"
                else preferences_repo.KEY_RUN_MINUTE
            )
            preferences_repo.set_preference(conn, repo_key, str(number))
        else:
            print(f"Error: unknown preference {key!r}")
            return 1
    except (ValueError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Set {key} = {value}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2, exclude={"provider": {"api_key"}}))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key.strip()))
            return 0
        except (KeyError, AttributeError) as e:
            print(f"Error: {e}")
            return 1
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key | config set key=value")
        return 1
