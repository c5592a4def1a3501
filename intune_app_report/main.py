import argparse
import logging
import sys
from pathlib import Path

from . import config
from .app_enumerator import list_apps
from .errors import IntuneReportError
from .graph_client import GraphClient
from .group_resolver import find_group_by_name
from .report_builder import MATCH_MODES, build_report, find_apps_assigned_to_group
from .report_writer import print_app_names, write_report_csv
from .token_provider import acquire_token


def _setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _connect() -> GraphClient:
    token = acquire_token(config.CLIENT_ID, config.CLIENT_SECRET, config.TENANT_ID)
    return GraphClient(token)


def _add_common_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )


def parse_group_args(argv=None):
    parser = argparse.ArgumentParser(
        description="List the Intune apps assigned to one Entra ID group."
    )
    parser.add_argument(
        "--group",
        help="Display name of the group. Prompted for when omitted.",
    )
    parser.add_argument(
        "--match",
        choices=MATCH_MODES,
        default="exact",
        help="How the group id is compared with assignment targets.",
    )
    _add_common_args(parser)
    return parser.parse_args(argv)


def parse_report_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Export every Intune app with the groups it is assigned to as CSV."
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(config.REPORT_FILENAME),
        help="CSV file to write (default: %(default)s in the current directory).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Apps resolved in parallel (default: sequential).",
    )
    _add_common_args(parser)
    return parser.parse_args(argv)


def apps_for_group(argv=None) -> int:
    args = parse_group_args(argv)
    _setup_logging(args.log_level)
    try:
        group_name = args.group or input("Group name: ").strip()
        client = _connect()
        group = find_group_by_name(client, group_name)
        logging.info(f"Group '{group.display_name}' has id {group.id}")
        apps = list_apps(client)
        names = find_apps_assigned_to_group(apps, group.id, client, match=args.match)
    except IntuneReportError as e:
        logging.error(str(e))
        return 1
    print_app_names(names)
    return 0


def export_report(argv=None) -> int:
    args = parse_report_args(argv)
    _setup_logging(args.log_level)
    try:
        client = _connect()
        apps = list_apps(client)
        rows = build_report(apps, client, workers=args.workers)
    except IntuneReportError as e:
        logging.error(str(e))
        logging.error(f"No report written to {args.output}")
        return 1
    write_report_csv(rows, args.output)
    return 0


def group_main():
    sys.exit(apps_for_group())


def report_main():
    sys.exit(export_report())


if __name__ == "__main__":
    report_main()
