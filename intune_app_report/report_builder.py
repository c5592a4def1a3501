import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Sequence

from .assignment_resolver import assigned_group_ids, get_assignments
from .errors import InvalidArgument
from .graph_client import GraphClient
from .group_resolver import GroupNameCache
from .models import Application, ReportRow

MATCH_MODES = ("exact", "pattern")


def _is_assigned(group_id: str, assigned_ids: Sequence[str], match: str) -> bool:
    if match == "exact":
        return group_id in assigned_ids
    # Legacy regex containment: "g.1" also hits "g-1", "g1" also hits "xg1y"
    return any(re.search(group_id, gid) for gid in assigned_ids)


def find_apps_assigned_to_group(
    apps: Iterable[Application],
    group_id: str,
    client: GraphClient,
    match: str = "exact",
) -> List[str]:
    """Display names of the apps that have group_id among their assignment targets."""
    if not group_id:
        raise InvalidArgument("A group id is required")
    if match not in MATCH_MODES:
        raise InvalidArgument(f"Unknown match mode '{match}', expected one of {MATCH_MODES}")

    names = []
    for app in apps:
        group_ids = assigned_group_ids(get_assignments(client, app.id))
        if _is_assigned(group_id, group_ids, match):
            names.append(app.display_name)
    logging.info(f"{len(names)} apps are assigned to group {group_id}")
    return names


def _report_row(app: Application, client: GraphClient, names: GroupNameCache) -> ReportRow:
    group_ids = assigned_group_ids(get_assignments(client, app.id))
    group_names = [names.display_name(gid) for gid in group_ids]
    return ReportRow(application_name=app.display_name, group_names=", ".join(group_names))


def build_report(
    apps: Iterable[Application], client: GraphClient, workers: int = 1
) -> List[ReportRow]:
    """
    One ReportRow per application, in input order.

    Group names keep assignment order. An app assigned to nobody still gets a
    row, with empty group names. The first failing request aborts the whole
    build.
    """
    apps = list(apps)
    names = GroupNameCache(client)
    if workers <= 1:
        rows = [_report_row(app, client, names) for app in apps]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            rows = list(pool.map(lambda app: _report_row(app, client, names), apps))
    logging.info(f"Built report with {len(rows)} rows")
    return rows
