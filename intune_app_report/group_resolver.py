import logging
from typing import Dict, List, Optional, Union

from .config import GRAPH_V1
from .errors import AmbiguousGroupName, GroupNotFound, InvalidArgument
from .graph_client import GraphClient
from .models import Group, Identity


def _odata_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def get_members(client: GraphClient, group_id: str) -> List[Identity]:
    raw = client.get_collection(f"{GRAPH_V1}/groups/{group_id}/members")
    return [Identity.from_graph(m) for m in raw]


def get_group(
    client: GraphClient,
    group_id: Optional[str] = None,
    display_name: Optional[str] = None,
    include_members: bool = False,
) -> Union[Group, List[Group]]:
    """
    Look a group up by id, by exact display name, or list every group.

    - group_id      -> a single Group
    - display_name  -> list of Groups (Graph does not enforce unique names)
    - neither       -> list of all Groups (first page)

    include_members fetches /members for the group(s) found. A name lookup
    with no match makes no further call.
    """
    if group_id and display_name:
        raise InvalidArgument("Look a group up by id or by display name, not both")

    if group_id:
        group = Group.from_graph(client.get(f"{GRAPH_V1}/groups/{group_id}"))
        if include_members:
            group = group.with_members(get_members(client, group.id))
        return group

    if display_name:
        raw = client.get_collection(
            f"{GRAPH_V1}/groups",
            params={"$filter": f"displayName eq {_odata_literal(display_name)}"},
        )
        groups = [Group.from_graph(g) for g in raw]
        if include_members and groups:
            groups = [g.with_members(get_members(client, g.id)) for g in groups]
        return groups

    return [Group.from_graph(g) for g in client.get_collection(f"{GRAPH_V1}/groups")]


def find_group_by_name(
    client: GraphClient, display_name: str, include_members: bool = False
) -> Group:
    """The single group carrying display_name; duplicates are an error."""
    if not display_name:
        raise InvalidArgument("A group display name is required")
    groups = get_group(client, display_name=display_name, include_members=include_members)
    if not groups:
        raise GroupNotFound(f"No group is named '{display_name}'")
    if len(groups) > 1:
        raise AmbiguousGroupName(display_name, [g.id for g in groups])
    return groups[0]


class GroupNameCache:
    """
    groupId -> displayName for the duration of one report.

    Apps tend to share a handful of groups, so each id is only fetched once.
    """

    def __init__(self, client: GraphClient):
        self.client = client
        self._names: Dict[str, str] = {}

    def display_name(self, group_id: str) -> str:
        if group_id not in self._names:
            group = get_group(self.client, group_id=group_id)
            logging.debug(f"Resolved group {group_id} -> {group.display_name}")
            self._names[group_id] = group.display_name
        return self._names[group_id]
