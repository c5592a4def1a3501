from typing import Iterable, List

from .config import GRAPH_BETA
from .errors import InvalidArgument, ResponseFormatError
from .graph_client import GraphClient
from .models import Assignment


def get_assignments(client: GraphClient, application_id: str) -> List[Assignment]:
    if not application_id:
        raise InvalidArgument("An application id is required to read assignments")

    app = client.get(
        f"{GRAPH_BETA}/deviceAppManagement/mobileApps/{application_id}",
        params={"$expand": "categories,assignments"},
    )
    # Graph leaves out an expansion that has nothing in it
    raw = app.get("assignments") or []
    if not isinstance(raw, list):
        raise ResponseFormatError(f"assignments of app {application_id} is not a list")
    return [Assignment.from_graph(a) for a in raw]


def assigned_group_ids(assignments: Iterable[Assignment]) -> List[str]:
    """Group ids in assignment order; allUsers/allDevices targets have none."""
    return [a.target.group_id for a in assignments if a.target.group_id]
