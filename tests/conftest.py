from typing import Any, Dict, List, Optional

import pytest

from intune_app_report.config import GRAPH_BETA, GRAPH_V1
from intune_app_report.errors import ApiError

APPS_URL = f"{GRAPH_BETA}/deviceAppManagement/mobileApps"
GROUPS_URL = f"{GRAPH_V1}/groups"


def route_key(url: str, params: Optional[Dict[str, Any]] = None) -> str:
    if not params:
        return url
    return url + "?" + "&".join(f"{k}={params[k]}" for k in sorted(params))


class FakeGraphClient:
    """In-memory stand-in for GraphClient keyed by url (+ query params)."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = dict(routes or {})
        self.calls: List[str] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        key = route_key(url, params)
        self.calls.append(key)
        if key not in self.routes:
            raise ApiError(404, f"no fake route for {key}", reason="Not Found", url=url)
        payload = self.routes[key]
        if isinstance(payload, ApiError):
            raise payload
        return payload

    def get_collection(self, url: str, params: Optional[Dict[str, Any]] = None):
        return self.get(url, params)["value"]


class FakeTenant:
    """Builds the routes of a small tenant: apps, their assignments and groups."""

    def __init__(self):
        self.apps: List[Dict[str, Any]] = []
        self.routes: Dict[str, Any] = {}

    def add_group(self, group_id: str, display_name: str, members=None):
        self.routes[f"{GROUPS_URL}/{group_id}"] = {"id": group_id, "displayName": display_name}
        self.routes[f"{GROUPS_URL}/{group_id}/members"] = {"value": members or []}
        return self

    def add_app(self, app_id: str, name: str, group_ids=(), odata_type="#microsoft.graph.win32LobApp"):
        self.apps.append({"id": app_id, "displayName": name, "@odata.type": odata_type})
        assignments = [
            {
                "id": f"{app_id}_{gid}",
                "intent": "required",
                "target": {"@odata.type": "#microsoft.graph.groupAssignmentTarget", "groupId": gid},
            }
            for gid in group_ids
        ]
        self.routes[
            route_key(f"{APPS_URL}/{app_id}", {"$expand": "categories,assignments"})
        ] = {"id": app_id, "displayName": name, "categories": [], "assignments": assignments}
        return self

    def client(self) -> FakeGraphClient:
        routes = dict(self.routes)
        routes[APPS_URL] = {"value": list(self.apps)}
        return FakeGraphClient(routes)


@pytest.fixture
def tenant():
    return FakeTenant()
