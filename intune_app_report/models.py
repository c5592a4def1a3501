from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ResponseFormatError

MANAGED_APP_MARKER = "managed"


def _require(payload: Dict[str, Any], key: str, kind: str) -> Any:
    if not isinstance(payload, dict):
        raise ResponseFormatError(f"{kind} payload is not an object: {payload!r}")
    value = payload.get(key)
    if value is None:
        raise ResponseFormatError(f"{kind} payload is missing '{key}': {payload!r}")
    return value


@dataclass(frozen=True)
class Application:
    id: str
    display_name: str
    odata_type: str = ""

    @classmethod
    def from_graph(cls, payload: Dict[str, Any]) -> "Application":
        return cls(
            id=_require(payload, "id", "mobileApp"),
            display_name=_require(payload, "displayName", "mobileApp"),
            odata_type=payload.get("@odata.type") or "",
        )

    @property
    def is_managed(self) -> bool:
        # Case-sensitive on purpose: "#microsoft.graph.managedIOSStoreApp"
        return MANAGED_APP_MARKER in self.odata_type


@dataclass(frozen=True)
class AssignmentTarget:
    odata_type: str = ""
    group_id: Optional[str] = None


@dataclass(frozen=True)
class Assignment:
    target: AssignmentTarget
    id: Optional[str] = None
    intent: Optional[str] = None

    @classmethod
    def from_graph(cls, payload: Dict[str, Any]) -> "Assignment":
        target = _require(payload, "target", "mobileAppAssignment")
        if not isinstance(target, dict):
            raise ResponseFormatError(f"assignment target is not an object: {target!r}")
        return cls(
            target=AssignmentTarget(
                odata_type=target.get("@odata.type") or "",
                group_id=target.get("groupId") or None,
            ),
            id=payload.get("id"),
            intent=payload.get("intent"),
        )


@dataclass(frozen=True)
class Identity:
    id: str
    display_name: Optional[str] = None
    odata_type: str = ""
    user_principal_name: Optional[str] = None

    @classmethod
    def from_graph(cls, payload: Dict[str, Any]) -> "Identity":
        return cls(
            id=_require(payload, "id", "directoryObject"),
            display_name=payload.get("displayName"),
            odata_type=payload.get("@odata.type") or "",
            user_principal_name=payload.get("userPrincipalName"),
        )


@dataclass(frozen=True)
class Group:
    id: str
    display_name: str
    members: Optional[List[Identity]] = field(default=None, compare=False)

    @classmethod
    def from_graph(cls, payload: Dict[str, Any]) -> "Group":
        return cls(
            id=_require(payload, "id", "group"),
            display_name=_require(payload, "displayName", "group"),
        )

    def with_members(self, members: List[Identity]) -> "Group":
        return Group(id=self.id, display_name=self.display_name, members=list(members))


@dataclass(frozen=True)
class ReportRow:
    application_name: str
    group_names: str

    def as_csv_row(self) -> Dict[str, str]:
        return {"ApplicationNames": self.application_name, "GroupNames": self.group_names}
