from typing import Any, Optional


class IntuneReportError(Exception):
    """Base class for every failure that stops a report run."""


class AuthError(IntuneReportError):
    pass


class ApiError(IntuneReportError):
    """A Graph request that did not come back with a 2xx status."""

    def __init__(
        self,
        status: Optional[int],
        body: Any,
        reason: str = "",
        url: str = "",
    ):
        self.status = status
        self.body = body
        self.reason = reason
        self.url = url
        super().__init__(self._describe())

    def _describe(self) -> str:
        status = self.status if self.status is not None else "no response"
        reason = f" {self.reason}" if self.reason else ""
        where = f" ({self.url})" if self.url else ""
        return f"Graph API error {status}{reason}{where}: {self.body}"


class InvalidArgument(IntuneReportError, ValueError):
    pass


class ResponseFormatError(IntuneReportError):
    """Graph returned a payload that does not have the expected shape."""


class GroupNotFound(IntuneReportError):
    pass


class AmbiguousGroupName(IntuneReportError):
    def __init__(self, display_name: str, group_ids):
        self.display_name = display_name
        self.group_ids = list(group_ids)
        super().__init__(
            f"{len(self.group_ids)} groups are named '{display_name}': "
            + ", ".join(self.group_ids)
        )
