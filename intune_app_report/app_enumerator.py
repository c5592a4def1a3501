import logging
from typing import List

from .config import GRAPH_BETA
from .graph_client import GraphClient
from .models import Application


def list_apps(client: GraphClient) -> List[Application]:
    """All Intune mobile apps except the vendor/OS managed ones."""
    raw = client.get_collection(f"{GRAPH_BETA}/deviceAppManagement/mobileApps")
    apps = [Application.from_graph(a) for a in raw]
    deployable = [a for a in apps if not a.is_managed]
    logging.info(
        f"Found {len(apps)} mobile apps, {len(apps) - len(deployable)} managed apps skipped"
    )
    return deployable
