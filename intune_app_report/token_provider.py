import logging

import msal
import requests

from .config import AUTHORITY_HOST, GRAPH_SCOPE
from .errors import AuthError


def acquire_token(client_id: str, client_secret: str, tenant_id: str) -> str:
    """
    Client-credentials token for Microsoft Graph.

    Every failure (missing inputs, network, rejected credentials, a response
    without an access token) becomes an AuthError. The secret never appears in
    logs or in the error message.
    """
    missing = [
        name
        for name, value in (
            ("AZURE_CLIENT_ID", client_id),
            ("AZURE_CLIENT_SECRET", client_secret),
            ("AZURE_TENANT_ID", tenant_id),
        )
        if not value
    ]
    if missing:
        raise AuthError(f"Missing credentials: {', '.join(missing)}")

    logging.info(f"Requesting Graph token for client {client_id} in tenant {tenant_id}")
    try:
        app = msal.ConfidentialClientApplication(
            client_id,
            authority=f"{AUTHORITY_HOST}/{tenant_id}",
            client_credential=client_secret,
        )
        result = app.acquire_token_for_client(scopes=[GRAPH_SCOPE])
    except requests.RequestException as e:
        raise AuthError(f"Token endpoint unreachable: {e}") from e
    except ValueError as e:
        # msal raises ValueError for an unknown authority / tenant
        raise AuthError(f"Token request rejected: {e}") from e

    if not isinstance(result, dict) or not result.get("access_token"):
        error = result.get("error", "unknown_error") if isinstance(result, dict) else "malformed_response"
        description = result.get("error_description", "") if isinstance(result, dict) else ""
        raise AuthError(f"Failed to acquire token: {error} {description}".strip())
    return result["access_token"]
