import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from intune_app_report.config import AUTHORITY_HOST, GRAPH_SCOPE
from intune_app_report.errors import AuthError
from intune_app_report.token_provider import acquire_token

SECRET = "s3cr3t-value"


@patch("intune_app_report.token_provider.msal.ConfidentialClientApplication")
def test_acquire_token(mock_app_cls):
    mock_app_cls.return_value.acquire_token_for_client.return_value = {"access_token": "tok"}

    assert acquire_token("client", SECRET, "tenant") == "tok"

    mock_app_cls.assert_called_once_with(
        "client", authority=f"{AUTHORITY_HOST}/tenant", client_credential=SECRET
    )
    mock_app_cls.return_value.acquire_token_for_client.assert_called_once_with(scopes=[GRAPH_SCOPE])


@pytest.mark.parametrize(
    "client_id,secret,tenant,missing",
    [
        ("", SECRET, "tenant", "AZURE_CLIENT_ID"),
        ("client", "", "tenant", "AZURE_CLIENT_SECRET"),
        ("client", SECRET, "", "AZURE_TENANT_ID"),
    ],
)
@patch("intune_app_report.token_provider.msal.ConfidentialClientApplication")
def test_empty_inputs_rejected(mock_app_cls, client_id, secret, tenant, missing):
    with pytest.raises(AuthError, match=missing):
        acquire_token(client_id, secret, tenant)
    mock_app_cls.assert_not_called()


@patch("intune_app_report.token_provider.msal.ConfidentialClientApplication")
def test_rejected_credentials(mock_app_cls, caplog):
    mock_app_cls.return_value.acquire_token_for_client.return_value = {
        "error": "invalid_client",
        "error_description": "AADSTS7000215: Invalid client secret provided.",
    }
    with caplog.at_level(logging.DEBUG):
        with pytest.raises(AuthError, match="invalid_client") as excinfo:
            acquire_token("client", SECRET, "tenant")
    assert SECRET not in str(excinfo.value)
    assert SECRET not in caplog.text


@patch("intune_app_report.token_provider.msal.ConfidentialClientApplication")
def test_network_failure(mock_app_cls):
    mock_app_cls.return_value.acquire_token_for_client.side_effect = requests.ConnectionError("boom")
    with pytest.raises(AuthError, match="unreachable"):
        acquire_token("client", SECRET, "tenant")


@patch("intune_app_report.token_provider.msal.ConfidentialClientApplication")
def test_malformed_response(mock_app_cls):
    mock_app_cls.return_value.acquire_token_for_client.return_value = MagicMock(spec=[])
    with pytest.raises(AuthError, match="malformed_response"):
        acquire_token("client", SECRET, "tenant")
