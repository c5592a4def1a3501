import os
import dotenv

dotenv.load_dotenv()

TENANT_ID = os.getenv("AZURE_TENANT_ID", "")
CLIENT_ID = os.getenv("AZURE_CLIENT_ID", "")
CLIENT_SECRET = os.getenv("AZURE_CLIENT_SECRET", "")

AUTHORITY_HOST = os.getenv("AZURE_AUTHORITY_HOST", "https://login.microsoftonline.com")
GRAPH_ROOT = os.getenv("GRAPH_ROOT", "https://graph.microsoft.com").rstrip("/")
GRAPH_SCOPE = f"{GRAPH_ROOT}/.default"

# Intune app endpoints only exist on beta, groups are read from v1.0
GRAPH_BETA = f"{GRAPH_ROOT}/beta"
GRAPH_V1 = f"{GRAPH_ROOT}/v1.0"

GRAPH_TIMEOUT = int(os.getenv("GRAPH_TIMEOUT", "120"))

REPORT_FILENAME = "intune_app_report.csv"
