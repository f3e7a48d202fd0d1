import logging
import os
from google.oauth2 import service_account
import google.auth

logger = logging.getLogger(__name__)


def load_credentials():
    # Mounted service account first (container secret), then ADC.
    svc_path = os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "/secrets/service-account.json")
    if os.path.exists(svc_path):
        logger.debug("using service account file %s", svc_path)
        return service_account.Credentials.from_service_account_file(
            svc_path, scopes=["https://www.googleapis.com/auth/bigquery"]
        )
    creds, _ = google.auth.default(scopes=["https://www.googleapis.com/auth/bigquery"])
    return creds


def resolve_project_id(creds):
    return (
        getattr(creds, "project_id", None)
        or os.getenv("BQ_PROJECT")
        or os.getenv("GOOGLE_CLOUD_PROJECT")
        or os.getenv("GCP_PROJECT")
    )
