"""Service-account credentials for Google Cloud clients."""

from google.oauth2.service_account import Credentials


def credentials_from_info(info: dict[str, str]) -> Credentials:
    """Build credentials from a parsed service-account key."""
    return Credentials.from_service_account_info(info)
