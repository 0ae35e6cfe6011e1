"""One-off Google Cloud setup for the analytics pipeline.

Runs four steps in order: validate the service account, check Firestore
connectivity, create the export bucket and create the BigQuery dataset and
tables. Each step is logged; a failing step does not stop the next one, and
the exit status is non-zero when any step failed.
"""

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from health_tracker.adapters.bigquery_client import BigQueryWarehouseClient
from health_tracker.adapters.firestore_client import FirestoreConnectivityCheck
from health_tracker.adapters.gcs_storage_client import GcsStorageClient
from health_tracker.app_logging import configure_logging
from health_tracker.config import SetupSettings, parse_service_account_info
from health_tracker.domain.analytics import ANALYTICS_TABLES, Column

_logger = logging.getLogger(__name__)


class ConnectivityCheck(Protocol):
    def run(self) -> None:
        """Raise when the service cannot be reached."""


class BucketProvisioner(Protocol):
    bucket_name: str

    def ensure_bucket(self, location: str) -> bool:
        """Create the bucket if missing; return True when created."""


class WarehouseProvisioner(Protocol):
    dataset_id: str

    def ensure_dataset(self) -> bool:
        """Create the dataset if missing; return True when created."""

    def ensure_table(self, name: str, columns: tuple[Column, ...]) -> bool:
        """Create the table if missing; return True when created."""


@dataclass(frozen=True)
class StepResult:
    """Outcome of one setup step."""

    name: str
    ok: bool
    detail: str


def run_steps(steps: Sequence[tuple[str, Callable[[], str]]]) -> list[StepResult]:
    """Run every step, logging and recording failures without stopping."""
    results = []
    for name, step in steps:
        try:
            detail = step()
        except Exception as exc:
            _logger.exception("Setup step failed", extra={"step": name})
            results.append(StepResult(name=name, ok=False, detail=str(exc)))
            continue
        _logger.info("Setup step succeeded: %s", detail, extra={"step": name})
        results.append(StepResult(name=name, ok=True, detail=detail))
    return results


def build_steps(
    firestore: ConnectivityCheck,
    storage: BucketProvisioner,
    warehouse: WarehouseProvisioner,
    location: str,
) -> list[tuple[str, Callable[[], str]]]:
    def check_firestore() -> str:
        firestore.run()
        return "Firestore read/write check passed"

    def create_bucket() -> str:
        created = storage.ensure_bucket(location)
        state = "created" if created else "already exists"
        return f"Bucket {storage.bucket_name} {state}"

    def create_warehouse() -> str:
        created_dataset = warehouse.ensure_dataset()
        created_tables = [
            name
            for name, columns in ANALYTICS_TABLES.items()
            if warehouse.ensure_table(name, columns)
        ]
        state = "created" if created_dataset else "already exists"
        return (
            f"Dataset {warehouse.dataset_id} {state}; "
            f"created tables: {', '.join(created_tables) or 'none'}"
        )

    return [
        ("firestore", check_firestore),
        ("storage", create_bucket),
        ("bigquery", create_warehouse),
    ]


def main(settings: SetupSettings | None = None) -> int:
    """Entry point for the `health-tracker-setup-gcp` command."""
    configure_logging()
    resolved_settings = settings or SetupSettings()
    try:
        credentials_info = parse_service_account_info(
            resolved_settings.google_application_credentials_json
        )
    except ValueError:
        _logger.exception("Service account credentials are invalid")
        return 1
    _logger.info(
        "Using service account",
        extra={
            "project_id": credentials_info["project_id"],
            "client_email": credentials_info["client_email"],
        },
    )

    try:
        firestore = FirestoreConnectivityCheck.create(credentials_info)
        storage = GcsStorageClient.create(
            credentials_info, resolved_settings.gcs_analytics_bucket
        )
        warehouse = BigQueryWarehouseClient.create(
            credentials_info,
            resolved_settings.bigquery_dataset_id,
            resolved_settings.gcp_location,
        )
    except Exception:
        _logger.exception("Failed to create Google Cloud clients")
        return 1

    results = run_steps(
        build_steps(firestore, storage, warehouse, resolved_settings.gcp_location)
    )
    failed = [result.name for result in results if not result.ok]
    if failed:
        _logger.error("Setup finished with failures", extra={"failed_steps": failed})
        return 1
    _logger.info("Google Cloud setup complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
