import json
from dataclasses import dataclass, field
from types import SimpleNamespace

import pytest

from health_tracker import provisioning
from health_tracker.config import SERVICE_ACCOUNT_FIELDS, SetupSettings
from health_tracker.domain.analytics import ANALYTICS_TABLES, Column
from health_tracker.provisioning import build_steps, main, run_steps

CREDENTIALS = json.dumps({name: f"{name}-value" for name in SERVICE_ACCOUNT_FIELDS})


@dataclass
class FakeFirestore:
    error: Exception | None = None
    runs: int = 0

    def run(self) -> None:
        self.runs += 1
        if self.error is not None:
            raise self.error


@dataclass
class FakeBucket:
    bucket_name: str = "bucket"
    exists: bool = False
    locations: list[str] = field(default_factory=list)

    def ensure_bucket(self, location: str) -> bool:
        self.locations.append(location)
        return not self.exists


@dataclass
class FakeWarehouse:
    dataset_id: str = "cht_analytics"
    existing_tables: set[str] = field(default_factory=set)
    tables: list[str] = field(default_factory=list)

    def ensure_dataset(self) -> bool:
        return True

    def ensure_table(self, name: str, columns: tuple[Column, ...]) -> bool:
        self.tables.append(name)
        return name not in self.existing_tables


def test_run_steps_continues_after_failure() -> None:
    def broken() -> str:
        raise RuntimeError("no access")

    results = run_steps([("first", broken), ("second", lambda: "done")])

    assert [(result.name, result.ok) for result in results] == [
        ("first", False),
        ("second", True),
    ]
    assert results[0].detail == "no access"
    assert results[1].detail == "done"


def test_build_steps_create_every_table() -> None:
    bucket = FakeBucket(exists=True)
    warehouse = FakeWarehouse(existing_tables={"food_entries"})

    results = run_steps(build_steps(FakeFirestore(), bucket, warehouse, "EU"))

    assert [result.name for result in results] == ["firestore", "storage", "bigquery"]
    assert all(result.ok for result in results)
    assert results[1].detail == "Bucket bucket already exists"
    assert bucket.locations == ["EU"]
    assert warehouse.tables == list(ANALYTICS_TABLES)
    assert "food_entries" not in results[2].detail
    assert "mood_entries" in results[2].detail


@pytest.mark.parametrize("raw", [None, "not json", json.dumps({"type": "service_account"})])
def test_main_rejects_invalid_credentials(raw: str | None) -> None:
    assert main(SetupSettings(google_application_credentials_json=raw)) == 1


def _patch_clients(monkeypatch, firestore: FakeFirestore) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(
        provisioning,
        "FirestoreConnectivityCheck",
        SimpleNamespace(create=lambda info: firestore),
    )
    monkeypatch.setattr(
        provisioning,
        "GcsStorageClient",
        SimpleNamespace(create=lambda info, bucket: FakeBucket(bucket_name=bucket)),
    )
    monkeypatch.setattr(
        provisioning,
        "BigQueryWarehouseClient",
        SimpleNamespace(
            create=lambda info, dataset, location: FakeWarehouse(dataset_id=dataset)
        ),
    )


def test_main_succeeds_when_every_step_passes(monkeypatch) -> None:
    firestore = FakeFirestore()
    _patch_clients(monkeypatch, firestore)

    assert main(SetupSettings(google_application_credentials_json=CREDENTIALS)) == 0
    assert firestore.runs == 1


def test_main_fails_when_a_step_fails(monkeypatch) -> None:
    _patch_clients(monkeypatch, FakeFirestore(error=RuntimeError("denied")))

    assert main(SetupSettings(google_application_credentials_json=CREDENTIALS)) == 1
