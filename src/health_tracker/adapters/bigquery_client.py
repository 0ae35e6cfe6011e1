"""BigQuery client for the analytics warehouse."""

from dataclasses import dataclass

from google.api_core.exceptions import NotFound
from google.cloud import bigquery

from health_tracker.adapters.gcp_credentials import credentials_from_info
from health_tracker.domain.analytics import CLUSTERING_FIELDS, PARTITION_FIELD, Column
from health_tracker.services.analytics import WarehouseClient

DATASET_DESCRIPTION = "Health tracker analytics warehouse for ML and trend analysis"


def schema_fields(columns: tuple[Column, ...]) -> list[bigquery.SchemaField]:
    return [
        bigquery.SchemaField(column.name, column.type, mode=column.mode)
        for column in columns
    ]


@dataclass
class BigQueryWarehouseClient(WarehouseClient):
    """Warehouse access scoped to one dataset."""

    client: bigquery.Client
    dataset_id: str
    location: str = "US"

    @classmethod
    def create(
        cls, credentials_info: dict[str, str], dataset_id: str, location: str
    ) -> "BigQueryWarehouseClient":
        credentials = credentials_from_info(credentials_info)
        client = bigquery.Client(
            project=credentials_info["project_id"], credentials=credentials
        )
        return cls(client=client, dataset_id=dataset_id, location=location)

    @property
    def dataset_ref(self) -> str:
        return f"{self.client.project}.{self.dataset_id}"

    def insert_rows(self, table: str, rows: list[dict[str, object]]) -> None:
        errors = self.client.insert_rows_json(f"{self.dataset_ref}.{table}", rows)
        if errors:
            raise RuntimeError(f"Failed to insert rows into {table}: {errors}")

    def query(self, sql: str, parameters: dict[str, int]) -> list[dict[str, object]]:
        job_config = bigquery.QueryJobConfig(
            default_dataset=self.dataset_ref,
            query_parameters=[
                bigquery.ScalarQueryParameter(name, "INT64", value)
                for name, value in parameters.items()
            ],
        )
        rows = self.client.query(sql, job_config=job_config, location=self.location)
        return [dict(row.items()) for row in rows.result()]

    def ensure_dataset(self) -> bool:
        """Create the dataset if missing; return True when it was created."""
        try:
            self.client.get_dataset(self.dataset_ref)
        except NotFound:
            dataset = bigquery.Dataset(self.dataset_ref)
            dataset.location = self.location
            dataset.description = DATASET_DESCRIPTION
            self.client.create_dataset(dataset)
            return True
        return False

    def ensure_table(self, name: str, columns: tuple[Column, ...]) -> bool:
        """Create a partitioned, clustered table if missing."""
        table_ref = f"{self.dataset_ref}.{name}"
        try:
            self.client.get_table(table_ref)
        except NotFound:
            table = bigquery.Table(table_ref, schema=schema_fields(columns))
            table.time_partitioning = bigquery.TimePartitioning(
                type_=bigquery.TimePartitioningType.DAY, field=PARTITION_FIELD
            )
            table.clustering_fields = list(CLUSTERING_FIELDS)
            self.client.create_table(table)
            return True
        return False
