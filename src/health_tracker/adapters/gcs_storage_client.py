"""Cloud Storage client for analytics exports."""

import logging
from dataclasses import dataclass

from google.cloud import storage

from health_tracker.adapters.gcp_credentials import credentials_from_info
from health_tracker.services.analytics import StorageClient

_logger = logging.getLogger(__name__)


@dataclass
class GcsStorageClient(StorageClient):
    """Writes export files into one bucket."""

    client: storage.Client
    bucket_name: str

    @classmethod
    def create(cls, credentials_info: dict[str, str], bucket_name: str) -> "GcsStorageClient":
        credentials = credentials_from_info(credentials_info)
        client = storage.Client(
            project=credentials_info["project_id"], credentials=credentials
        )
        return cls(client=client, bucket_name=bucket_name)

    def upload_json(self, path: str, payload: str, metadata: dict[str, str]) -> None:
        blob = self.client.bucket(self.bucket_name).blob(path)
        blob.metadata = metadata
        blob.upload_from_string(payload, content_type="application/json")
        _logger.info("Uploaded export", extra={"bucket": self.bucket_name, "path": path})

    def ensure_bucket(self, location: str) -> bool:
        """Create the bucket if missing; return True when it was created."""
        bucket = self.client.bucket(self.bucket_name)
        if bucket.exists():
            return False
        bucket.storage_class = "STANDARD"
        bucket.iam_configuration.uniform_bucket_level_access_enabled = True
        self.client.create_bucket(bucket, location=location)
        return True
