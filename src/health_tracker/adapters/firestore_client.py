"""Firestore connectivity check."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from google.cloud import firestore

from health_tracker.adapters.gcp_credentials import credentials_from_info

CHECK_COLLECTION = "_setup_checks"


@dataclass
class FirestoreConnectivityCheck:
    """Writes, reads back and deletes a throwaway document."""

    client: firestore.Client

    @classmethod
    def create(cls, credentials_info: dict[str, str]) -> "FirestoreConnectivityCheck":
        credentials = credentials_from_info(credentials_info)
        return cls(
            client=firestore.Client(
                project=credentials_info["project_id"], credentials=credentials
            )
        )

    def run(self) -> None:
        """Raise if the round trip does not return what was written."""
        document = self.client.collection(CHECK_COLLECTION).document(uuid4().hex)
        written = {"checkedAt": datetime.now(tz=UTC).isoformat()}
        document.set(written)
        try:
            snapshot = document.get()
            if not snapshot.exists or snapshot.to_dict() != written:
                raise RuntimeError("Firestore check document did not round-trip")
        finally:
            document.delete()
