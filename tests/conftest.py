from typing import Any

import pytest

from treeqr.trees.exceptions import RecordNotFoundError, StoreUnavailableError
from treeqr.trees.models import TreeRecord
from treeqr.trees.store_base import BaseRecordStore


class InMemoryRecordStore(BaseRecordStore):
    """Record store backed by a dict of raw documents."""

    def __init__(
        self,
        documents: dict[str, Any] | None = None,
        unavailable: bool = False,
    ) -> None:
        self.documents = documents or {}
        self.unavailable = unavailable
        self.fetched: list[str] = []

    def fetch(self, tree_id: str) -> TreeRecord:
        self.fetched.append(tree_id)
        if self.unavailable:
            raise StoreUnavailableError("store offline")
        document = self.documents.get(tree_id)
        if document is None:
            raise RecordNotFoundError(f"Tree {tree_id} not found")
        return TreeRecord.from_document(document)


@pytest.fixture()
def banyan_document() -> dict[str, Any]:
    """A stored tree without any of the optional collections."""
    return {"ID": "tree-42", "Name": "Banyan", "Published": True, "QR": True}


@pytest.fixture()
def full_document() -> dict[str, Any]:
    """A stored tree with every field populated."""
    return {
        "ID": "tree-7",
        "Name": "Neem",
        "Published": True,
        "QR": True,
        "Saved": False,
        "volunteerName": "Asha",
        "timestamp": "2024-03-01T10:00:00Z",
        "botanical": "Azadirachta indica",
        "category": "Medicinal",
        "classification": {"family": "Meliaceae", "genus": "Azadirachta"},
        "description": "Evergreen shade tree.",
        "environmentalBenefits": "Purifies air.",
        "images": [{"url": "https://img.example/neem.jpg", "caption": "Neem canopy"}],
        "lastUpdated": "2024-04-11",
        "location": {"campus": "North", "lat": "12.97"},
        "medicinalBenefits": "Antibacterial leaves.",
        "native": "India",
        "uid": "user-1",
    }


@pytest.fixture()
def make_store() -> type[InMemoryRecordStore]:
    """Factory for in-memory record stores: ``make_store({"id": doc})``."""
    return InMemoryRecordStore
