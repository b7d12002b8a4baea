from collections.abc import Callable

from firebase_admin import db
from firebase_admin.exceptions import FirebaseError
from google.auth.exceptions import GoogleAuthError

from treeqr.database.connection import get_reference
from treeqr.logging.logger import Log
from treeqr.trees.exceptions import RecordNotFoundError, StoreUnavailableError
from treeqr.trees.models import TreeRecord
from treeqr.trees.store_base import BaseRecordStore


class TreeRepository(BaseRecordStore):
    """Read operations for tree documents in the Realtime Database."""

    def __init__(
        self,
        trees_path: str = "trees",
        reference_factory: Callable[[str], db.Reference] = get_reference,
    ) -> None:
        self._trees_path = trees_path.strip("/")
        self._reference_factory = reference_factory

    def fetch(self, tree_id: str) -> TreeRecord:
        """Fetch the tree stored at ``{trees_path}/{tree_id}``.

        Raises:
            RecordNotFoundError: if no tree with this ID exists, or the ID is
                not a valid database path.
            StoreUnavailableError: if the database cannot be read or the
                document does not match the tree schema.
        """
        try:
            ref = self._reference_factory(f"{self._trees_path}/{tree_id}")
        except ValueError as exc:
            Log.debug("Rejected tree id", tree_id=tree_id, error=exc)
            raise RecordNotFoundError(f"Tree {tree_id} not found") from exc

        try:
            document = ref.get()
        except (FirebaseError, GoogleAuthError) as exc:
            raise StoreUnavailableError(f"Tree store unavailable: {exc}") from exc

        if document is None:
            raise RecordNotFoundError(f"Tree {tree_id} not found")

        return TreeRecord.from_document(document)
