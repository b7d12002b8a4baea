from abc import ABC, abstractmethod
from dataclasses import dataclass

from treeqr.trees.exceptions import RecordNotFoundError, StoreUnavailableError
from treeqr.trees.models import TreeRecord


@dataclass(frozen=True)
class Found:
    """The store returned a document."""

    record: TreeRecord


@dataclass(frozen=True)
class Absent:
    """No document exists at the identifier."""

    tree_id: str


@dataclass(frozen=True)
class Unavailable:
    """The store could not be read."""

    tree_id: str
    cause: StoreUnavailableError


FetchResult = Found | Absent | Unavailable


class BaseRecordStore(ABC):
    """Contract for read-only tree record stores."""

    @abstractmethod
    def fetch(self, tree_id: str) -> TreeRecord:
        """Fetch the raw (not normalized) record stored at an identifier.

        Raises:
            RecordNotFoundError: if no document exists at the identifier.
            StoreUnavailableError: on transport, auth or deserialization failure.
        """

    def lookup(self, tree_id: str) -> FetchResult:
        """Fetch a record and report the outcome as a tagged result."""
        try:
            return Found(self.fetch(tree_id))
        except RecordNotFoundError:
            return Absent(tree_id)
        except StoreUnavailableError as exc:
            return Unavailable(tree_id, exc)
