from unittest.mock import MagicMock

import pytest
from firebase_admin import exceptions as firebase_exceptions
from google.auth.exceptions import RefreshError

from treeqr.database.repositories.tree_repository import TreeRepository
from treeqr.trees.exceptions import RecordNotFoundError, StoreUnavailableError
from treeqr.trees.models import TreeRecord
from treeqr.trees.store_base import Absent, Found, Unavailable


def _make_repo(document: object = None) -> tuple[TreeRepository, MagicMock, MagicMock]:
    """Build a repository whose references return ``document``."""
    ref = MagicMock()
    ref.get.return_value = document
    factory = MagicMock(return_value=ref)
    return TreeRepository(trees_path="trees", reference_factory=factory), factory, ref


class TestFetch:
    def test_returns_tree_record_when_found(self, full_document: dict) -> None:
        repo, _factory, _ref = _make_repo(full_document)

        result = repo.fetch("tree-7")

        assert isinstance(result, TreeRecord)
        assert result.id == "tree-7"
        assert result.name == "Neem"

    def test_reads_tree_path(self) -> None:
        repo, factory, _ref = _make_repo({"Name": "Oak"})

        repo.fetch("tree-42")

        factory.assert_called_once_with("trees/tree-42")

    def test_strips_slashes_from_trees_path(self) -> None:
        factory = MagicMock()
        factory.return_value.get.return_value = {"Name": "Oak"}
        repo = TreeRepository(trees_path="/trees/", reference_factory=factory)

        repo.fetch("a")

        factory.assert_called_once_with("trees/a")

    def test_returns_raw_record_without_normalizing(self, banyan_document: dict) -> None:
        repo, _factory, _ref = _make_repo(banyan_document)

        result = repo.fetch("tree-42")

        assert result.classification is None
        assert result.images is None

    def test_raises_not_found_when_missing(self) -> None:
        repo, _factory, _ref = _make_repo(None)

        with pytest.raises(RecordNotFoundError, match="Tree missing not found"):
            repo.fetch("missing")

    def test_raises_not_found_for_invalid_path(self) -> None:
        factory = MagicMock(side_effect=ValueError("Invalid path"))
        repo = TreeRepository(reference_factory=factory)

        with pytest.raises(RecordNotFoundError):
            repo.fetch("bad.id")

    def test_raises_unavailable_on_firebase_error(self) -> None:
        repo, _factory, ref = _make_repo()
        ref.get.side_effect = firebase_exceptions.UnavailableError("down")

        with pytest.raises(StoreUnavailableError, match="Tree store unavailable"):
            repo.fetch("tree-42")

    def test_raises_unavailable_on_auth_error(self) -> None:
        repo, _factory, ref = _make_repo()
        ref.get.side_effect = RefreshError("token expired")

        with pytest.raises(StoreUnavailableError):
            repo.fetch("tree-42")

    def test_raises_unavailable_on_malformed_document(self) -> None:
        repo, _factory, _ref = _make_repo(["not", "a", "tree"])

        with pytest.raises(StoreUnavailableError):
            repo.fetch("tree-42")


class TestLookup:
    def test_found(self, banyan_document: dict) -> None:
        repo, _factory, _ref = _make_repo(banyan_document)

        result = repo.lookup("tree-42")

        assert isinstance(result, Found)
        assert result.record.name == "Banyan"

    def test_absent(self) -> None:
        repo, _factory, _ref = _make_repo(None)

        assert repo.lookup("missing") == Absent("missing")

    def test_unavailable(self) -> None:
        repo, _factory, ref = _make_repo()
        ref.get.side_effect = firebase_exceptions.UnavailableError("down")

        result = repo.lookup("tree-42")

        assert isinstance(result, Unavailable)
        assert result.tree_id == "tree-42"
        assert isinstance(result.cause, StoreUnavailableError)
