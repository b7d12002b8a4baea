from treeqr.config.settings import Settings
from treeqr.database.repositories.tree_repository import TreeRepository
from treeqr.description.base import BaseDescriptionEnricher
from treeqr.description.factory import DescriptionEnricherFactory
from treeqr.logging.logger import Log
from treeqr.pages.renderer import PageRenderer
from treeqr.speech.audio_proxy import AudioProxy
from treeqr.trees.exceptions import RecordNotFoundError
from treeqr.trees.models import NormalizedTreeRecord
from treeqr.trees.normalizer import normalize
from treeqr.trees.store_base import Absent, BaseRecordStore, Unavailable


class TreePipeline:
    """Resolves a tree identifier into a page or a generated description.

    Pipeline: fetch -> normalize -> render | enrich. Steps run strictly in order.
    """

    def __init__(
        self,
        store: BaseRecordStore,
        enricher: BaseDescriptionEnricher,
        renderer: PageRenderer,
    ) -> None:
        self._store = store
        self._enricher = enricher
        self._renderer = renderer

    def load(self, tree_id: str) -> NormalizedTreeRecord:
        """Fetch and normalize a tree record.

        Raises:
            RecordNotFoundError: if the tree does not exist.
            StoreUnavailableError: if the store cannot be read.
        """
        result = self._store.lookup(tree_id)
        if isinstance(result, Absent):
            raise RecordNotFoundError(f"Tree {tree_id} not found")
        if isinstance(result, Unavailable):
            raise result.cause
        record = normalize(result.record)
        Log.info(
            "Loaded tree",
            tree_id=tree_id,
            images=len(record.images),
            classification_fields=len(record.classification),
        )
        return record

    def render_page(self, tree_id: str) -> str:
        """Render the HTML page for a tree."""
        return self._renderer.render(self.load(tree_id))

    def describe(self, tree_id: str) -> str:
        """Generate a first-person description for a tree.

        Raises:
            GenerationFailedError: if the description could not be generated.
        """
        record = self.load(tree_id)
        return self._enricher.enrich(record.name)


def build_pipeline(settings: Settings) -> TreePipeline:
    """Build a TreePipeline with all required adapters."""
    return TreePipeline(
        store=TreeRepository(trees_path=settings.firebase_trees_path),
        enricher=DescriptionEnricherFactory.create(settings),
        renderer=PageRenderer(),
    )


def build_audio_proxy(settings: Settings) -> AudioProxy:
    """Build the process-wide proxy to the speech synthesis service."""
    return AudioProxy(
        base_url=settings.tts_base_url,
        timeout_seconds=settings.tts_timeout_seconds,
        chunk_size=settings.tts_chunk_size,
    )
