from treeqr.description.base import BaseDescriptionEnricher
from treeqr.description.enricher import DescriptionEnricher
from treeqr.description.factory import DescriptionEnricherFactory

__all__ = ["BaseDescriptionEnricher", "DescriptionEnricher", "DescriptionEnricherFactory"]
