from abc import ABC, abstractmethod


class BaseDescriptionEnricher(ABC):
    """Contract for narrative description generators."""

    @abstractmethod
    def enrich(self, subject_name: str) -> str:
        """Generate a first-person narrative for the named tree.

        Args:
            subject_name: Tree name, used verbatim in the request.

        Returns:
            The generated text, unmodified.

        Raises:
            GenerationFailedError: on any failure.
        """
