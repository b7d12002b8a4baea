class DescriptionError(Exception):
    """Base exception for description generation."""


class GenerationFailedError(DescriptionError):
    """Raised when a description could not be generated."""


class GenerationNetworkError(GenerationFailedError):
    """Raised when the generation endpoint call fails due to network/infrastructure issues."""
