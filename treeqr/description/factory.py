from typing import ClassVar

from treeqr.config.settings import Settings
from treeqr.description.base import BaseDescriptionEnricher
from treeqr.description.enricher import DescriptionEnricher
from treeqr.description.example_client_adapter import ExampleClientAdapter
from treeqr.description.openai_client_adapter import OpenAIClientAdapter


class DescriptionEnricherFactory:
    """Creates the configured description enricher."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDescriptionEnricher:
        """Create a configured enricher from application settings."""
        provider = settings.description_provider.lower()
        if provider == "example":
            return DescriptionEnricher(
                client=ExampleClientAdapter(),
                model="example",
            )
        client = OpenAIClientAdapter(
            api_key=settings.description_api_key,
            timeout_seconds=settings.description_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return DescriptionEnricher(
            client=client,
            model=settings.description_model_name,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.description_base_url or "").strip()
            if not url:
                raise ValueError(
                    "description_base_url is required for "
                    "description_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return (settings.description_base_url or "").strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown description provider '{provider}'. Choose from: {supported}"
        )
