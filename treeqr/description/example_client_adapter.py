"""Example text generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseChatClient and register the provider in DescriptionEnricherFactory.
"""

from typing import ClassVar

from treeqr.description.client_base import BaseChatClient


class ExampleClientAdapter(BaseChatClient):
    """Example adapter that returns a fixed first-person narrative.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "Hello, friend! I am a tree, rooted right where you are standing. "
        "I turn sunlight into shade, shelter birds in my branches and keep "
        "the soil beneath you in place."
    )

    def __init__(self) -> None:
        pass

    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, system_prompt, user_prompt
        return self.DEFAULT_RESPONSE
