from abc import ABC, abstractmethod


class BaseChatClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the first generated choice as plain text."""
