"""AI-generated first-person tree descriptions."""

from pathlib import Path

from treeqr.description.base import BaseDescriptionEnricher
from treeqr.description.client_base import BaseChatClient
from treeqr.description.prompt_loader import load_prompt_template, load_system_prompt
from treeqr.logging.logger import Log


class DescriptionEnricher(BaseDescriptionEnricher):
    """Asks a text generation provider to let the tree introduce itself.

    Every call performs a fresh generation; results are not cached.
    """

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)

    def enrich(self, subject_name: str) -> str:
        prompt = self._build_prompt(subject_name)
        Log.debug(f"Description prompt:\n{prompt}")

        description = self._client.create_chat_completion(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.info("Generated description", subject=subject_name, chars=len(description))
        return description

    def _build_prompt(self, subject_name: str) -> str:
        return self._prompt_template.format(tree_name=subject_name)
