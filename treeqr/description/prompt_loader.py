from pathlib import Path

from treeqr.description.exceptions import DescriptionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the description request template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled description_prompt.txt.

    Returns:
        The raw template string with a ``{tree_name}`` placeholder.

    Raises:
        DescriptionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "description_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise DescriptionError(f"Failed to load prompt template: {exc}") from exc


def load_system_prompt(path: Path | None = None) -> str:
    """Load the persona instruction sent as the system message.

    Raises:
        DescriptionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise DescriptionError(f"Failed to load system prompt: {exc}") from exc
