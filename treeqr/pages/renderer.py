from html import escape
from pathlib import Path

from treeqr.pages.exceptions import PageRenderError
from treeqr.trees.models import NormalizedTreeRecord

_DEFAULT_TEMPLATE = Path(__file__).parent / "templates" / "tree.html"


class PageRenderer:
    """Fills the tree page template with a normalized record."""

    def __init__(self, template_path: Path | None = None) -> None:
        path = template_path if template_path is not None else _DEFAULT_TEMPLATE
        try:
            self._template = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PageRenderError(f"Failed to load page template: {exc}") from exc

    def render(self, record: NormalizedTreeRecord) -> str:
        text_fields = {
            "id": record.id,
            "name": record.name,
            "botanical": record.botanical,
            "category": record.category,
            "native": record.native,
            "description": record.description,
            "environmental_benefits": record.environmental_benefits,
            "medicinal_benefits": record.medicinal_benefits,
            "volunteer": record.volunteer,
            "last_updated": record.last_updated,
        }
        return self._template.format(
            **{key: escape(value) for key, value in text_fields.items()},
            classification=_definition_rows(record.classification),
            location=_definition_rows(record.location),
            images=_figures(record.images),
        )


def _definition_rows(attributes: dict[str, str]) -> str:
    return "\n".join(
        f"        <dt>{escape(key)}</dt><dd>{escape(value)}</dd>"
        for key, value in sorted(attributes.items())
    )


def _figures(images: list[dict[str, str]]) -> str:
    figures = []
    for image in images:
        url = image.get("url", "")
        if not url:
            continue
        caption = image.get("caption", "")
        figures.append(
            f'      <figure><img src="{escape(url)}" alt="{escape(caption)}">'
            f"<figcaption>{escape(caption)}</figcaption></figure>"
        )
    return "\n".join(figures)
