from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from treeqr.trees.exceptions import StoreUnavailableError


class TreeRecord(BaseModel):
    """A tree document as stored under ``trees/{id}``.

    Aliases are the exact keys of the stored schema. Optional collections stay
    ``None`` until the record is normalized.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    id: str = Field(default="", alias="ID")
    name: str = Field(default="", alias="Name")
    published: bool = Field(default=False, alias="Published")
    qr_enabled: bool = Field(default=False, alias="QR")
    saved: bool = Field(default=False, alias="Saved")
    volunteer: str = Field(default="", alias="volunteerName")
    timestamp: str = ""
    botanical: str = ""
    category: str = ""
    classification: dict[str, str] | None = None
    description: str = ""
    environmental_benefits: str = Field(default="", alias="environmentalBenefits")
    images: list[dict[str, str]] | None = None
    last_updated: str = Field(default="", alias="lastUpdated")
    location: dict[str, str] | None = None
    medicinal_benefits: str = Field(default="", alias="medicinalBenefits")
    native: str = ""
    uid: str = ""

    @field_validator("images", mode="before")
    @classmethod
    def _fill_image_holes(cls, value: object) -> object:
        # Arrays with gaps come back from the store with null slots.
        if isinstance(value, list):
            return [{} if image is None else image for image in value]
        return value

    @classmethod
    def from_document(cls, document: object) -> "TreeRecord":
        """Deserialize a raw store document.

        Raises:
            StoreUnavailableError: if the document does not match the schema.
        """
        if not isinstance(document, Mapping):
            raise StoreUnavailableError(
                f"Tree document must be an object, got {type(document).__name__}"
            )
        try:
            return cls.model_validate(dict(document))
        except ValidationError as exc:
            raise StoreUnavailableError(f"Invalid tree document: {exc}") from exc


class NormalizedTreeRecord(TreeRecord):
    """A tree record whose optional collections are always present."""

    classification: dict[str, str] = Field(default_factory=dict)
    images: list[dict[str, str]] = Field(default_factory=list)
    location: dict[str, str] = Field(default_factory=dict)
