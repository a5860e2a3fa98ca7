"""
Input shape for updating a main category.

Only ``id`` is mandatory; every other field left out means "keep the
current value".
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.validation import FieldSpec, InputSchema, WireType
from shared.validation import rules


def _optional_text(name: str, description: str) -> FieldSpec:
    return FieldSpec(
        name,
        WireType.STRING,
        rules=(rules.is_string(),),
        description=description,
    )


UPDATE_MAIN_CATEGORY_SCHEMA = InputSchema(
    name="UpdateMainCategoryInput",
    description="Partial update of a main category, keyed by its id.",
    fields=(
        FieldSpec(
            "id",
            WireType.STRING,
            required=True,
            rules=(rules.is_uuid(),),
            description="Identifier of the category to update",
        ),
        _optional_text("name", "Display name"),
        _optional_text("slug", "URL slug"),
        _optional_text("description", "Long description"),
        _optional_text("image", "Image URL or storage path"),
        FieldSpec(
            "isActive",
            WireType.BOOLEAN,
            rules=(rules.is_boolean(),),
            description="Whether the category is visible",
        ),
        FieldSpec(
            "order",
            WireType.FLOAT,
            rules=(rules.is_number(),),
            description="Sort position among main categories",
        ),
        _optional_text("seoTitle", "SEO page title"),
        _optional_text("seoDescription", "SEO meta description"),
        _optional_text("seoKeywords", "SEO keywords"),
    ),
)


class UpdateMainCategoryInput(BaseModel):
    """Validated main-category update."""

    id: str = Field(..., description="Category identifier (UUID)")
    name: Optional[str] = Field(None, description="Display name")
    slug: Optional[str] = Field(None, description="URL slug")
    description: Optional[str] = Field(None, description="Long description")
    image: Optional[str] = Field(None, description="Image URL or path")
    is_active: Optional[bool] = Field(
        None, alias="isActive", description="Visibility flag"
    )
    order: Optional[float] = Field(None, description="Sort position")
    seo_title: Optional[str] = Field(
        None, alias="seoTitle", description="SEO page title"
    )
    seo_description: Optional[str] = Field(
        None, alias="seoDescription", description="SEO meta description"
    )
    seo_keywords: Optional[str] = Field(
        None, alias="seoKeywords", description="SEO keywords"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def changes(self) -> dict:
        """Fields the caller asked to change, keyed by wire name."""
        return self.model_dump(
            by_alias=True, exclude_unset=True, exclude={"id"}
        )
