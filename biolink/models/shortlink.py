from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Shortlink(BaseModel):
    """A short redirect link.

    The backend table stores ``short_code`` / ``original_url`` / ``clicks``;
    the model exposes them under the names the rest of the app uses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    slug: str = Field(alias="short_code")
    target_url: str = Field(alias="original_url")
    title: Optional[str] = None
    click_count: int = Field(default=0, alias="clicks")
    is_active: bool = True

    @field_validator("click_count", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return value or 0
