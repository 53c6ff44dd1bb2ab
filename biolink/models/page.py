from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    theme: Optional[str] = None


class SeoSettings(BaseModel):
    """User-supplied SEO overrides; every field falls back when empty."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    favicon: Optional[str] = None
    amp_link: Optional[str] = Field(default=None, alias="ampLink")
    schema_type: Optional[str] = Field(default=None, alias="schemaType")


class SocialLink(BaseModel):
    platform: str = ""
    url: str = ""
    username: Optional[str] = None

    @field_validator("platform", "url", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return value or ""


class PageLink(BaseModel):
    id: Optional[str] = None
    title: str = ""
    url: str = ""
    description: Optional[str] = None
    is_active: bool = True
    order: int = 0

    @field_validator("title", "url", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return value or ""

    @field_validator("is_active", mode="before")
    @classmethod
    def _none_as_active(cls, value):
        return True if value is None else value

    @field_validator("order", mode="before")
    @classmethod
    def _none_as_first(cls, value):
        return value or 0


class Background(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = "gradient"
    color: Optional[str] = None
    gradient_colors: List[str] = Field(default_factory=list, alias="gradientColors")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @field_validator("gradient_colors", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []


class PageRecord(BaseModel):
    """One biolink row as stored in the backend; unknown columns are ignored."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    slug: str
    title: Optional[str] = None
    description: Optional[str] = None
    profile: Optional[Profile] = None
    seo: Optional[SeoSettings] = None
    social: List[SocialLink] = Field(default_factory=list)
    links: List[PageLink] = Field(default_factory=list)
    background: Optional[Background] = None
    is_active: bool = True
    view_count: int = 0

    @field_validator("social", "links", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []

    @field_validator("view_count", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return value or 0
