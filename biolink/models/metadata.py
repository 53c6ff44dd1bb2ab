from typing import Optional

from pydantic import BaseModel, ConfigDict


class RequestContext(BaseModel):
    """Where the page is being served from; the only source of canonical URLs."""

    host: str
    path: str = "/"
    scheme: str = "https"

    @property
    def origin(self) -> str:
        return f"{self.scheme}://{self.host}"


class ResolvedMetadata(BaseModel):
    """Final, fallback-applied SEO values for one page."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    keywords: str
    author: str
    favicon: str
    canonical_url: str
    image_url: str
    avatar_url: Optional[str] = None
    amp_link: Optional[str] = None
    schema_type: str
    name: str
    bio: str = ""
    og_type: str = "profile"
    site_name: str
    twitter_site: str
