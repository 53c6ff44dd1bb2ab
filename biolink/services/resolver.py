"""Metadata resolution: apply fallback precedence to a stored page record.

Each field takes the first non-empty value from its source chain.  The
canonical URL is always rebuilt from the request context so a stale or forged
value in stored data can never leak into the rendered page.
"""

from typing import Optional

from biolink.config import settings
from biolink.models.metadata import RequestContext, ResolvedMetadata
from biolink.models.page import PageRecord, Profile, SeoSettings

DEFAULT_DESCRIPTION = "Professional biolink page"
DEFAULT_KEYWORDS = "biolink, profile, social media, links"
DEFAULT_SCHEMA_TYPE = "Person"
OG_IMAGE_PATH = "/og-image.jpg"


def _first(*values: Optional[str]) -> Optional[str]:
    """Return the first value that is not empty or whitespace-only."""
    for value in values:
        if value and value.strip():
            return value
    return None


def display_name(record: PageRecord) -> str:
    profile = record.profile or Profile()
    return _first(record.title, profile.name, record.slug) or ""


def resolve(record: PageRecord, context: RequestContext) -> ResolvedMetadata:
    """Compute the final SEO values for *record* served under *context*.

    Never raises: every source is optional and has a default.
    """
    seo = record.seo or SeoSettings()
    profile = record.profile or Profile()
    name = display_name(record)

    title = _first(seo.title) or f"{name} - {settings.site_name}"
    description = (
        _first(seo.description, record.description, profile.bio) or DEFAULT_DESCRIPTION
    )
    avatar = _first(profile.avatar)

    return ResolvedMetadata(
        title=title,
        description=description,
        keywords=_first(seo.keywords) or DEFAULT_KEYWORDS,
        author=settings.site_name,
        favicon=_first(seo.favicon) or settings.default_favicon,
        canonical_url=f"{context.origin}/{record.slug}",
        image_url=avatar or f"{context.origin}{OG_IMAGE_PATH}",
        avatar_url=avatar,
        amp_link=_first(seo.amp_link),
        schema_type=_first(seo.schema_type) or DEFAULT_SCHEMA_TYPE,
        name=name,
        bio=_first(profile.bio) or "",
        site_name=settings.site_name,
        twitter_site=settings.twitter_site,
    )
