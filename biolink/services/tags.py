"""The head tag set shared by the static renderer and the tag injector."""

import json
from typing import Any, Dict, List, NamedTuple, Optional

from biolink.models.metadata import ResolvedMetadata

TWITTER_CARD = "summary_large_image"
FAVICON_TYPE = "image/png"
STRUCTURED_DATA_TYPE = "application/ld+json"


class MetaTag(NamedTuple):
    attr: str  # "name" or "property"
    key: str
    content: str


class LinkTag(NamedTuple):
    rel: str
    href: str
    type: Optional[str] = None


def meta_tags(resolved: ResolvedMetadata) -> List[MetaTag]:
    return [
        MetaTag("name", "description", resolved.description),
        MetaTag("name", "keywords", resolved.keywords),
        MetaTag("name", "author", resolved.author),
        MetaTag("property", "og:title", resolved.title),
        MetaTag("property", "og:description", resolved.description),
        MetaTag("property", "og:type", resolved.og_type),
        MetaTag("property", "og:url", resolved.canonical_url),
        MetaTag("property", "og:image", resolved.image_url),
        MetaTag("property", "og:site_name", resolved.site_name),
        MetaTag("name", "twitter:card", TWITTER_CARD),
        MetaTag("name", "twitter:title", resolved.title),
        MetaTag("name", "twitter:description", resolved.description),
        MetaTag("name", "twitter:image", resolved.image_url),
        MetaTag("name", "twitter:site", resolved.twitter_site),
    ]


def link_tags(resolved: ResolvedMetadata) -> List[LinkTag]:
    """Favicon and canonical links; the AMP link is handled separately."""
    return [
        LinkTag("icon", resolved.favicon, FAVICON_TYPE),
        LinkTag("canonical", resolved.canonical_url),
    ]


def serialize_structured_data(data: Dict[str, Any], indent: int = 2) -> str:
    """Serialize JSON-LD so it is safe to embed inside a ``<script>`` element."""
    return json.dumps(data, indent=indent, ensure_ascii=False).replace("</", "<\\/")
