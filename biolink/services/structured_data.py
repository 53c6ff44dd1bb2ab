from typing import Any, Dict, List

from biolink.models.metadata import ResolvedMetadata
from biolink.models.page import SocialLink

SCHEMA_CONTEXT = "https://schema.org"

# Placeholder contact details published for business pages
_BUSINESS_COUNTRY = "ID"
_BUSINESS_TELEPHONE = "+62-xxx-xxxx-xxxx"
_BUSINESS_PRICE_RANGE = "$$"

_LOCAL_BUSINESS_TYPES = {"LocalBusiness", "Local Business"}


def build_structured_data(
    resolved: ResolvedMetadata, social: List[SocialLink], schema_type: str
) -> Dict[str, Any]:
    """Return a schema.org JSON-LD object for the page.

    Type-specific fields are matched on the exact, case-sensitive
    *schema_type*; ``image`` and ``sameAs`` are added for every type.
    """
    data: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": schema_type,
        "name": resolved.name,
        "description": resolved.description,
        "url": resolved.canonical_url,
    }

    if schema_type in _LOCAL_BUSINESS_TYPES:
        data["address"] = {"@type": "PostalAddress", "addressCountry": _BUSINESS_COUNTRY}
        data["telephone"] = _BUSINESS_TELEPHONE
        data["priceRange"] = _BUSINESS_PRICE_RANGE
    elif schema_type == "Organization":
        data["logo"] = resolved.avatar_url or ""
    elif schema_type == "Person":
        data["jobTitle"] = resolved.bio or ""

    if resolved.avatar_url:
        data["image"] = resolved.avatar_url

    same_as = [link.url for link in social if link.url]
    if same_as:
        data["sameAs"] = same_as

    return data
