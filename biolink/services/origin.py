"""Request origin for canonical URLs.

The origin comes from the ``Host`` header.  ``X-Forwarded-*`` headers are
client-controlled unless a proxy rewrites them, so they are honoured only
with ``TRUST_PROXY_HEADERS`` set.
"""

import logging
import re
from typing import Mapping, Optional

from biolink.config import settings
from biolink.models.metadata import RequestContext

logger = logging.getLogger(__name__)

WEB_SCHEMES = {"http", "https"}

# hostname or bracketed IPv6 literal, optional port
_HOST_RE = re.compile(r"^(\[[0-9a-fA-F:.]+\]|[A-Za-z0-9](?:[A-Za-z0-9.-]*[A-Za-z0-9])?)(:\d{1,5})?$")


def _first_hop(value: Optional[str]) -> str:
    """Forwarded headers list one value per hop; the client-facing one comes first."""
    return (value or "").split(",")[0].strip()


def _clean_host(value: str) -> Optional[str]:
    host = value.strip()
    return host.lower() if host and _HOST_RE.match(host) else None


def context_from_headers(
    headers: Mapping[str, str], path: str = "/", default_scheme: str = "https"
) -> RequestContext:
    """Build a :class:`RequestContext` from lower-cased request *headers*."""
    host = _clean_host(headers.get("host", ""))
    scheme = default_scheme if default_scheme in WEB_SCHEMES else "https"

    if settings.trust_proxy_headers:
        forwarded_host = _clean_host(_first_hop(headers.get("x-forwarded-host")))
        if forwarded_host:
            host = forwarded_host
        forwarded_proto = _first_hop(headers.get("x-forwarded-proto")).lower()
        if forwarded_proto in WEB_SCHEMES:
            scheme = forwarded_proto

    if host is None:
        logger.warning("No usable Host header; using %s", settings.default_host)
        host = settings.default_host
    return RequestContext(host=host, path=path, scheme=scheme)
