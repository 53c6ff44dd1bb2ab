"""Checks for the URLs users store on their pages.

Two kinds of URL leave this service: short-link targets, which only the
visitor's browser follows, and background images, which the server itself
requests during the preview preload check.  The latter must never reach an
internal address.
"""

import ipaddress
import socket
from urllib.parse import urlparse

WEB_SCHEMES = {"http", "https"}
ANCHOR_SCHEMES = WEB_SCHEMES | {"mailto", "tel"}


def _web_hostname(url: str) -> str:
    """Return the hostname of an absolute http(s) *url*; raise ValueError otherwise."""
    parsed = urlparse(url.strip())
    if parsed.scheme.lower() not in WEB_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")
    if not parsed.hostname:
        raise ValueError("URL must have a valid hostname.")
    return parsed.hostname


def _resolves_to_internal(hostname: str) -> bool:
    """True when any address *hostname* resolves to is not publicly routable."""
    try:
        addresses = {info[4][0].split("%")[0] for info in socket.getaddrinfo(hostname, None)}
    except socket.gaierror:
        # Unresolvable hosts fail later at request time
        return False
    for raw in addresses:
        try:
            if not ipaddress.ip_address(raw).is_global:
                return True
        except ValueError:
            continue
    return False


def check_redirect_target(url: str) -> None:
    """Raise ValueError unless a short link may send visitors to *url*."""
    _web_hostname(url)


def check_preload_url(url: str) -> None:
    """Raise ValueError unless the server may request *url* itself."""
    if _resolves_to_internal(_web_hostname(url)):
        raise ValueError("Requests to private/internal addresses are not allowed.")


def is_safe_href(url: str) -> bool:
    """Return True for links that may be rendered as clickable anchors."""
    return urlparse(url.strip()).scheme.lower() in ANCHOR_SCHEMES
