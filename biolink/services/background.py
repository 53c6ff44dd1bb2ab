"""Page background styling with a safe fallback.

A background that cannot be rendered (unknown type, missing colours, an image
that fails its preload check) degrades to the default gradient instead of
failing the page.
"""

import logging
import re
from typing import Optional
from urllib.parse import urljoin

import httpx

from biolink.config import settings
from biolink.models.page import Background
from biolink.services.urls import check_preload_url

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#667eea"
DEFAULT_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"
DEFAULT_STYLE = f"background: {DEFAULT_GRADIENT};"
MAX_REDIRECTS = 5

# Hex, rgb()/rgba()/hsl()/hsla() or a bare colour keyword; nothing that can close a declaration
_COLOR_RE = re.compile(
    r"^(#[0-9a-fA-F]{3,8}|(rgb|rgba|hsl|hsla)\([0-9.,%\s]+\)|[a-zA-Z]+)$"
)


def _is_color(value: Optional[str]) -> bool:
    return bool(value) and _COLOR_RE.match(value.strip()) is not None


def _css_url(url: str) -> str:
    return url.replace("\\", "\\\\").replace('"', '\\"')


def background_style(background: Optional[Background]) -> str:
    """Return inline CSS declarations for *background*."""
    if background is None:
        return DEFAULT_STYLE

    if background.type == "color":
        color = background.color if _is_color(background.color) else DEFAULT_COLOR
        return f"background-color: {color.strip()};"

    if background.type == "gradient":
        colors = [c.strip() for c in background.gradient_colors if _is_color(c)]
        if len(colors) >= 2:
            return f"background: linear-gradient(135deg, {colors[0]} 0%, {colors[1]} 100%);"
        return DEFAULT_STYLE

    if background.type == "image" and background.image_url:
        return (
            f'background-image: url("{_css_url(background.image_url)}"); '
            "background-size: cover; background-position: center; "
            "background-repeat: no-repeat;"
        )

    return DEFAULT_STYLE


async def image_available(url: str, client: Optional[httpx.AsyncClient] = None) -> bool:
    """Preload check: does *url* answer a HEAD request with an image?

    Redirects are followed manually so every hop is validated before it is
    requested.
    """
    owned = client is None
    http = client or httpx.AsyncClient(follow_redirects=False, timeout=settings.request_timeout)
    current_url = url
    try:
        for _ in range(MAX_REDIRECTS + 1):
            check_preload_url(current_url)
            response = await http.head(current_url)
            if response.is_redirect:
                current_url = urljoin(current_url, response.headers.get("location", ""))
                continue
            content_type = response.headers.get("content-type", "")
            return response.is_success and content_type.startswith("image/")
        return False
    except (ValueError, httpx.HTTPError) as exc:
        logger.warning("Background image check failed for %s: %s", url, exc)
        return False
    finally:
        if owned:
            await http.aclose()


async def resolve_background(
    background: Optional[Background], client: Optional[httpx.AsyncClient] = None
) -> str:
    """Like :func:`background_style`, but image backgrounds must pass a preload check."""
    if background is not None and background.type == "image" and background.image_url:
        if not await image_available(background.image_url, client):
            logger.info("Falling back to default background for %s", background.image_url)
            return DEFAULT_STYLE
    return background_style(background)
