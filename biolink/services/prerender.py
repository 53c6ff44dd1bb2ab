"""The prerender pipeline shared by the HTTP routes and the serverless handler.

lookup → resolve → build structured data → render.  Lookup failures end the
request with a minimal error document; nothing is retried.
"""

import logging
from functools import lru_cache
from typing import Dict, NamedTuple, Optional, Tuple

from biolink.config import settings
from biolink.models.metadata import RequestContext
from biolink.models.page import PageRecord
from biolink.models.shortlink import Shortlink
from biolink.services.background import resolve_background
from biolink.services.preview import render_profile_card
from biolink.services.redirect import render_redirect_page
from biolink.services.renderer import (
    inject_into_template,
    render_document,
    render_not_found,
    render_server_error,
)
from biolink.services.resolver import resolve
from biolink.services.store import PageNotFoundError, UpstreamError, fetch_page, fetch_shortlink
from biolink.services.structured_data import build_structured_data
from biolink.services.urls import check_redirect_target

logger = logging.getLogger(__name__)

CONTENT_TYPE = "text/html; charset=utf-8"


class RenderResult(NamedTuple):
    status_code: int
    body: str
    headers: Dict[str, str]
    record: Optional[PageRecord] = None
    shortlink: Optional[Shortlink] = None


def _cached_headers() -> Dict[str, str]:
    return {"Content-Type": CONTENT_TYPE, "Cache-Control": f"public, max-age={settings.cache_max_age}"}


def not_found(slug: str = "", kind: str = "Biolink") -> RenderResult:
    return RenderResult(404, render_not_found(slug, kind), {"Content-Type": CONTENT_TYPE})


def server_error(kind: str = "biolink") -> RenderResult:
    return RenderResult(500, render_server_error(kind), {"Content-Type": CONTENT_TYPE})


@lru_cache(maxsize=4)
def load_template(path: Optional[str]) -> Optional[str]:
    """Read the built app ``index.html``; ``None`` means render a standalone document."""
    if not path:
        return None
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except OSError as exc:
        logger.warning("Cannot read app template %s (%s); using the static shell", path, exc)
        return None


def render_page(
    record: PageRecord, context: RequestContext, template_html: Optional[str] = None
) -> RenderResult:
    """Render *record* for *context*; inactive records render as not found."""
    if not record.is_active:
        return not_found(record.slug)

    resolved = resolve(record, context)
    structured_data = build_structured_data(resolved, record.social, resolved.schema_type)
    logger.info(
        "Prerendered page",
        extra={"slug": record.slug, "schema_type": resolved.schema_type, "amp": bool(resolved.amp_link)},
    )

    if template_html:
        body = inject_into_template(template_html, resolved, structured_data)
    else:
        body = render_document(resolved, structured_data)
    return RenderResult(200, body, _cached_headers(), record=record)


async def _lookup(slug: str) -> Tuple[Optional[PageRecord], Optional[RenderResult]]:
    try:
        return await fetch_page(slug), None
    except PageNotFoundError:
        logger.warning("Biolink not found: %s", slug)
        return None, not_found(slug)
    except UpstreamError as exc:
        logger.error("Biolink lookup failed for %s: %s", slug, exc)
        return None, server_error()


async def prerender(
    slug: str, context: RequestContext, template_html: Optional[str] = None
) -> RenderResult:
    record, failure = await _lookup(slug)
    if failure is not None:
        return failure
    return render_page(record, context, template_html)


async def prerender_preview(slug: str, context: RequestContext) -> RenderResult:
    """Render the page's head plus a static profile card (no scripts required)."""
    record, failure = await _lookup(slug)
    if failure is not None:
        return failure
    if not record.is_active:
        return not_found(slug)

    resolved = resolve(record, context)
    structured_data = build_structured_data(resolved, record.social, resolved.schema_type)
    background_css = await resolve_background(record.background)
    body = render_document(
        resolved, structured_data, app_shell_markup=render_profile_card(record, background_css)
    )
    return RenderResult(200, body, _cached_headers(), record=record)


async def prerender_shortlink(slug: str) -> RenderResult:
    try:
        link = await fetch_shortlink(slug)
    except PageNotFoundError:
        logger.warning("Shortlink not found: %s", slug)
        return not_found(slug, kind="Shortlink")
    except UpstreamError as exc:
        logger.error("Shortlink lookup failed for %s: %s", slug, exc)
        return server_error(kind="shortlink")

    try:
        check_redirect_target(link.target_url)
    except ValueError as exc:
        logger.warning("Refusing to redirect %s to %r: %s", slug, link.target_url, exc)
        return not_found(slug, kind="Shortlink")

    body = render_redirect_page(link, settings.redirect_countdown)
    return RenderResult(
        200, body, {"Content-Type": CONTENT_TYPE, "Cache-Control": "no-store"}, shortlink=link
    )
