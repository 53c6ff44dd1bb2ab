"""Read access to the hosted Supabase backend through its PostgREST API.

Lookups raise :class:`PageNotFoundError` for missing, inactive or malformed
slugs and :class:`UpstreamError` for everything that went wrong on the way to
the backend.  Counter updates are best effort and never raise.
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx
from pydantic import ValidationError

from biolink.config import settings
from biolink.models.page import PageRecord
from biolink.models.shortlink import Shortlink

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


class PageNotFoundError(LookupError):
    """The slug does not name an active record."""


class UpstreamError(RuntimeError):
    """The backend lookup failed or returned something unusable."""


def is_valid_slug(slug: str) -> bool:
    return bool(slug) and SLUG_PATTERN.match(slug) is not None


def _rest_url(table: str) -> str:
    return f"{settings.supabase_url.rstrip('/')}/rest/v1/{table}"


def _headers() -> Dict[str, str]:
    return {
        "apikey": settings.supabase_anon_key,
        "Authorization": f"Bearer {settings.supabase_anon_key}",
        "Accept": "application/json",
    }


@asynccontextmanager
async def _client(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    """Use the caller's client when given, otherwise open a short-lived one."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.request_timeout) as owned:
        yield owned


async def _select_one(
    table: str, params: Dict[str, str], client: Optional[httpx.AsyncClient]
) -> Optional[Dict[str, Any]]:
    query = {"select": "*", "limit": "1", **params}
    try:
        async with _client(client) as http:
            response = await http.get(_rest_url(table), params=query, headers=_headers())
            response.raise_for_status()
            rows = response.json()
    except httpx.TimeoutException as exc:
        raise UpstreamError(f"Lookup in {table} timed out.") from exc
    except httpx.HTTPStatusError as exc:
        raise UpstreamError(
            f"Lookup in {table} returned HTTP {exc.response.status_code}."
        ) from exc
    except httpx.HTTPError as exc:
        raise UpstreamError(f"Lookup in {table} failed: {exc}") from exc
    except ValueError as exc:
        raise UpstreamError(f"Lookup in {table} returned invalid JSON.") from exc

    if not isinstance(rows, list):
        raise UpstreamError(f"Lookup in {table} returned an unexpected payload.")
    return rows[0] if rows else None


async def _patch(
    table: str, record_id: str, payload: Dict[str, Any], client: Optional[httpx.AsyncClient]
) -> None:
    async with _client(client) as http:
        response = await http.patch(
            _rest_url(table),
            params={"id": f"eq.{record_id}"},
            json=payload,
            headers={**_headers(), "Prefer": "return=minimal"},
        )
        response.raise_for_status()


async def fetch_page(slug: str, client: Optional[httpx.AsyncClient] = None) -> PageRecord:
    """Return the active page stored under *slug*.

    Raises:
        PageNotFoundError: if the slug is malformed, absent, or inactive.
        UpstreamError: if the backend could not be queried.
    """
    if not is_valid_slug(slug):
        raise PageNotFoundError(slug)

    row = await _select_one(
        settings.biolinks_table, {"slug": f"eq.{slug}", "is_active": "eq.true"}, client
    )
    if row is None:
        raise PageNotFoundError(slug)

    try:
        record = PageRecord.model_validate(row)
    except ValidationError as exc:
        raise UpstreamError(f"Stored page {slug!r} is malformed.") from exc

    if not record.is_active:
        raise PageNotFoundError(slug)
    return record


async def fetch_shortlink(slug: str, client: Optional[httpx.AsyncClient] = None) -> Shortlink:
    """Return the active short link stored under *slug*; raises like :func:`fetch_page`."""
    if not is_valid_slug(slug):
        raise PageNotFoundError(slug)

    row = await _select_one(
        settings.shortlinks_table, {"short_code": f"eq.{slug}", "is_active": "eq.true"}, client
    )
    if row is None:
        raise PageNotFoundError(slug)

    try:
        link = Shortlink.model_validate(row)
    except ValidationError as exc:
        raise UpstreamError(f"Stored short link {slug!r} is malformed.") from exc

    if not link.is_active:
        raise PageNotFoundError(slug)
    return link


async def increment_view_count(
    record: PageRecord, client: Optional[httpx.AsyncClient] = None
) -> None:
    """Bump the page's view counter; failures are logged and ignored."""
    if not record.id:
        logger.warning("Cannot count a view for %s: record has no id", record.slug)
        return
    try:
        await _patch(
            settings.biolinks_table, record.id, {"view_count": record.view_count + 1}, client
        )
    except httpx.HTTPError as exc:
        logger.warning("Failed to increment view count for %s: %s", record.slug, exc)


async def increment_click_count(
    link: Shortlink, client: Optional[httpx.AsyncClient] = None
) -> None:
    """Bump the short link's click counter; failures are logged and ignored."""
    if not link.id:
        logger.warning("Cannot count a click for %s: short link has no id", link.slug)
        return
    try:
        await _patch(settings.shortlinks_table, link.id, {"clicks": link.click_count + 1}, client)
    except httpx.HTTPError as exc:
        logger.warning("Failed to increment click count for %s: %s", link.slug, exc)
