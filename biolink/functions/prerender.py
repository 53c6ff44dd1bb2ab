"""Serverless entry point (AWS Lambda / Netlify-style ``handler(event, context)``).

Receives the same requests as ``GET /{slug}`` when the site is deployed as
static files plus functions, and returns the same documents.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from biolink.models.metadata import RequestContext
from biolink.services.origin import context_from_headers
from biolink.services.prerender import RenderResult, not_found, prerender, server_error
from biolink.services.store import increment_view_count

logger = logging.getLogger(__name__)


def _slug_from_event(event: Dict[str, Any]) -> str:
    slug = (event.get("path") or "").strip("/")
    if not slug:
        params = event.get("queryStringParameters") or {}
        slug = (params.get("username") or "").strip()
    return slug


def _context_from_event(event: Dict[str, Any]) -> RequestContext:
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    return context_from_headers(headers, event.get("path") or "/")


def _response(result: RenderResult) -> Dict[str, Any]:
    return {"statusCode": result.status_code, "headers": result.headers, "body": result.body}


async def handle(event: Dict[str, Any]) -> Dict[str, Any]:
    slug = _slug_from_event(event)
    logger.info("Prerender request", extra={"slug": slug, "path": event.get("path")})
    if not slug:
        return _response(not_found())

    try:
        result = await prerender(slug, _context_from_event(event))
    except Exception:
        logger.exception("Unhandled prerender error for %s", slug)
        return _response(server_error())

    if result.record is not None:
        await increment_view_count(result.record)
    return _response(result)


def handler(event: Dict[str, Any], context: Optional[Any] = None) -> Dict[str, Any]:
    return asyncio.run(handle(event))
