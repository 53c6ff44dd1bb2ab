from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import HTMLResponse

from biolink.config import settings
from biolink.limiter import limiter
from biolink.models.metadata import RequestContext
from biolink.services.origin import context_from_headers
from biolink.services.prerender import load_template, prerender, prerender_preview
from biolink.services.store import increment_view_count

router = APIRouter(tags=["Pages"])


def request_context(request: Request) -> RequestContext:
    return context_from_headers(request.headers, request.url.path, request.url.scheme)


@router.get(
    "/preview/{slug}",
    response_class=HTMLResponse,
    summary="Static preview of a biolink page",
)
@limiter.limit("30/minute")
async def preview_page(request: Request, slug: str) -> HTMLResponse:
    result = await prerender_preview(slug, request_context(request))
    return HTMLResponse(result.body, status_code=result.status_code, headers=result.headers)


@router.get(
    "/{slug}",
    response_class=HTMLResponse,
    summary="Prerendered biolink page with per-user SEO tags",
)
@limiter.limit(settings.page_rate_limit)
async def biolink_page(request: Request, slug: str, background_tasks: BackgroundTasks) -> HTMLResponse:
    """Serve *slug* as a complete HTML document for crawlers and first paint.

    When ``INDEX_HTML_PATH`` points at the built app, its head is rewritten in
    place; otherwise a standalone document with the default app shell is sent.
    """
    result = await prerender(slug, request_context(request), load_template(settings.index_html_path))
    if result.record is not None:
        # Counted after the response is sent so a slow backend never delays the page
        background_tasks.add_task(increment_view_count, result.record)
    return HTMLResponse(result.body, status_code=result.status_code, headers=result.headers)
