from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import HTMLResponse

from biolink.limiter import limiter
from biolink.services.prerender import prerender_shortlink
from biolink.services.store import increment_click_count

router = APIRouter(prefix="/s", tags=["Shortlinks"])


@router.get("/{slug}", response_class=HTMLResponse, summary="Short-link countdown redirect")
@limiter.limit("60/minute")
async def shortlink_redirect(
    request: Request, slug: str, background_tasks: BackgroundTasks
) -> HTMLResponse:
    result = await prerender_shortlink(slug)
    if result.shortlink is not None:
        background_tasks.add_task(increment_click_count, result.shortlink)
    return HTMLResponse(result.body, status_code=result.status_code, headers=result.headers)
