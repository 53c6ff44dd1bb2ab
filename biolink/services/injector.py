"""Apply resolved metadata to a live HTML document.

The document is passed in explicitly (a BeautifulSoup tree), so the same code
serves template injection on the server and can be exercised in tests against
an in-memory document.  Every tag is removed and recreated rather than edited
in place, so re-running after a navigation never leaves duplicates behind.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from biolink.models.metadata import ResolvedMetadata
from biolink.services.tags import (
    STRUCTURED_DATA_TYPE,
    link_tags,
    meta_tags,
    serialize_structured_data,
)

logger = logging.getLogger(__name__)


def _head(document: BeautifulSoup) -> Tag:
    """Return the document's ``<head>``, creating it (and ``<html>``) when missing."""
    if document.head is not None:
        return document.head
    html = document.find("html")
    if html is None:
        html = document.new_tag("html")
        document.append(html)
    head = document.new_tag("head")
    html.insert(0, head)
    return head


def _set_title(document: BeautifulSoup, title: str) -> None:
    existing = document.find_all("title")
    for extra in existing[1:]:
        extra.decompose()
    if existing:
        existing[0].string = title
        return
    tag = document.new_tag("title")
    tag.string = title
    _head(document).append(tag)


def _replace_meta(document: BeautifulSoup, attr: str, key: str, content: str) -> None:
    for tag in document.find_all("meta", attrs={attr: key}):
        tag.decompose()
    meta = document.new_tag("meta", attrs={attr: key, "content": content})
    _head(document).append(meta)


def _remove_links(document: BeautifulSoup, rel: str) -> None:
    for tag in document.find_all("link", rel=rel):
        tag.decompose()


def _replace_link(
    document: BeautifulSoup, rel: str, href: str, type_: Optional[str] = None
) -> None:
    _remove_links(document, rel)
    attrs = {"rel": rel, "href": href}
    if type_:
        attrs["type"] = type_
    _head(document).append(document.new_tag("link", attrs=attrs))


def _apply_amp_link(document: BeautifulSoup, amp_link: Optional[str]) -> None:
    # A page without an AMP version must not inherit one from the previous page
    if amp_link:
        _replace_link(document, "amphtml", amp_link)
    else:
        _remove_links(document, "amphtml")


def _replace_structured_data(
    document: BeautifulSoup, structured_data: Optional[Dict[str, Any]]
) -> None:
    for tag in document.find_all("script", attrs={"type": STRUCTURED_DATA_TYPE}):
        tag.decompose()
    if structured_data is None:
        return
    script = document.new_tag("script", attrs={"type": STRUCTURED_DATA_TYPE})
    script.string = serialize_structured_data(structured_data)
    _head(document).append(script)


def apply_metadata(
    document: BeautifulSoup,
    resolved: ResolvedMetadata,
    structured_data: Optional[Dict[str, Any]],
) -> None:
    """Write *resolved* into *document*'s title and head tags.

    Each step runs on its own: a failure is logged and the remaining steps
    still run.  Nothing is raised to the caller.
    """
    steps: List[Tuple[str, Callable[[], None]]] = [
        ("title", lambda: _set_title(document, resolved.title)),
    ]
    for meta in meta_tags(resolved):
        steps.append(
            (meta.key, lambda m=meta: _replace_meta(document, m.attr, m.key, m.content))
        )
    for link in link_tags(resolved):
        steps.append(
            (link.rel, lambda lk=link: _replace_link(document, lk.rel, lk.href, lk.type))
        )
    steps.append(("amphtml", lambda: _apply_amp_link(document, resolved.amp_link)))
    steps.append(
        ("structured data", lambda: _replace_structured_data(document, structured_data))
    )

    for name, step in steps:
        try:
            step()
        except Exception:
            logger.exception("Failed to apply %s tag", name)
