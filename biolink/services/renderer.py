"""Static HTML rendering for crawlers and first paint.

:func:`render_document` emits a complete document with every SEO tag declared
up front; :func:`inject_into_template` instead rewrites the head of a built
single-page-app ``index.html``.  Both draw their tags from
:mod:`biolink.services.tags`, so the two paths cannot drift apart.
"""

from html import escape
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

from biolink.models.metadata import ResolvedMetadata
from biolink.services.injector import apply_metadata
from biolink.services.tags import (
    STRUCTURED_DATA_TYPE,
    link_tags,
    meta_tags,
    serialize_structured_data,
)

DEFAULT_APP_SHELL = '<div id="root"></div>'


def _attr(value: str) -> str:
    return escape(value, quote=True)


def render_head(
    resolved: ResolvedMetadata,
    structured_data: Optional[Dict[str, Any]],
    extra_head: str = "",
) -> str:
    """Return the ``<head>`` element for *resolved* as a string."""
    lines = [
        "<head>",
        '  <meta charset="UTF-8" />',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0" />',
        f"  <title>{escape(resolved.title, quote=False)}</title>",
    ]
    for meta in meta_tags(resolved):
        lines.append(f'  <meta {meta.attr}="{_attr(meta.key)}" content="{_attr(meta.content)}" />')
    for link in link_tags(resolved):
        type_attr = f' type="{_attr(link.type)}"' if link.type else ""
        lines.append(f'  <link rel="{link.rel}" href="{_attr(link.href)}"{type_attr} />')
    if resolved.amp_link:
        lines.append(f'  <link rel="amphtml" href="{_attr(resolved.amp_link)}" />')
    if structured_data is not None:
        lines.append(f'  <script type="{STRUCTURED_DATA_TYPE}">')
        lines.append(serialize_structured_data(structured_data, indent=4))
        lines.append("  </script>")
    if extra_head:
        lines.append(extra_head)
    lines.append("</head>")
    return "\n".join(lines)


def render_document(
    resolved: ResolvedMetadata,
    structured_data: Optional[Dict[str, Any]],
    app_shell_markup: str = DEFAULT_APP_SHELL,
    extra_head: str = "",
) -> str:
    """Return a complete HTML document for *resolved* followed by the app shell."""
    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="id">',
            render_head(resolved, structured_data, extra_head),
            "<body>",
            app_shell_markup,
            "</body>",
            "</html>",
        ]
    )


def inject_into_template(
    template_html: str,
    resolved: ResolvedMetadata,
    structured_data: Optional[Dict[str, Any]],
) -> str:
    """Apply *resolved* to a built ``index.html`` and return the rewritten markup."""
    soup = BeautifulSoup(template_html, "lxml")
    apply_metadata(soup, resolved, structured_data)
    return str(soup)


def _message_document(title: str, message: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="id">\n'
        "<head>\n"
        '  <meta charset="UTF-8" />\n'
        '  <meta name="robots" content="noindex" />\n'
        f"  <title>{escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"  <h1>{escape(title)}</h1>\n"
        f"  <p>{escape(message)}</p>\n"
        "</body>\n"
        "</html>"
    )


def render_not_found(slug: str = "", kind: str = "Biolink") -> str:
    if slug:
        message = f'The {kind.lower()} "{slug}" does not exist.'
    else:
        message = f"The requested {kind.lower()} does not exist."
    return _message_document(f"{kind} Not Found", message)


def render_server_error(kind: str = "biolink") -> str:
    return _message_document("Server Error", f"An error occurred while loading the {kind}.")
