"""Static markup for the profile card shown on the preview page."""

from html import escape
from typing import List

from biolink.models.page import PageLink, PageRecord, Profile
from biolink.services.resolver import display_name
from biolink.services.urls import is_safe_href


def _active_links(record: PageRecord) -> List[PageLink]:
    links = [link for link in record.links if link.is_active and is_safe_href(link.url)]
    return sorted(links, key=lambda link: link.order)


def render_profile_card(record: PageRecord, background_css: str) -> str:
    """Return the ``<main>`` element for *record*; *background_css* is trusted inline CSS."""
    profile = record.profile or Profile()
    name = escape(display_name(record))
    lines = [f'<main class="biolink" style="{escape(background_css)}">']

    if profile.avatar and is_safe_href(profile.avatar):
        lines.append(f'  <img class="avatar" src="{escape(profile.avatar)}" alt="{name}" />')
    lines.append(f"  <h1>{name}</h1>")
    bio = profile.bio or record.description
    if bio:
        lines.append(f'  <p class="bio">{escape(bio)}</p>')

    links = _active_links(record)
    if links:
        lines.append('  <ul class="links">')
        for link in links:
            label = escape(link.title or link.url)
            lines.append(
                f'    <li><a href="{escape(link.url)}" target="_blank" '
                f'rel="noopener noreferrer">{label}</a></li>'
            )
        lines.append("  </ul>")

    social = [s for s in record.social if s.url and is_safe_href(s.url)]
    if social:
        lines.append('  <ul class="social">')
        for item in social:
            lines.append(
                f'    <li><a href="{escape(item.url)}" rel="me noopener noreferrer" '
                f'target="_blank">{escape(item.platform or item.url)}</a></li>'
            )
        lines.append("  </ul>")

    lines.append("</main>")
    return "\n".join(lines)
