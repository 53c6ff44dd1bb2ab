"""Tests for background styling and the image preload check."""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from biolink.models.page import Background
from biolink.services.background import (
    DEFAULT_STYLE,
    background_style,
    image_available,
    resolve_background,
)


@pytest.fixture(autouse=True)
def public_hosts():
    """Keep DNS out of the tests: every host counts as public."""
    with patch("biolink.services.urls._resolves_to_internal", return_value=False):
        yield


def _check(url, handler):
    async def main():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await image_available(url, client)

    return asyncio.run(main())


class TestBackgroundStyle:
    def test_none_is_default(self):
        assert background_style(None) == DEFAULT_STYLE

    def test_color(self):
        assert background_style(Background(type="color", color="#112233")) == "background-color: #112233;"

    def test_invalid_color_uses_default_color(self):
        style = background_style(Background(type="color", color="red; position: fixed"))
        assert style == "background-color: #667eea;"

    def test_gradient(self):
        style = background_style(Background.model_validate({"type": "gradient", "gradientColors": ["#000", "#fff"]}))
        assert style == "background: linear-gradient(135deg, #000 0%, #fff 100%);"

    def test_gradient_needs_two_colors(self):
        assert background_style(Background(type="gradient", gradient_colors=["#000"])) == DEFAULT_STYLE

    def test_image(self):
        style = background_style(Background(type="image", image_url="https://cdn.example.com/bg.jpg"))
        assert 'url("https://cdn.example.com/bg.jpg")' in style

    def test_image_without_url_is_default(self):
        assert background_style(Background(type="image")) == DEFAULT_STYLE

    def test_unknown_type_is_default(self):
        assert background_style(Background(type="video")) == DEFAULT_STYLE


class TestImageAvailable:
    def test_image_response(self):
        handler = lambda r: httpx.Response(200, headers={"content-type": "image/jpeg"})
        assert _check("https://cdn.example.com/bg.jpg", handler)

    def test_non_image_response(self):
        handler = lambda r: httpx.Response(200, headers={"content-type": "text/html"})
        assert not _check("https://cdn.example.com/bg.jpg", handler)

    def test_missing_image(self):
        assert not _check("https://cdn.example.com/bg.jpg", lambda r: httpx.Response(404))

    def test_follows_redirects(self):
        def handler(request):
            if request.url.path == "/old.jpg":
                return httpx.Response(302, headers={"location": "/new.jpg"})
            return httpx.Response(200, headers={"content-type": "image/png"})

        assert _check("https://cdn.example.com/old.jpg", handler)

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        assert not _check("https://cdn.example.com/bg.jpg", handler)

    def test_rejects_non_http_scheme(self):
        def handler(request):
            raise AssertionError("must not be requested")

        assert not _check("file:///etc/passwd", handler)

    def test_rejects_private_hosts(self):
        def handler(request):
            raise AssertionError("must not be requested")

        with patch("biolink.services.urls._resolves_to_internal", return_value=True):
            assert not _check("https://intranet.local/bg.jpg", handler)


class TestResolveBackground:
    def test_failed_preload_degrades_to_default(self):
        background = Background(type="image", image_url="https://cdn.example.com/bg.jpg")

        async def unavailable(url, client=None):
            return False

        with patch("biolink.services.background.image_available", new=unavailable):
            assert asyncio.run(resolve_background(background)) == DEFAULT_STYLE

    def test_color_skips_preload(self):
        background = Background(type="color", color="#000")

        async def explode(url, client=None):
            raise AssertionError("no preload for colours")

        with patch("biolink.services.background.image_available", new=explode):
            assert asyncio.run(resolve_background(background)) == "background-color: #000;"
