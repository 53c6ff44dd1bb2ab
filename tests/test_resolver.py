"""Tests for resolver.resolve fallback precedence."""

from biolink.models.metadata import RequestContext
from biolink.models.page import PageRecord
from biolink.services.resolver import DEFAULT_DESCRIPTION, DEFAULT_KEYWORDS, resolve

_CTX = RequestContext(host="biolink.id", path="/demo")


def _record(**kwargs) -> PageRecord:
    return PageRecord.model_validate({"slug": "demo", **kwargs})


class TestTitle:
    def test_record_title_gets_brand_suffix(self):
        resolved = resolve(_record(title="Demo", seo={}), _CTX)
        assert resolved.title == "Demo - BioLink.ID"

    def test_profile_name_used_when_title_missing(self):
        resolved = resolve(_record(profile={"name": "Jane Doe"}), _CTX)
        assert resolved.title == "Jane Doe - BioLink.ID"

    def test_slug_used_as_last_resort(self):
        resolved = resolve(_record(title="", profile={"name": "  "}), _CTX)
        assert resolved.title == "demo - BioLink.ID"

    def test_seo_title_used_verbatim(self):
        resolved = resolve(_record(title="Demo", seo={"title": "My Custom Title"}), _CTX)
        assert resolved.title == "My Custom Title"
        assert "BioLink.ID" not in resolved.title

    def test_whitespace_seo_title_falls_back(self):
        resolved = resolve(_record(title="Demo", seo={"title": "   "}), _CTX)
        assert resolved.title == "Demo - BioLink.ID"


class TestDescriptionAndDefaults:
    def test_description_precedence(self):
        record = _record(
            description="Record description",
            profile={"bio": "Profile bio"},
            seo={"description": "SEO description"},
        )
        assert resolve(record, _CTX).description == "SEO description"

    def test_record_description_before_bio(self):
        record = _record(description="Record description", profile={"bio": "Profile bio"})
        assert resolve(record, _CTX).description == "Record description"

    def test_bio_before_default(self):
        assert resolve(_record(profile={"bio": "Profile bio"}), _CTX).description == "Profile bio"

    def test_default_description(self):
        assert resolve(_record(), _CTX).description == DEFAULT_DESCRIPTION

    def test_default_keywords_and_favicon(self):
        resolved = resolve(_record(), _CTX)
        assert resolved.keywords == DEFAULT_KEYWORDS
        assert resolved.favicon.startswith("https://")

    def test_seo_keywords_and_favicon_override(self):
        resolved = resolve(
            _record(seo={"keywords": "a, b", "favicon": "https://cdn.example.com/f.png"}), _CTX
        )
        assert resolved.keywords == "a, b"
        assert resolved.favicon == "https://cdn.example.com/f.png"

    def test_default_schema_type_is_person(self):
        assert resolve(_record(), _CTX).schema_type == "Person"
        assert resolve(_record(seo={"schemaType": "Organization"}), _CTX).schema_type == "Organization"


class TestUrls:
    def test_canonical_url_comes_from_request_context(self):
        resolved = resolve(_record(), RequestContext(host="example.org", path="/x", scheme="http"))
        assert resolved.canonical_url == "http://example.org/demo"

    def test_default_image_url(self):
        resolved = resolve(_record(), _CTX)
        assert resolved.image_url == "https://biolink.id/og-image.jpg"
        assert resolved.avatar_url is None

    def test_avatar_used_as_image(self):
        resolved = resolve(_record(profile={"avatar": "https://cdn.example.com/a.jpg"}), _CTX)
        assert resolved.image_url == "https://cdn.example.com/a.jpg"
        assert resolved.avatar_url == "https://cdn.example.com/a.jpg"

    def test_amp_link_passed_through(self):
        resolved = resolve(_record(seo={"ampLink": "https://amp.example.com/demo"}), _CTX)
        assert resolved.amp_link == "https://amp.example.com/demo"

    def test_empty_amp_link_is_absent(self):
        assert resolve(_record(seo={"ampLink": ""}), _CTX).amp_link is None
        assert resolve(_record(), _CTX).amp_link is None


class TestPurity:
    def test_resolution_is_idempotent(self):
        record = _record(title="Demo", profile={"name": "Jane", "avatar": "https://x.y/a.png"})
        assert resolve(record, _CTX) == resolve(record, _CTX)

    def test_null_columns_do_not_raise(self):
        record = PageRecord.model_validate(
            {"slug": "demo", "title": None, "profile": None, "seo": None, "social": None}
        )
        resolved = resolve(record, _CTX)
        assert resolved.title == "demo - BioLink.ID"
