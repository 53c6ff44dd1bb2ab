"""Tests for structured_data.build_structured_data."""

import pytest

from biolink.models.metadata import RequestContext
from biolink.models.page import PageRecord, SocialLink
from biolink.services.resolver import resolve
from biolink.services.structured_data import build_structured_data

_CTX = RequestContext(host="biolink.id")
_EXTENSION_FIELDS = {"address", "telephone", "priceRange", "logo", "jobTitle"}


def _resolved(**kwargs):
    return resolve(PageRecord.model_validate({"slug": "demo", "title": "Demo", **kwargs}), _CTX)


class TestBase:
    def test_base_fields(self):
        data = build_structured_data(_resolved(), [], "Person")
        assert data["@context"] == "https://schema.org"
        assert data["@type"] == "Person"
        assert data["name"] == "Demo"
        assert data["url"] == "https://biolink.id/demo"
        assert data["description"] == "Professional biolink page"

    @pytest.mark.parametrize("schema_type", ["Person", "Event", "person", "Local Business"])
    def test_type_always_equals_request(self, schema_type):
        assert build_structured_data(_resolved(), [], schema_type)["@type"] == schema_type


class TestTypeExtensions:
    @pytest.mark.parametrize("schema_type", ["LocalBusiness", "Local Business"])
    def test_local_business(self, schema_type):
        data = build_structured_data(_resolved(), [], schema_type)
        assert data["address"] == {"@type": "PostalAddress", "addressCountry": "ID"}
        assert data["telephone"]
        assert data["priceRange"] == "$$"
        assert "logo" not in data and "jobTitle" not in data

    def test_organization_without_avatar_has_empty_logo(self):
        data = build_structured_data(_resolved(profile={"avatar": ""}), [], "Organization")
        assert data["logo"] == ""
        assert "image" not in data

    def test_organization_with_avatar(self):
        avatar = "https://cdn.example.com/logo.png"
        data = build_structured_data(_resolved(profile={"avatar": avatar}), [], "Organization")
        assert data["logo"] == avatar
        assert data["image"] == avatar

    def test_person_job_title_from_bio(self):
        data = build_structured_data(_resolved(profile={"bio": "Designer"}), [], "Person")
        assert data["jobTitle"] == "Designer"

    def test_person_without_bio(self):
        assert build_structured_data(_resolved(), [], "Person")["jobTitle"] == ""

    @pytest.mark.parametrize("schema_type", ["Event", "organization", "localbusiness", "CreativeWork"])
    def test_unknown_type_has_no_extensions(self, schema_type):
        data = build_structured_data(_resolved(), [], schema_type)
        assert not _EXTENSION_FIELDS & set(data)


class TestCrossCuttingFields:
    def test_unknown_type_still_gets_image_and_same_as(self):
        social = [
            SocialLink(platform="instagram", url="https://instagram.com/demo"),
            SocialLink(platform="github", url="https://github.com/demo"),
        ]
        data = build_structured_data(
            _resolved(profile={"avatar": "https://cdn.example.com/a.jpg"}), social, "Event"
        )
        assert data["image"] == "https://cdn.example.com/a.jpg"
        assert data["sameAs"] == ["https://instagram.com/demo", "https://github.com/demo"]
        assert not _EXTENSION_FIELDS & set(data)

    def test_no_same_as_without_social(self):
        assert "sameAs" not in build_structured_data(_resolved(), [], "Person")

    def test_empty_social_urls_are_skipped(self):
        data = build_structured_data(_resolved(), [SocialLink(platform="x", url="")], "Person")
        assert "sameAs" not in data
