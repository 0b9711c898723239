import pytest

from contentful_local.domain.errors import UnknownLocaleError
from contentful_local.domain.locales import project_record, resolve_locale_value
from contentful_local.domain.models import Space


@pytest.fixture
def chained_space() -> Space:
    return Space.model_validate(
        {
            "locales": [
                {"code": "en-US", "default": True},
                {"code": "fr", "fallbackCode": "en-US"},
                {"code": "fr-CA", "fallbackCode": "fr"},
                {"code": "de"},
            ]
        }
    )


class TestResolveLocaleValue:

    def test_direct_value(self, chained_space):
        assert resolve_locale_value({"fr": "Bonjour", "en-US": "Hello"}, "fr", chained_space) == "Bonjour"

    def test_falls_back_along_chain(self, chained_space):
        assert resolve_locale_value({"en-US": "Hello"}, "fr-CA", chained_space) == "Hello"

    def test_no_fallback_means_no_value(self, chained_space):
        assert resolve_locale_value({"en-US": "Hello"}, "de", chained_space) is None

    def test_falsy_values_are_values(self, chained_space):
        assert resolve_locale_value({"fr": 0, "en-US": 5}, "fr", chained_space) == 0

    def test_unknown_locale(self, chained_space):
        with pytest.raises(UnknownLocaleError) as excinfo:
            resolve_locale_value({"en-US": "Hello"}, "xx", chained_space)

        assert excinfo.value.code == "xx"
        assert str(excinfo.value) == "Unknown locale: xx"


class TestProjectRecord:

    def test_reduces_every_field(self, example_space):
        record = {
            "sys": {"id": "nyancat", "type": "Entry"},
            "fields": {
                "name": {"en-US": "Nyan Cat", "tlh": "Nyan vIghro'"},
                "color": {"en-US": "rainbow"},
            },
        }

        projected = project_record(record, "tlh", example_space)

        assert projected == {
            "sys": {"id": "nyancat", "type": "Entry"},
            "fields": {"name": "Nyan vIghro'", "color": "rainbow"},
        }

    def test_does_not_modify_input(self, example_space):
        record = {"sys": {"id": "a"}, "fields": {"name": {"en-US": "A"}}}

        projected = project_record(record, "en-US", example_space)
        projected["sys"]["id"] = "changed"

        assert record == {"sys": {"id": "a"}, "fields": {"name": {"en-US": "A"}}}

    def test_document_without_fields_passes_through(self, example_space):
        space_doc = {"sys": {"type": "Space"}, "name": "Example", "locales": []}

        assert project_record(space_doc, "en-US", example_space) == space_doc

    def test_unknown_locale_fails_even_without_fields(self, example_space):
        with pytest.raises(UnknownLocaleError):
            project_record({"sys": {"id": "a"}}, "asdf", example_space)
