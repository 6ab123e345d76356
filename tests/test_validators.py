"""
Tests for specifier validators — pep508 and name-only.
"""

import pytest

from scriptmeta.core.services.script_meta.errors import SpecifierValidationError
from scriptmeta.core.services.script_meta.validators import (
    VALIDATORS,
    get_validator,
    validate_name_only,
    validate_pep508,
)


class TestPep508:
    def test_bare_name(self):
        spec = validate_pep508("requests")
        assert spec.name == "requests"
        assert spec.raw == "requests"
        assert spec.extras == []
        assert spec.specifier == ""
        assert spec.marker is None

    def test_version_and_extras(self):
        spec = validate_pep508("requests[socks,security]>=2.31")
        assert spec.name == "requests"
        assert spec.extras == ["security", "socks"]
        assert spec.specifier == ">=2.31"

    def test_marker(self):
        spec = validate_pep508('tomli>=2.0; python_version < "3.11"')
        assert spec.name == "tomli"
        assert spec.marker is not None
        assert "python_version" in spec.marker

    def test_url(self):
        spec = validate_pep508("pkg @ https://example.com/pkg-1.0.tar.gz")
        assert spec.name == "pkg"
        assert spec.url == "https://example.com/pkg-1.0.tar.gz"

    @pytest.mark.parametrize("text", [
        ">=1.0",
        "-r requirements.txt",
        "requests >=",
        "requests[",
    ])
    def test_rejects_invalid(self, text):
        with pytest.raises(SpecifierValidationError) as exc_info:
            validate_pep508(text)
        assert exc_info.value.text == text
        assert exc_info.value.reason


class TestNameOnly:
    def test_name_with_constraint_kept_verbatim(self):
        spec = validate_name_only("rich >= 13 whatever")
        assert spec.name == "rich"
        assert spec.specifier == ">= 13 whatever"
        assert spec.raw == "rich >= 13 whatever"

    def test_dotted_and_dashed_names(self):
        assert validate_name_only("zope.interface").name == "zope.interface"
        assert validate_name_only("typing-extensions>=4").name == "typing-extensions"

    @pytest.mark.parametrize("text", [">=1.0", "-e .", "_private", "foo-"])
    def test_rejects_missing_name(self, text):
        with pytest.raises(SpecifierValidationError, match="package name"):
            validate_name_only(text)


class TestRegistry:
    def test_known_validators(self):
        assert get_validator("pep508") is validate_pep508
        assert get_validator("name") is validate_name_only
        assert set(VALIDATORS) == {"pep508", "name"}

    def test_unknown_validator(self):
        with pytest.raises(ValueError, match="Unknown validator 'strict'"):
            get_validator("strict")
