"""Tests for resource URL construction."""

import pytest

from digitalocean_api import urls

ENDPOINT = urls.DEFAULT_ENDPOINT


def test_no_parts_yields_trailing_slash():
    """A bare resource URL ends with a slash."""
    assert urls.build_url(ENDPOINT, "droplets") == ENDPOINT + "droplets/"


def test_numeric_part_passes_through():
    """Numeric identifiers are inserted unchanged."""
    assert urls.build_url(ENDPOINT, "droplets", 123) == ENDPOINT + "droplets/123"


def test_parts_are_joined_with_slashes():
    """Multiple parts build a nested sub-resource path."""
    url = urls.build_url(ENDPOINT, "droplets", 42, "actions")
    assert url == ENDPOINT + "droplets/42/actions"


def test_textual_part_is_lower_cased():
    """Identifiers are lower-cased before insertion."""
    url = urls.build_url(ENDPOINT, "domains", "Example.COM", "records")
    assert url == ENDPOINT + "domains/example.com/records"


@pytest.mark.parametrize(
    ("part", "expected"),
    [
        ("my domain", "my%20domain"),
        ("a/b", "a%2Fb"),
        ("Q?x=1&y", "q%3Fx%3D1%26y"),
        ("plain-name_1.txt", "plain-name_1.txt"),
    ],
)
def test_reserved_characters_are_percent_encoded(part, expected):
    """Reserved URL characters in identifiers are percent-encoded."""
    assert urls.normalize_part(part) == expected


def test_resource_name_is_not_encoded():
    """Pseudo-resources with a slash keep it."""
    url = urls.build_url(ENDPOINT, "account/keys", 512190)
    assert url == ENDPOINT + "account/keys/512190"


def test_custom_endpoint():
    """The endpoint is a parameter, not a fixed constant."""
    url = urls.build_url("http://localhost:8080/v2/", "sizes")
    assert url == "http://localhost:8080/v2/sizes/"
