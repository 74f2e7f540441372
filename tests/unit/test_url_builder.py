"""Unit tests for UrlBuilder."""

import pytest

from restcaptcha.builders import UrlBuilder

BASE = "https://localhost:44303/v1/"


class TestRelativePath:
    def test_appends_to_base_with_trailing_slash(self):
        assert UrlBuilder(BASE).with_relative_path("verify").url == (
            "https://localhost:44303/v1/verify"
        )

    def test_inserts_single_separator(self):
        url = UrlBuilder("https://localhost/v1").with_relative_path("verify").url
        assert url == "https://localhost/v1/verify"

    def test_collapses_double_separator(self):
        url = UrlBuilder("https://localhost/v1/").with_relative_path("/verify").url
        assert url == "https://localhost/v1/verify"

    def test_host_only_base(self):
        url = UrlBuilder("https://localhost").with_relative_path("verify").url
        assert url == "https://localhost/verify"


class TestParameters:
    def test_single_parameter(self):
        url = UrlBuilder(BASE).with_parameter("siteKey", "abc").url
        assert url == BASE + "?siteKey=abc"

    def test_parameters_joined_with_ampersand(self):
        url = (
            UrlBuilder(BASE)
            .with_relative_path("verify")
            .with_parameter("siteKey", "abc")
            .with_parameter("language", "en")
            .url
        )
        assert url == "https://localhost:44303/v1/verify?siteKey=abc&language=en"

    @pytest.mark.parametrize("value", [None, "", "   ", "\t"])
    def test_blank_value_is_skipped(self, value):
        url = UrlBuilder(BASE).with_parameter("language", value).url
        assert url == BASE
        assert "language" not in url

    def test_value_is_percent_encoded(self):
        url = UrlBuilder(BASE).with_parameter("siteKey", "a b&c=d/é").url
        assert url.endswith("?siteKey=a%20b%26c%3Dd%2F%C3%A9")

    def test_unreserved_characters_kept(self):
        url = UrlBuilder(BASE).with_parameter("k", "A-z_0.9~").url
        assert url.endswith("?k=A-z_0.9~")

    def test_key_is_percent_encoded(self):
        url = UrlBuilder(BASE).with_parameter("site key", "x").url
        assert url.endswith("?site%20key=x")

    def test_int_value(self):
        assert UrlBuilder(BASE).with_parameter("page", 2).url.endswith("?page=2")

    def test_existing_query_is_extended(self):
        url = UrlBuilder("https://localhost/v1/?a=1").with_parameter("b", "2").url
        assert url == "https://localhost/v1/?a=1&b=2"

    def test_repeated_key_is_appended_again(self):
        url = UrlBuilder(BASE).with_parameter("k", "1").with_parameter("k", "2").url
        assert url.endswith("?k=1&k=2")

    @pytest.mark.parametrize("key", [None, "", "  "])
    def test_blank_key_raises(self, key):
        with pytest.raises(ValueError):
            UrlBuilder(BASE).with_parameter(key, "value")


class TestConstruction:
    def test_missing_base_url_raises(self):
        with pytest.raises(ValueError):
            UrlBuilder(None)

    def test_str_returns_url(self):
        assert str(UrlBuilder(BASE).with_relative_path("verify")) == BASE + "verify"
