# pylint: disable=missing-docstring
from unittest import mock

import pytest
from arrow.locales import EnglishLocale, FrenchLocale, GermanLocale

from logdate.util.locales import UnknownLocaleError, default_locale, resolve_locale


class TestResolveLocale:
    @pytest.mark.parametrize(
        "tag, locale_class",
        [
            ("en", EnglishLocale),
            ("en-US", EnglishLocale),
            ("EN-us", EnglishLocale),
            ("fr-FR", FrenchLocale),
            ("fr-Fr", FrenchLocale),
            ("fr-BE", FrenchLocale),
            ("de", GermanLocale),
            ("de-DE", GermanLocale),
        ],
    )
    def test_resolves_tags(self, tag, locale_class):
        assert isinstance(resolve_locale(tag), locale_class)

    @pytest.mark.parametrize("tag", ["xx-YY", "xx", "", "  ", None])
    def test_rejects_unknown_tags(self, tag):
        with pytest.raises(UnknownLocaleError, match="is not supported"):
            resolve_locale(tag)

    def test_error_names_the_tag(self):
        with pytest.raises(UnknownLocaleError) as error:
            resolve_locale("xx-YY")
        assert error.value.message == "The locale 'xx-YY' is not supported"


class TestDefaultLocale:
    @pytest.mark.parametrize(
        "platform_locale, locale_class",
        [
            (("de_DE", "UTF-8"), GermanLocale),
            (("fr_FR", "ISO8859-1"), FrenchLocale),
            ((None, None), EnglishLocale),
            (("C", None), EnglishLocale),
            (("xx_YY", "UTF-8"), EnglishLocale),
        ],
    )
    def test_default_locale(self, platform_locale, locale_class):
        with mock.patch("locale.getlocale", return_value=platform_locale):
            assert isinstance(default_locale(), locale_class)

    def test_default_locale_is_cached(self):
        with mock.patch("locale.getlocale", return_value=("de_DE", "UTF-8")) as getlocale:
            first = default_locale()
            second = default_locale()
        assert first is second
        getlocale.assert_called_once()
