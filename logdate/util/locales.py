"""Locale resolution for date rendering.

Locale tags are accepted in IETF BCP 47 (:code:`fr-FR`) notation. The names of months,
weekdays and half days are taken from the locale tables of :code:`arrow`.
"""

import locale as platform_locale
from functools import lru_cache

from arrow.locales import Locale, get_locale

from logdate.abc.exceptions import LogdateException

FALLBACK_LOCALE = "en-us"


class UnknownLocaleError(LogdateException):
    """Raised if a locale tag can not be resolved"""

    def __init__(self, tag: str):
        super().__init__(f"The locale '{tag}' is not supported")


def resolve_locale(tag: str) -> Locale:
    """resolve a BCP 47 language tag to a locale

    The lookup is case-insensitive. If the region of the tag is unknown the
    bare language is used, e.g. :code:`fr-BE` resolves to :code:`fr`.

    Parameters
    ----------
    tag : str
        the language tag, e.g. :code:`fr-FR`

    Returns
    -------
    Locale
        the locale with the names for months, weekdays and half days

    Raises
    ------
    UnknownLocaleError
        if neither the tag nor its language are known
    """
    if not isinstance(tag, str) or not tag.strip():
        raise UnknownLocaleError(tag)
    try:
        return get_locale(tag)
    except ValueError:
        pass
    language = tag.replace("_", "-").split("-", maxsplit=1)[0]
    try:
        return get_locale(language)
    except ValueError as error:
        raise UnknownLocaleError(tag) from error


@lru_cache(maxsize=1)
def default_locale() -> Locale:
    """the locale of the platform, falls back to :code:`en-us`"""
    tag, _ = platform_locale.getlocale(platform_locale.LC_TIME)
    if not tag or tag in ("C", "POSIX"):
        return get_locale(FALLBACK_LOCALE)
    try:
        return resolve_locale(tag)
    except UnknownLocaleError:
        return get_locale(FALLBACK_LOCALE)
