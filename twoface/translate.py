""" Translation support for twoface

Only the library's own fixed messages are translated, such as the generic 500 texts.
Your external descriptions are yours to translate.

By default, the 'twoface' gettext domain is used, if installed.
An application can plug in its own catalog:

    twoface.translate.set_translation(gettext.translation('myapp', localedir, languages=['de']))
"""

import gettext
from typing import Union

Translation = Union[gettext.NullTranslations, gettext.GNUTranslations]


def load_default_translation() -> Translation:
    """ Load the 'twoface' gettext domain; no-op translation if it's not installed """
    try:
        return gettext.translation('twoface')
    except FileNotFoundError:
        return gettext.NullTranslations()


translation: Translation = load_default_translation()


def set_translation(new_translation: Translation = None):
    """ Use another translation catalog for the library's messages

    Args:
        new_translation: The catalog. `None` restores the default one.
    """
    global translation
    translation = new_translation if new_translation is not None else load_default_translation()


def _(message: str) -> str:
    # Looked up on every call: set_translation() applies to the messages translated later
    return translation.gettext(message)
