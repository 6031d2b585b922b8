"""
Bundled grammar modules, keyed by BCP-47 tag.

Adding a language means writing one module here and listing its class in
``LANGUAGES``; the registry, converter and HTTP layer pick it up from this
mapping.
"""

from __future__ import annotations

from ..grammar import Language
from .de import German
from .en import English
from .fr import BelgianFrench, French
from .hi import Hindi
from .ja import Japanese
from .ko import Korean
from .pt import Portuguese
from .ru import Russian
from .tr import Turkish
from .zh_hans import SimplifiedChinese

LANGUAGES: dict[str, type[Language]] = {
    cls.code: cls
    for cls in (
        English,
        French,
        BelgianFrench,
        German,
        Turkish,
        Portuguese,
        Russian,
        Hindi,
        Japanese,
        Korean,
        SimplifiedChinese,
    )
}
