from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from .exceptions import UnknownPresetError
from .schemas.alphabet import Alphabet, CaseSensitivity, make

_AGNOSTIC = CaseSensitivity.CASE_AGNOSTIC
_SENSITIVE = CaseSensitivity.CASE_SENSITIVE

BASE16 = make("0123456789abcdef", _AGNOSTIC)
BASE32 = make("0123456789abcdefghijklmnopqrstuv", _AGNOSTIC)
BASE32_RFC = make("abcdefghijklmnopqrstuvwxyz234567", _AGNOSTIC)
BASE36 = make("0123456789abcdefghijklmnopqrstuvwxyz", _AGNOSTIC)
BASE58 = make("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz", _SENSITIVE)
BASE62 = make("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", _SENSITIVE)
BASE64 = make("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/", _SENSITIVE)
BASE64_URL = make("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_", _SENSITIVE)

PRESETS: Mapping[str, Alphabet] = MappingProxyType({
    "base16": BASE16,
    "base32": BASE32,
    "base32-rfc": BASE32_RFC,
    "base36": BASE36,
    "base58": BASE58,
    "base62": BASE62,
    "base64": BASE64,
    "base64-url": BASE64_URL,
})


def get_preset(name: str) -> Alphabet:
    """Look up a preset by name, e.g. ``"base58"`` or ``"BASE64_URL"``."""
    if not isinstance(name, str):
        raise TypeError("preset name must be a string")
    key = name.strip().lower().replace("_", "-")
    try:
        return PRESETS[key]
    except KeyError:
        raise UnknownPresetError(name) from None


def resolve(base: Union[Alphabet, str]) -> Alphabet:
    if isinstance(base, Alphabet):
        return base
    if isinstance(base, str):
        return get_preset(base)
    raise TypeError("base must be an Alphabet or a preset name")
