"""
Data model for vault entries, drafts and generator options.

All three types map to the JSON bodies exchanged with the remote vault
service, which uses camelCase keys.
"""

from typing import Dict, Any
from dataclasses import dataclass

from . import config


@dataclass(frozen=True)
class VaultEntry:
    """A saved password entry, as returned by the remote store."""
    id: str
    site_name: str = ""
    link: str = ""
    password: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VaultEntry':
        """
        Create from a wire dictionary.
        Args:
            data: JSON object from the entries endpoint
        Raises:
            KeyError: if the object carries neither '_id' nor 'id'
            TypeError: if a text field holds something other than a string
        """
        entry_id = data.get('_id', data.get('id'))
        if entry_id is None:
            raise KeyError("_id")
        return cls(
            id=str(entry_id),
            site_name=_text_field(data, 'siteName'),
            link=_text_field(data, 'link'),
            password=_text_field(data, 'password'),
        )


def _text_field(data: Dict[str, Any], key: str) -> str:
    """Missing or null decodes as ""; any other non-string is rejected."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Draft:
    """An unsaved entry. Same shape as VaultEntry, without an id."""
    site_name: str = ""
    link: str = ""
    password: str = ""

    # Wire name -> attribute name
    FIELDS = {
        'siteName': 'site_name',
        'link': 'link',
        'password': 'password',
    }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the body of a save request."""
        return {
            'siteName': self.site_name,
            'link': self.link,
            'password': self.password,
        }


@dataclass(frozen=True)
class GeneratorOptions:
    """Character-class counts requested from the remote password generator."""
    letters: int = config.GENERATOR_DEFAULT_LETTERS
    numbers: int = config.GENERATOR_DEFAULT_NUMBERS
    symbols: int = config.GENERATOR_DEFAULT_SYMBOLS

    NAMES = ('letters', 'numbers', 'symbols')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the body of a generate request."""
        return {name: getattr(self, name) for name in self.NAMES}
