from dataclasses import dataclass
from enum import Enum

from loguru import logger

from .api import FetchError, fetch_json
from .core import DESCRIPTION_FAILED, DESCRIPTION_LANG, NO_DESCRIPTION
from .text_utils import clean_flavor_text


class DescriptionStatus(str, Enum):
    FOUND = 'found'
    MISSING = 'missing'
    FAILED = 'failed'


@dataclass(frozen=True)
class DescriptionResult:
    status: DescriptionStatus
    text: str

    @classmethod
    def found(cls, text: str):
        return cls(DescriptionStatus.FOUND, text)

    @classmethod
    def missing(cls):
        return cls(DescriptionStatus.MISSING, NO_DESCRIPTION)

    @classmethod
    def failed(cls):
        return cls(DescriptionStatus.FAILED, DESCRIPTION_FAILED)


def pick_flavor_text(species_json, lang: str = DESCRIPTION_LANG):
    """Return the first flavor text in ``lang`` or None."""
    entries = species_json.get('flavor_text_entries') or []
    for e in entries:
        lang_name = (e.get('language') or {}).get('name')
        if lang_name == lang:
            return clean_flavor_text(e.get('flavor_text'))
    return None


def fetch_description(url: str, lang: str = DESCRIPTION_LANG) -> DescriptionResult:
    """Fetch the species resource at ``url`` and pick its description.

    Never raises for network or payload problems: those come back as a
    ``FAILED`` result so the caller can still show the Pokémon.
    """
    try:
        j = fetch_json(url)
        if not isinstance(j, dict):
            raise FetchError(f"Malformed JSON body from {url}", url=url)
        text = pick_flavor_text(j, lang)
    except (FetchError, AttributeError, TypeError) as e:
        logger.warning(f"Description fetch failed for {url}: {e}")
        return DescriptionResult.failed()
    if text is None:
        return DescriptionResult.missing()
    return DescriptionResult.found(text)
