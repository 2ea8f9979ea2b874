"""Roster loading: the list endpoint plus one detail request per entry."""
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass

from loguru import logger

from .api import FetchError, fetch_json
from .core import POKEAPI_BASE, SPRITE_BASE_URL
from .text_utils import display_name


@dataclass(frozen=True)
class Summary:
    id: int
    name: str
    image_url: str
    description_ref: str

    @property
    def display_name(self) -> str:
        return display_name(self.name)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'display_name': self.display_name,
            'image_url': self.image_url,
            'description_ref': self.description_ref,
        }


def sprite_url(pid: int) -> str:
    return f"{SPRITE_BASE_URL}/{pid}.png"


def fetch_roster_index(limit: int):
    """Return the ordered ``[{name, url}, ...]`` list from the pokemon endpoint."""
    url = f"{POKEAPI_BASE}/pokemon"
    try:
        data = fetch_json(url, params={'limit': limit})
    except FetchError as e:
        raise FetchError(f"Failed to fetch Pokémon: {e}", url=e.url) from e
    results = data.get('results') if isinstance(data, dict) else None
    if not isinstance(results, list):
        raise FetchError(f"Malformed JSON body from {url}: missing 'results'", url=url)
    for item in results:
        if not isinstance(item, dict) or not item.get('name') or not item.get('url'):
            raise FetchError(f"Malformed JSON body from {url}: bad entry {item!r}", url=url)
    return results


def fetch_species_ref(detail_url: str) -> str:
    j = fetch_json(detail_url)
    species_url = ((j.get('species') if isinstance(j, dict) else None) or {}).get('url')
    if not species_url:
        raise FetchError(f"Malformed JSON body from {detail_url}: missing species url", url=detail_url)
    return species_url


def load_roster(size: int):
    """Load the first ``size`` Pokémon as ``Summary`` records, in list order.

    Every detail request is issued at once. Ids are 1-based positions in the
    list response and sprite urls are built from them. If any detail request
    fails the whole load fails with ``FetchError``; no partial roster is
    returned.
    """
    if size < 1:
        raise ValueError(f"roster size must be positive, got {size}")
    logger.info(f"Loading roster of {size} Pokémon")
    entries = fetch_roster_index(size)
    if not entries:
        return []
    pool = ThreadPoolExecutor(max_workers=len(entries))
    try:
        futures = [pool.submit(fetch_species_ref, e['url']) for e in entries]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        failed = next((f for f in futures if f in done and f.exception() is not None), None)
        if failed is not None:
            raise failed.exception()
        # Collect by submission index so completion order never leaks into the roster
        refs = [f.result() for f in futures]
    except FetchError as e:
        logger.error(f"Roster load failed: {e}")
        raise
    finally:
        # Nothing is pending on success; on failure the rest are dropped
        pool.shutdown(wait=False, cancel_futures=True)
    roster = [
        Summary(id=i + 1, name=entry['name'], image_url=sprite_url(i + 1), description_ref=ref)
        for i, (entry, ref) in enumerate(zip(entries, refs))
    ]
    logger.info(f"Loaded {len(roster)} Pokémon")
    return roster
