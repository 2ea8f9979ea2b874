import requests

from .core import REQUEST_TIMEOUT


class FetchError(Exception):
    """Raised when a PokeAPI request fails or returns an unusable body."""

    def __init__(self, message: str, url: str = ''):
        super().__init__(message)
        self.url = url


def fetch_json(url: str, params=None, timeout=REQUEST_TIMEOUT):
    try:
        r = requests.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}", url=url) from e
    if not r.ok:
        raise FetchError(f"Failed to fetch {url} (HTTP {r.status_code})", url=url)
    try:
        return r.json()
    except ValueError as e:
        raise FetchError(f"Malformed JSON body from {url}", url=url) from e
