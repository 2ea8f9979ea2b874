import time

import pytest

from services import api
from services.core import POKEAPI_BASE

LIST_URL = f"{POKEAPI_BASE}/pokemon"
DETAIL_BASE = 'https://pokeapi.test/pokemon'
SPECIES_BASE = 'https://pokeapi.test/pokemon-species'


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, bad_json=False):
        self.status_code = status_code
        self._json = json_data
        self._bad_json = bad_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError('Expecting value')
        return self._json


class FakePokeAPI:
    """Serves list, detail and species payloads for a fixed set of names."""

    def __init__(self, names):
        self.names = list(names)
        self.calls = []
        self.list_status = 200
        self.failing_details = set()
        self.broken_details = set()
        self.detail_delays = {}
        self.species = {}
        self.failing_species = set()

    def species_url(self, idx):
        return f"{SPECIES_BASE}/{idx}/"

    def get(self, url, params=None, timeout=None):
        self.calls.append(url)
        if url == LIST_URL:
            if self.list_status != 200:
                return DummyResponse(status_code=self.list_status)
            limit = (params or {}).get('limit', len(self.names))
            results = [
                {'name': n, 'url': f"{DETAIL_BASE}/{i + 1}/"}
                for i, n in enumerate(self.names[:limit])
            ]
            return DummyResponse(json_data={'count': len(self.names), 'results': results})
        if url.startswith(DETAIL_BASE + '/'):
            idx = int(url.rstrip('/').split('/')[-1])
            delay = self.detail_delays.get(idx)
            if delay:
                time.sleep(delay)
            if idx in self.failing_details:
                return DummyResponse(status_code=500)
            if idx in self.broken_details:
                return DummyResponse(json_data={})
            return DummyResponse(json_data={'id': idx, 'species': {'url': self.species_url(idx)}})
        if url.startswith(SPECIES_BASE):
            idx = int(url.rstrip('/').split('/')[-1])
            if idx in self.failing_species:
                return DummyResponse(status_code=404)
            entries = self.species.get(idx)
            if entries is None:
                entries = [
                    {'flavor_text': f"Entry {idx} in French.", 'language': {'name': 'fr'}},
                    {'flavor_text': f"A strange seed\nwas planted {idx}.", 'language': {'name': 'en'}},
                    {'flavor_text': f"Another entry {idx}.", 'language': {'name': 'en'}},
                ]
            return DummyResponse(json_data={'flavor_text_entries': entries})
        return DummyResponse(status_code=404)


@pytest.fixture
def make_api(monkeypatch):
    def _make(names):
        fake = FakePokeAPI(names)
        monkeypatch.setattr(api.requests, 'get', fake.get)
        return fake
    return _make


@pytest.fixture
def kanto_names():
    names = [f"mon-{i}" for i in range(1, 152)]
    names[0] = 'bulbasaur'
    names[3] = 'charmander'
    names[24] = 'pikachu'
    names[25] = 'raichu'
    return names
