import os
from concurrent.futures import ThreadPoolExecutor

# Constants
POKEAPI_BASE = os.environ.get('POKEAPI_BASE') or 'https://pokeapi.co/api/v2'
SPRITE_BASE_URL = (
    os.environ.get('POKEDEX_SPRITE_BASE')
    or 'https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon'
)
ROSTER_SIZE = int(os.environ.get('POKEDEX_ROSTER_SIZE') or 151)
DESCRIPTION_LANG = 'en'

# No timeout unless configured; requests then waits on the socket defaults
_timeout = os.environ.get('POKEDEX_REQUEST_TIMEOUT')
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

NO_DESCRIPTION = 'No description available.'
DESCRIPTION_FAILED = 'Failed to load description.'

# Background executor for the roster load scheduled on the first request
EXECUTOR = ThreadPoolExecutor(max_workers=2)
