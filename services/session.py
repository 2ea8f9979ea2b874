"""Session state for the Pokédex page and the controller that owns it.

The filtered roster is always derived from ``roster`` and ``search_term``
through :func:`filter_roster`; it is never stored. Only :meth:`load` and
:meth:`select_summary` touch the network.
"""
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from loguru import logger

from .api import FetchError
from .catalog import Summary, load_roster
from .descriptions import DescriptionStatus, fetch_description
from .stats import roll_stats
from .text_utils import contains_ci


class LoadState(str, Enum):
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


@dataclass(frozen=True)
class Detail:
    summary: Summary
    description: str
    description_status: DescriptionStatus
    hp: int
    attack: int

    @property
    def id(self) -> int:
        return self.summary.id

    @property
    def name(self) -> str:
        return self.summary.name

    def to_dict(self):
        d = self.summary.to_dict()
        d.update({
            'description': self.description,
            'description_status': self.description_status.value,
            'hp': self.hp,
            'attack': self.attack,
        })
        return d


def filter_roster(roster, term: str) -> List[Summary]:
    """Roster entries whose name contains ``term``, case-insensitively, in roster order."""
    if not term:
        return list(roster)
    return [s for s in roster if contains_ci(s.name, term)]


@dataclass
class SessionState:
    roster: List[Summary] = field(default_factory=list)
    search_term: str = ''
    selected: Optional[Detail] = None
    load_state: LoadState = LoadState.LOADING
    load_error: Optional[str] = None

    @property
    def filtered_roster(self) -> List[Summary]:
        return filter_roster(self.roster, self.search_term)

    def to_dict(self):
        return {
            'load_state': self.load_state.value,
            'error': self.load_error,
            'search_term': self.search_term,
            'roster_size': len(self.roster),
            'results': [s.to_dict() for s in self.filtered_roster],
            'selected': self.selected.to_dict() if self.selected else None,
        }


class PokedexController:
    def __init__(self, roster_size: int, rng=random):
        self.roster_size = roster_size
        self.rng = rng
        self.state = SessionState()
        self.closed = False
        self._lock = threading.Lock()
        self._load_started = False

    def load(self) -> SessionState:
        """Load the roster once. LOADING moves to READY or FAILED and stays there."""
        with self._lock:
            if self._load_started or self.closed:
                return self.state
            self._load_started = True
        try:
            roster = load_roster(self.roster_size)
        except FetchError as e:
            return self._fail(str(e))
        except Exception as e:
            logger.exception("Unexpected error while loading roster")
            return self._fail(str(e) or e.__class__.__name__)
        with self._lock:
            if self.closed:
                logger.debug("Controller closed during roster load; discarding result")
                return self.state
            self.state.roster = roster
            self.state.load_state = LoadState.READY
        return self.state

    def _fail(self, reason: str) -> SessionState:
        with self._lock:
            if not self.closed:
                self.state.load_state = LoadState.FAILED
                self.state.load_error = reason
        return self.state

    def set_search_term(self, term: str) -> List[Summary]:
        with self._lock:
            self.state.search_term = term or ''
            return self.state.filtered_roster

    def search(self, term: str):
        """Set the search term and return the state it produces, read under one lock."""
        with self._lock:
            self.state.search_term = term or ''
            return self.state.to_dict()

    def select_summary(self, summary: Summary) -> Detail:
        result = fetch_description(summary.description_ref)
        hp, attack = roll_stats(self.rng)
        detail = Detail(
            summary=summary,
            description=result.text,
            description_status=result.status,
            hp=hp,
            attack=attack,
        )
        with self._lock:
            if not self.closed:
                self.state.selected = detail
        return detail

    def select_by_id(self, pid: int) -> Detail:
        with self._lock:
            summary = next((s for s in self.state.roster if s.id == pid), None)
        if summary is None:
            raise KeyError(pid)
        return self.select_summary(summary)

    def dismiss(self) -> None:
        with self._lock:
            self.state.selected = None

    def close(self) -> None:
        with self._lock:
            self.closed = True

    def snapshot(self):
        with self._lock:
            return self.state.to_dict()
