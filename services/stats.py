import random

STAT_MIN = 1
STAT_MAX = 100
# Kept for parity with the original Pokédex; no known meaning
EXCLUDED_STAT_VALUES = frozenset({59, 63})


def random_stat(rng=random) -> int:
    """Uniform integer in [STAT_MIN, STAT_MAX], redrawn while it is excluded."""
    while True:
        value = rng.randint(STAT_MIN, STAT_MAX)
        if value not in EXCLUDED_STAT_VALUES:
            return value


def roll_stats(rng=random):
    """Return independent ``(hp, attack)`` draws."""
    hp = random_stat(rng)
    attack = random_stat(rng)
    return hp, attack
