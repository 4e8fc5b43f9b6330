import logging
from collections import OrderedDict

from .tint import compute_tint

logger = logging.getLogger(__name__)


def _freeze(value):
    if isinstance(value, dict):
        return tuple(sorted(value.items()))
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return value


class TintCache:
    """Least-recently-used memo of compute_tint results.

    Each instance holds its own entries, so independent callers (or tests)
    never see each other's results. Results are immutable namedtuples and
    are shared between hits.
    """

    def __init__(self, maxsize=128):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries = OrderedDict()

    def __len__(self):
        return len(self._entries)

    def clear(self):
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def compute(self, **options):
        """Return compute_tint(**options), reusing a cached result when possible."""
        key = tuple(sorted((name, _freeze(value)) for name, value in options.items()))

        if key in self._entries:
            self._entries.move_to_end(key)
            self.hits += 1
            return self._entries[key]

        result = compute_tint(**options)
        self.misses += 1
        self._entries[key] = result
        if len(self._entries) > self.maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted cached tint %s", evicted)
        return result
