from typing import Dict, List, Tuple


def prefix_of(type_name: str) -> str:
    """Lower-cased first character of *type_name*."""
    return type_name[:1].lower()


def unique_name(prefix: str, counters: Dict[str, int]) -> Tuple[str, int]:
    """Return the next name for *prefix* and the counter value to store.

    The first name is the bare prefix; later ones append 1, 2, ...
    """
    index = counters.get(prefix)
    if index is None:
        return prefix, 1
    return f"{prefix}{index}", index + 1


class NameRegistry:
    """Mints program-unique names and remembers which type each was declared with.

    Counters are keyed by prefix, not by type: ``Real`` and ``Rectangle``
    share the ``r`` counter, so their names never collide.
    """

    def __init__(self):
        self.counters: Dict[str, int] = {}
        self.declared: Dict[str, List[str]] = {}

    def fresh_name(self, type_name: str) -> str:
        prefix = prefix_of(type_name)
        name, self.counters[prefix] = unique_name(prefix, self.counters)
        self.declared.setdefault(type_name, []).append(name)
        return name

    def declared_of(self, type_name: str) -> List[str]:
        """Names declared with exactly *type_name*, oldest first."""
        return list(self.declared.get(type_name, ()))

    def reset(self) -> None:
        self.counters.clear()
        self.declared.clear()
