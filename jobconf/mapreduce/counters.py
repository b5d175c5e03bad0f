"""Named, grouped job counters.

Counters are addressed by ``(group name, counter name)``. Looking up a
counter that has not been incremented yet returns a zero-valued counter,
matching how a job client reports counters the tasks never touched.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional


@dataclass
class Counter:
    """A single named counter."""
    name: str
    display_name: str
    value: int = 0

    def get_value(self) -> int:
        return self.value

    def increment(self, amount: int) -> None:
        self.value += amount


class CounterGroup:
    """Counters sharing a group name."""

    def __init__(self, name: str, display_name: Optional[str] = None):
        self.name = name
        self.display_name = display_name or name
        self._counters: Dict[str, Counter] = {}

    def find_counter(self, name: str) -> Counter:
        """Return the counter called ``name``, creating it at zero if absent."""
        counter = self._counters.get(name)
        if counter is None:
            counter = Counter(name=name, display_name=name)
            self._counters[name] = counter
        return counter

    def __iter__(self) -> Iterator[Counter]:
        return iter(self._counters.values())

    def __len__(self) -> int:
        return len(self._counters)


class Counters:
    """All counter groups of one job."""

    def __init__(self):
        self._groups: Dict[str, CounterGroup] = {}

    def get_group(self, group_name: str) -> CounterGroup:
        group = self._groups.get(group_name)
        if group is None:
            group = CounterGroup(group_name)
            self._groups[group_name] = group
        return group

    def find_counter(self, group_name: str, counter_name: str) -> Counter:
        return self.get_group(group_name).find_counter(counter_name)

    def increment(self, group_name: str, counter_name: str, amount: int = 1) -> None:
        self.find_counter(group_name, counter_name).increment(amount)

    def group_names(self):
        return sorted(self._groups)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Return ``{group: {counter: value}}`` for reporting."""
        return {
            group_name: {counter.name: counter.value for counter in group}
            for group_name, group in sorted(self._groups.items())
        }
