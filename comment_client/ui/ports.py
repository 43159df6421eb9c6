"""Input and output boundaries between the orchestrator and the page.

The orchestrator never looks controls or regions up by itself: it reads
from an ``InputSource``, writes to an ``OutputSink`` and raises notices
through a ``Notifier``. The in-memory implementations below back the HTTP
front end and the tests.
"""
from typing import Any, Dict, List, Mapping, Optional, Protocol


class InputSource(Protocol):
    def read(self, control_id: str) -> Any:
        ...


class OutputSink(Protocol):
    def write(self, region_id: str, content: str) -> None:
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class MappingInputSource:
    """Control values taken from a mapping; missing controls read as empty"""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values = dict(values or {})

    def read(self, control_id: str) -> Any:
        return self.values.get(control_id, "")


class RegionStore:
    """Output regions held in memory, each rewritten wholesale"""

    def __init__(self):
        self._regions: Dict[str, str] = {}

    def write(self, region_id: str, content: str) -> None:
        self._regions[region_id] = content

    def get(self, region_id: str) -> Optional[str]:
        return self._regions.get(region_id)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._regions)


class NoticeCollector:
    """Collects the notices raised while handling one action"""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class RegionSequencer:
    """Generation counter per region, used to drop overtaken responses"""

    def __init__(self):
        self._generations: Dict[str, int] = {}

    def begin(self, region_id: str) -> int:
        generation = self._generations.get(region_id, 0) + 1
        self._generations[region_id] = generation
        return generation

    def is_current(self, region_id: str, generation: int) -> bool:
        return self._generations.get(region_id) == generation
