from typing import Any, Optional

from pydantic import RootModel


class BatchUploadResult(RootModel[Any]):
    """Per-row outcomes of a batch upload; only their count is used"""

    @property
    def record_count(self) -> Optional[int]:
        # Error bodies are objects, not row lists
        if isinstance(self.root, list):
            return len(self.root)
        return None
