from comment_client.ui.orchestrator import UIOrchestrator
from comment_client.ui.ports import MappingInputSource, NoticeCollector, RegionSequencer, RegionStore
from comment_client.ui.typewriter import TextAnimator

__all__ = [
    "UIOrchestrator",
    "TextAnimator",
    "MappingInputSource",
    "NoticeCollector",
    "RegionSequencer",
    "RegionStore",
]
