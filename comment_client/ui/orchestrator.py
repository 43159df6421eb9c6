import logging
from typing import Any, Optional, Sequence, Union

from comment_client.services import CommentClient, StatisticsClient
from comment_client.ui import controls, rendering
from comment_client.ui.ports import InputSource, Notifier, OutputSink, RegionSequencer


logger = logging.getLogger(__name__)

INVALID_ID_NOTICE = "Provide a valid id"
INVALID_AMOUNT_NOTICE = "Enter a valid amount"
DELETED_NOTICE = "Deleted"


def _is_positive_number(value: Any) -> bool:
    if value is None or value == "":
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


class UIOrchestrator:
    """Runs user actions: validate the controls, call the service, render the answer"""

    def __init__(
        self,
        comment_client: CommentClient,
        stats_client: StatisticsClient,
        source: InputSource,
        sink: OutputSink,
        notifier: Notifier,
        quick_stats_sizes: Sequence[int] = (10, 50, 100),
        sequencer: Optional[RegionSequencer] = None,
    ):
        """
        Initialize the orchestrator

        Args:
            comment_client: Client for the comment endpoints
            stats_client: Client for the statistics endpoint
            source: Where control values are read from
            sink: Where rendered regions are written
            notifier: Where user notices are raised
            quick_stats_sizes: Sample sizes carried by the quick-stats triggers
            sequencer: When given, a response overtaken by a later trigger on
                the same region is dropped instead of written
        """
        self.comment_client = comment_client
        self.stats_client = stats_client
        self.source = source
        self.sink = sink
        self.notifier = notifier
        self.quick_stats_sizes = list(quick_stats_sizes)
        self.sequencer = sequencer

    def _begin(self, region_id: str) -> Optional[int]:
        if self.sequencer is None:
            return None
        return self.sequencer.begin(region_id)

    def _render(self, region_id: str, generation: Optional[int], content: str) -> None:
        if generation is not None and not self.sequencer.is_current(region_id, generation):
            logger.info(f"Dropping stale response for {region_id}")
            return
        self.sink.write(region_id, content)

    async def create(self) -> str:
        text = self.source.read(controls.COMMENT_TEXT)
        generation = self._begin(controls.COMMENT_RESULT)
        comment = await self.comment_client.create(text)
        self._render(controls.COMMENT_RESULT, generation, rendering.render_prediction(comment))
        return controls.COMMENT_RESULT

    async def search(self) -> Optional[str]:
        comment_id = self.source.read(controls.SEARCH_ID)
        if comment_id is None or comment_id == "":
            logger.warning("Search aborted: empty id")
            self.notifier.notify(INVALID_ID_NOTICE)
            return None

        generation = self._begin(controls.SEARCH_RESULT)
        comment = await self.comment_client.read(comment_id)
        self._render(controls.SEARCH_RESULT, generation, rendering.render_comment(comment))
        return controls.SEARCH_RESULT

    async def update(self) -> str:
        comment_id = self.source.read(controls.UPDATE_ID)
        text = self.source.read(controls.UPDATE_TEXT)
        generation = self._begin(controls.UPDATE_RESULT)
        comment = await self.comment_client.update(comment_id, text)
        self._render(
            controls.UPDATE_RESULT,
            generation,
            rendering.render_comment(comment, title="Updated comment"),
        )
        return controls.UPDATE_RESULT

    async def delete(self) -> None:
        comment_id = self.source.read(controls.DELETE_ID)
        await self.comment_client.delete(comment_id)
        self.notifier.notify(DELETED_NOTICE)

    async def upload_batch(self) -> None:
        file = self.source.read(controls.BATCH_FILE)
        if not file:
            return

        result = await self.comment_client.upload_batch(file)
        self.notifier.notify(rendering.batch_notice(result.record_count))

    async def quick_stats(self, sample_size: int) -> str:
        return await self._stats(sample_size)

    async def custom_stats(self) -> Optional[str]:
        sample_size = self.source.read(controls.STATS_CUSTOM)
        if not _is_positive_number(sample_size):
            logger.warning(f"Custom stats aborted: invalid amount {sample_size!r}")
            self.notifier.notify(INVALID_AMOUNT_NOTICE)
            return None
        return await self._stats(sample_size)

    async def _stats(self, sample_size: Union[int, str]) -> str:
        generation = self._begin(controls.STATS_RESULT)
        summary = await self.stats_client.stats(sample_size)
        self._render(controls.STATS_RESULT, generation, rendering.render_stats(summary))
        return controls.STATS_RESULT
