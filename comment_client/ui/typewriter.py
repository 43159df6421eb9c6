import asyncio
import logging
from typing import Awaitable, Callable, Optional, Sequence

from comment_client.ui import controls
from comment_client.ui.ports import OutputSink


logger = logging.getLogger(__name__)

TYPE_DELAY_MS = 200
DELETE_DELAY_MS = 100
HOLD_DELAY_MS = 2000
NEXT_WORD_DELAY_MS = 500


class TextAnimator:
    """Types and deletes a list of words, one character per step, forever"""

    def __init__(
        self,
        words: Sequence[str],
        sink: OutputSink,
        region_id: str = controls.HEADLINE_WORD,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if not words:
            raise ValueError("TextAnimator needs at least one word")
        self.words = list(words)
        self.sink = sink
        self.region_id = region_id
        self._sleep = sleep
        self.word_index = 0
        self.char_index = 0
        self.deleting = False
        self._task: Optional[asyncio.Task] = None

    @property
    def text(self) -> str:
        return self.words[self.word_index][:self.char_index]

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def step(self) -> int:
        """
        Apply one transition and write the visible text

        Returns:
            Delay in milliseconds before the next step
        """
        word = self.words[self.word_index]

        if self.deleting:
            self.char_index = max(self.char_index - 1, 0)
            delay = DELETE_DELAY_MS
        else:
            self.char_index = min(self.char_index + 1, len(word))
            delay = TYPE_DELAY_MS

        self.sink.write(self.region_id, self.text)

        if not self.deleting and self.char_index == len(word):
            delay = HOLD_DELAY_MS
            self.deleting = True
        elif self.deleting and self.char_index == 0:
            self.deleting = False
            self.word_index = (self.word_index + 1) % len(self.words)
            delay = NEXT_WORD_DELAY_MS

        return delay

    async def run(self) -> None:
        while True:
            delay = self.step()
            await self._sleep(delay / 1000)

    def start(self) -> asyncio.Task:
        """Schedule the loop on the running event loop; a second call is a no-op"""
        if not self.running:
            logger.info("Starting headline animation")
            self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Headline animation stopped")
