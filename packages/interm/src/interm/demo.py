"""
Simulated concurrent downloads driving a Block.

Each download is an asyncio task producing progress lines; all of them feed
one BlockUpdater, which is the only code touching the terminal.
"""
from __future__ import annotations

import asyncio
import logging
import random

from .block import Block
from .line import Line
from .terminal import Terminal
from .updater import BlockUpdater

logger = logging.getLogger(__name__)

BAR_WIDTH = 50
STEPS = 100


def progress_line(name: str, step: int, steps: int = STEPS) -> str:
    """Render ``name: [=====>    ] 42.0%`` for the given step."""
    progress = step / steps
    bar = "=" * int(progress * (BAR_WIDTH - 1)) + ">"
    return f"{name}: [{bar:<{BAR_WIDTH}}] {progress * 100:.1f}%"


def download_names(count: int) -> list[str]:
    return [f"Download {idx}" for idx in range(count)]


async def simulate_download(
    updater: BlockUpdater,
    index: int,
    name: str,
    step_delay: float,
) -> None:
    for step in range(STEPS + 1):
        updater.submit(index, progress_line(name, step))
        await asyncio.sleep(step_delay)
    updater.submit(index, f"{name}: Complete")


async def run_downloads(
    count: int,
    max_delay: float,
    terminal: Terminal | None = None,
    seed: int | None = None,
) -> Block:
    """
    Run ``count`` simulated downloads side by side, one line each.

    Returns the Block once every download has finished and the block has
    been cleared. The cursor is hidden while downloads run and shown again
    afterwards, also when a download fails.
    """
    rng = random.Random(seed)
    names = download_names(count)
    block = Block((Line(name) for name in names), terminal=terminal)

    with block:
        block.hide_cursor()
        async with BlockUpdater(block) as updater:
            tasks = [
                asyncio.create_task(simulate_download(updater, idx, name, rng.uniform(0, max_delay)))
                for idx, name in enumerate(names)
            ]
            try:
                await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
        logger.info("%d downloads complete (%d updates)", count, updater.applied)
        block.clear_lines()
    return block
