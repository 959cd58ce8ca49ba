from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Mapping

from ..core.constants import LOAD_POOL_SIZE
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


def run_loads(loaders: Mapping[str, Callable[[], Any]], *, max_workers: int = LOAD_POOL_SIZE) -> list[str]:
    """Run independent loads concurrently and wait for all of them.

    No ordering between loads. A load that fails with StoreError keeps its
    previous state; its name is returned so callers can report it.
    """
    failed: list[str] = []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {pool.submit(fn): name for name, fn in loaders.items()}
        for future in as_completed(futures):
            name = futures[future]
            try:
                future.result()
            except StoreError as e:
                logger.warning("Loading %s failed: %s", name, e)
                failed.append(name)
    return sorted(failed)
