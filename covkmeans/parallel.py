"""Nearest-centroid assignment spread over worker processes."""

from __future__ import annotations

import os
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from itertools import chain, repeat

from covkmeans.clustering import (
    DEFAULT_K,
    DEFAULT_MAX_ITER,
    DEFAULT_SEED,
    KMeansResult,
    Point,
    assign_labels,
    kmeans,
)


class ParallelAssigner:
    """Label samples with their nearest centroid using a pool of processes.

    The samples are split into contiguous, equally sized blocks, one per
    worker, and the per-block labels are joined back in sample order.
    """

    def __init__(self, workers: int | None = None) -> None:
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"number of workers must be positive: {workers}")
        self.workers = workers
        self._executor: ProcessPoolExecutor | None = (
            ProcessPoolExecutor(max_workers=workers) if workers > 1 else None
        )
        self._closed = False

    def __call__(self, data: Sequence[Point], centroids: Sequence[Point]) -> list[int]:
        if self._closed:
            raise RuntimeError("assigner is closed")
        samples = [list(point) for point in data]
        if not samples:
            return []
        centres = [list(centroid) for centroid in centroids]
        if self._executor is None:
            return assign_labels(samples, centres)
        size = -(-len(samples) // self.workers)
        blocks = [samples[start : start + size] for start in range(0, len(samples), size)]
        results = self._executor.map(assign_labels, blocks, repeat(centres))
        return list(chain.from_iterable(results))

    def close(self) -> None:
        """Shut the worker pool down; further calls raise RuntimeError."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._closed = True

    def __enter__(self) -> ParallelAssigner:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def kmeans_parallel(
    data: Sequence[Point],
    k: int = DEFAULT_K,
    max_iter: int = DEFAULT_MAX_ITER,
    seed: int = DEFAULT_SEED,
    workers: int | None = None,
) -> KMeansResult:
    """Run k-means with the assignment step done by ``workers`` processes."""
    with ParallelAssigner(workers) as assigner:
        return kmeans(data, k, max_iter, seed, assign=assigner)