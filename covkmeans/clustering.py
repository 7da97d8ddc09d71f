"""Lloyd's k-means with reproducible seeded initialisation."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from covkmeans.rng import Mt19937_64

DEFAULT_K = 10
DEFAULT_MAX_ITER = 150
DEFAULT_SEED = 1234

Point = Sequence[float]
Assigner = Callable[[Sequence[Point], Sequence[Point]], list[int]]


class KMeansError(Exception):
    """Raised when clustering cannot run on the given input."""


@dataclass
class KMeansResult:
    """Final centroids, per-sample labels and the iteration of convergence."""

    centroids: list[list[float]]
    labels: list[int]
    converged_at: int | None = None

    def cluster_sizes(self) -> list[int]:
        """Number of samples assigned to each cluster, in cluster order."""
        counts = Counter(self.labels)
        return [counts[k] for k in range(len(self.centroids))]


def euclid(a: Point, b: Point) -> float:
    """Euclidean distance between two points of equal dimension."""
    total = 0.0
    for x, y in zip(a, b):
        diff = x - y
        total += diff * diff
    return math.sqrt(total)


def pick_initial_centroids(
    data: Sequence[Point], k: int, seed: int = DEFAULT_SEED
) -> list[list[float]]:
    """Choose ``k`` distinct samples as starting centroids."""
    if not 0 < k <= len(data):
        raise KMeansError(f"invalid value of K: {k}")
    rng = Mt19937_64(seed)
    used: set[int] = set()
    centroids: list[list[float]] = []
    while len(centroids) < k:
        idx = rng.uniform_int(0, len(data) - 1)
        if idx not in used:
            used.add(idx)
            centroids.append(list(data[idx]))
    return centroids


def nearest_centroid(point: Point, centroids: Sequence[Point]) -> int:
    """Index of the closest centroid; the first one wins ties."""
    best = math.inf
    who = 0
    for k, centroid in enumerate(centroids):
        dist = euclid(point, centroid)
        if dist < best:
            best = dist
            who = k
    return who


def assign_labels(data: Sequence[Point], centroids: Sequence[Point]) -> list[int]:
    """Label every sample with its nearest centroid."""
    return [nearest_centroid(point, centroids) for point in data]


def update_centroids(
    data: Sequence[Point], labels: Sequence[int], centroids: Sequence[Point]
) -> list[list[float]]:
    """Move each centroid to the mean of its samples; empty clusters stay put."""
    dim = len(data[0]) if data else 0
    sums = [[0.0] * dim for _ in centroids]
    counts = [0] * len(centroids)
    for point, label in zip(data, labels):
        counts[label] += 1
        acc = sums[label]
        for d, value in enumerate(point):
            acc[d] += value
    return [
        [total / count for total in acc] if count else list(old)
        for acc, count, old in zip(sums, counts, centroids)
    ]


def kmeans(
    data: Sequence[Point],
    k: int = DEFAULT_K,
    max_iter: int = DEFAULT_MAX_ITER,
    seed: int = DEFAULT_SEED,
    assign: Assigner | None = None,
) -> KMeansResult:
    """Cluster ``data`` into ``k`` groups for at most ``max_iter`` rounds."""
    if not data:
        raise KMeansError("no samples loaded")
    dim = len(data[0])
    if any(len(point) != dim for point in data):
        raise KMeansError("samples have differing dimensions")
    assign = assign or assign_labels

    centroids = pick_initial_centroids(data, k, seed)
    labels = [-1] * len(data)
    converged_at = None
    for iteration in range(max_iter):
        new_labels = list(assign(data, centroids))
        changed = new_labels != labels
        labels = new_labels
        if not changed:
            converged_at = iteration
            break
        centroids = update_centroids(data, labels, centroids)
    return KMeansResult(centroids=centroids, labels=labels, converged_at=converged_at)