"""Command line entry point: cluster a CSV file and print the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from covkmeans.clustering import DEFAULT_K, DEFAULT_MAX_ITER, KMeansError, KMeansResult, kmeans
from covkmeans.dataset import DEFAULT_DATA_FILE, DatasetError, load_csv
from covkmeans.parallel import kmeans_parallel


def format_report(result: KMeansResult) -> str:
    """Render the centroids and cluster sizes, one line each."""
    lines = [
        f"Centróide {k}: " + "".join(f"{value:.4f} " for value in centroid)
        for k, centroid in enumerate(result.centroids)
    ]
    lines.extend(
        f"Cluster {k} tem {size} pontos" for k, size in enumerate(result.cluster_sizes())
    )
    return "".join(line + "\n" for line in lines)


def run(
    k: int = DEFAULT_K,
    max_iter: int = DEFAULT_MAX_ITER,
    filename: str = DEFAULT_DATA_FILE,
    workers: int | None = None,
    out: TextIO | None = None,
) -> KMeansResult:
    """Load ``filename``, cluster it and write the report to ``out``.

    With ``workers`` left as None the assignment step runs in this process.
    """
    out = out if out is not None else sys.stdout
    if workers is not None:
        print(f"Número de threads: {workers}", file=out)
    data = load_csv(filename)
    if not data:
        raise DatasetError(f"no samples loaded from {filename}")
    print(f"→ Carreguei {len(data)} amostras de {filename} (dim={len(data[0])})", file=out)
    if workers is None:
        result = kmeans(data, k, max_iter)
    else:
        result = kmeans_parallel(data, k, max_iter, workers=workers)
    if result.converged_at is not None:
        print(f"Convergiu em {result.converged_at} iterações.", file=out)
    out.write(format_report(result))
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="covkmeans", description="Cluster the samples of a numeric CSV file."
    )
    parser.add_argument("k", nargs="?", type=int, default=DEFAULT_K, help="number of clusters")
    parser.add_argument(
        "max_iter", nargs="?", type=int, default=DEFAULT_MAX_ITER, help="maximum iterations"
    )
    parser.add_argument("filename", nargs="?", default=DEFAULT_DATA_FILE, help="CSV data file")
    parser.add_argument(
        "-j", "--workers", type=int, default=None, help="worker processes for assignment"
    )
    args = parser.parse_args(argv)
    try:
        run(args.k, args.max_iter, args.filename, args.workers)
    except (DatasetError, KMeansError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())