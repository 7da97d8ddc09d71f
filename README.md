# covkmeans

K-means clustering for numeric CSV files such as the forest cover type
dataset (`covtype.csv`). The first line of the file is skipped as a header,
each remaining row is read as numbers, the last value of each row is
treated as a class label and dropped, and the remaining columns are
clustered with Lloyd's algorithm.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
covkmeans [K] [MAX_ITER] [FILE] [-j WORKERS]
```

The positional arguments are optional:

- `K`: number of clusters (default 10)
- `MAX_ITER`: maximum number of iterations (default 150)
- `FILE`: path to the CSV file (default `covtype.csv`)

`-j WORKERS` / `--workers WORKERS` runs the assignment step in that many
worker processes and prints the worker count first. Without it,
everything runs in the current process.

The command prints the number of samples loaded and their dimension, the
iteration at which labels stopped changing (if they did within
`MAX_ITER`), each centroid to four decimal places, and the size of every
cluster. The report lines are in Portuguese, for example
`Cluster 0 tem 42 pontos`. If the file cannot be read, holds no samples,
or `K` is not between 1 and the number of samples, a message is written
to standard error and the exit status is 1.

## Reading data

`covkmeans.dataset` does the parsing:

- `load_csv(path, skip_header=True)` returns a list of rows (lists of
  floats). It raises `DatasetError` if the file cannot be opened, or if
  `skip_header` is true and the file is empty.
- `iter_rows(lines)` yields the rows of any iterable of lines.
- `parse_row(line)` parses one line, returning `None` when nothing is left.

Trailing carriage returns, newlines and commas are removed, blank lines
are skipped, and each cell is trimmed. A cell is read from its longest
leading number, so `12abc` gives `12.0`; decimal, hexadecimal
(`0x1p3`), `inf`, `infinity` and `nan` forms are accepted. Cells that do
not start with a number are ignored. A value too large or too small to
represent as a float raises `DatasetError`.

## Clustering

```python
from covkmeans.dataset import load_csv
from covkmeans.clustering import kmeans
from covkmeans.parallel import kmeans_parallel
from covkmeans.cli import format_report

data = load_csv("covtype.csv", skip_header=True)

result = kmeans(data, k=7, max_iter=100, seed=1234)
print(result.converged_at)      # iteration index, or None if it never converged
print(result.cluster_sizes())
print(format_report(result))

# The same algorithm, with the assignment step spread over worker processes
result = kmeans_parallel(data, k=7, max_iter=100, seed=1234, workers=4)
```

`kmeans` returns a `KMeansResult` holding `centroids`, `labels` and
`converged_at`. Initial centroids are distinct samples picked with a
64-bit Mersenne Twister (`covkmeans.rng.Mt19937_64`, default seed 1234
in `kmeans`), so runs on the same data give the same result. Each sample
goes to its nearest centroid by Euclidean distance, the first centroid
winning ties; a cluster left empty keeps its previous centroid.

`KMeansError` is raised when there are no samples, when samples differ
in dimension, or when `k` is not between 1 and the number of samples.

The individual steps are available too: `euclid`, `pick_initial_centroids`,
`nearest_centroid`, `assign_labels` and `update_centroids`.

## Parallel assignment

`ParallelAssigner` is the assignment step by itself. It splits the
samples into one contiguous block per worker and joins the labels back
in sample order; with one worker it runs in the current process, and
with `workers=None` it uses the CPU count. It works as a context manager
and can be passed to `kmeans` as its `assign` argument:

```python
from covkmeans.parallel import ParallelAssigner

with ParallelAssigner(workers=4) as assign:
    result = kmeans(data, k=7, max_iter=100, seed=1234, assign=assign)
```

Once closed, calling it raises `RuntimeError`. The centroid update always
runs in the calling process.