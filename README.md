# pcmatrix

pcmatrix is a teaching program for the producer-consumer problem.
Producer threads generate random matrices and place them in a shared
bounded buffer. Consumer threads take matrices out of the buffer, one at a
time, and look for pairs that can be multiplied. A pair can be multiplied
when the first matrix's column count equals the second matrix's row count.
Matrices that do not fit are discarded. Every product that is found is
printed.

Each thread keeps its own statistics. When all threads have finished, the
totals are added up. A correct run produces and consumes the same number of
matrices, and the sum of elements produced equals the sum of elements
consumed.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```
pcmatrix [WORKERS [BUFFER_SIZE [MATRICES [MODE]]]]
```

Every argument is optional and positional. When an argument is left out,
its default is used. Arguments are read leniently as leading integers, so
text that is not a number counts as 0. More than four arguments is an
error (exit status 2). A negative worker count, a buffer size below 1 or a
negative mode ends the run with exit status 1.

| Argument      | Default | Meaning                                                             |
|---------------|---------|---------------------------------------------------------------------|
| `WORKERS`     | 1       | number of producer threads, and also the number of consumer threads |
| `BUFFER_SIZE` | 200     | capacity of the shared bounded buffer                               |
| `MATRICES`    | 1200    | total number of matrices to produce and consume                     |
| `MODE`        | 0       | matrix mode, explained below                                        |

Matrix modes:

- `0`: each matrix gets a random size from 1×1 to 4×4. Its elements are
  random integers from 1 to 10.
- `n` > 0: every matrix is n×n and every element is 1.

Example with two workers of each kind, a buffer of 50 and 500 matrices:

```
pcmatrix 2 50 500
```

The run ends with a summary like this:

```
Sum of Matrix elements --> Produced=3421 = Consumed=3421
Matrices produced=500 consumed=500 multiplied=143
```

## Library use

The building blocks live in these modules:

- `pcmatrix.counter.Counter`: a thread-safe counter with `increment()`,
  `decrement()` and `value()`.
- `pcmatrix.matrix.Matrix`: a dataclass of integer cells. `generate`,
  `random` and `by_size` make new matrices; `multiply` returns the product
  or `None` when the shapes do not fit; `total` sums the elements;
  `average` gives their truncated integer mean; `render` gives the text
  form. `pcmatrix.matrix.display_matrix` writes a matrix to a stream.
- `pcmatrix.settings.Settings`: the run configuration. `from_argv` builds
  it from positional arguments and `describe` gives the one-line summary.
- `pcmatrix.prodcons`: holds `BoundedBuffer`, `ProdConsStats` and
  `ProducerConsumer`. `ProducerConsumer.run(workers)` starts the producer
  and consumer threads and returns the summed producer and consumer stats.