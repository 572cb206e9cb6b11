# sptile

Tools for grouping the nonzeros of a sparse tensor, held in coordinate form,
into a dense grid of tiles, and for walking over those tiles in a fixed order.
A few small helpers for timing, random values and enumerations come with it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Tiles (`sptile.tile`)

A tile system is described by the number of tiles along each mode, for
example `(4, 4, 4)`. Tiles are numbered in row-major order.

```python
from sptile.tile import get_tile_id, fill_tile_coords, iter_tile_ids, densetile

dims = (2, 3, 4)
tid = get_tile_id(dims, (1, 2, 3))      # 23
coords = fill_tile_coords(dims, tid)    # [1, 2, 3]

# every tile in the slab where mode 0 has tile index 1
for tid in iter_tile_ids(dims, 0, 1):
    ...
```

- `get_tile_id(tile_dims, tile_coord)` returns the linear id, or `TILE_ERR`
  when the coordinates lie outside the tile system.
- `fill_tile_coords(tile_dims, tile_id)` returns the coordinates as a list; for
  an invalid id it returns a copy of `tile_dims`.
- `get_next_tileid(previd, tile_dims, iter_mode, mode_idx)` takes one step of
  the traversal of the slab where `iter_mode` is fixed at `mode_idx`. Start
  with `TILE_BEGIN`; it returns `TILE_END` when the slab is exhausted and
  `TILE_ERR` for an out-of-range `previd`.
- `iter_tile_ids(tile_dims, iter_mode, mode_idx)` yields the same ids as a
  generator and raises `ValueError` if `mode_idx` is out of range.

`densetile(inds, vals, dims, tile_dims)` takes one index sequence per mode,
the values, the tensor dimensions and the number of tiles per mode. It returns
a new tuple `(inds, vals, ptr)`: the indices and values reordered so that each
tile's nonzeros are contiguous (keeping their relative order), and a pointer
list of length `ntiles + 1` marking where each tile starts and ends. The inputs
are not modified. Indices beyond the last even split fall into the last tile
of that mode. Mismatched lengths, non-positive tile dimensions or negative
indices raise `ValueError`. The time spent is added to the shared `TILE`
timer in `sptile.timer.timers`.

## Timers (`sptile.timer`)

`Timer` accumulates wall-clock time between `start()` and `stop()`; `reset()`
clears it and `fstart()` resets and starts. A `Timer` can also be used as a
context manager. `TimerSet` holds one `Timer` per `TimerId`, is indexed with
`timers[TimerId.TILE]`, and `report(out)` writes the names and seconds of every
used timer below the current verbosity level; `inc_verbose()` raises that
level. `sptile.timer.timers` is a shared `TimerSet`.

## Utilities (`sptile.util`)

- `rand_val(rng)`, `rand_idx(rng)`, `fill_rand(nelems, rng)`: random values in
  `[-3, 3]` and random non-negative indices, from a given `random.Random` or
  the module's shared generator.
- `bytes_str(nbytes)`: human-readable byte counts such as `"2.00KB"`.
- `argmax_elem(arr)`, `argmin_elem(arr)`: index of the first largest or
  smallest element.
- `get_primes(n)`: prime factors with multiplicity, in non-decreasing order.

## Types (`sptile.types`)

Enumerations `OptionType`, `ErrorType`, `VerbosityType`, `TileType`,
`CsfType`, `DecompType` and `CommType`, type limits such as `IDX_MAX` and
`MAX_NMODES`, and the functions `version_major`, `version_minor`,
`version_subminor` and `version_string` (`"2.0.0"`).

## What this package does not do

It does not read or write tensor files, build compressed tensor formats, or
compute tensor factorizations or kernels; the enumerations in `sptile.types`
name such options but nothing here acts on them. There is no command-line
program. Work runs in a single thread.