"""Dense tiling of sparse coordinate tensors and tile-space traversal."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import accumulate, chain

from sptile.timer import TimerId, timers
from sptile.types import IDX_MAX

TILE_ERR = IDX_MAX - 2
TILE_BEGIN = IDX_MAX - 1
TILE_END = IDX_MAX

# Slab, fiber and index extents for sparsity-driven tiling.
TILE_SIZES = (32, 1024, 1024)


def get_tile_id(tile_dims: Sequence[int], tile_coord: Sequence[int]) -> int:
    """Convert tile coordinates to a linear id, or TILE_ERR if out of bounds."""
    tile_id = 0
    mult = 1
    for dim, coord in zip(reversed(tile_dims), reversed(tile_coord), strict=True):
        tile_id += coord * mult
        mult *= dim
    if tile_id >= mult:
        return TILE_ERR
    return tile_id


def fill_tile_coords(tile_dims: Sequence[int], tile_id: int) -> list[int]:
    """Return the coordinates of ``tile_id``; ``tile_dims`` itself if invalid."""
    maxid = math.prod(tile_dims)
    if tile_id < 0 or tile_id >= maxid:
        return list(tile_dims)

    coords = [0] * len(tile_dims)
    remaining = tile_id
    for mode in reversed(range(len(tile_dims))):
        remaining, coords[mode] = divmod(remaining, tile_dims[mode])
    return coords


def get_next_tileid(
    previd: int,
    tile_dims: Sequence[int],
    iter_mode: int,
    mode_idx: int,
) -> int:
    """Return the tile after ``previd`` in the slice where ``iter_mode`` is
    fixed at ``mode_idx``.

    Start with TILE_BEGIN. TILE_END marks the end of the slice and TILE_ERR
    an out-of-bounds ``previd``.
    """
    nmodes = len(tile_dims)
    maxid = math.prod(tile_dims)

    if previd == TILE_BEGIN:
        coords = [0] * nmodes
        coords[iter_mode] = mode_idx
        return get_tile_id(tile_dims, coords)

    if previd < 0 or previd >= maxid:
        return TILE_ERR

    # With a single mode, the slice holds exactly one tile.
    if nmodes == 1:
        return TILE_END

    coords = fill_tile_coords(tile_dims, previd)

    # Overflowing this mode means the slice is exhausted.
    overmode = 1 if iter_mode == 0 else 0

    # Increment the least significant mode (skipping the iterated one) and
    # propagate overflows.
    pmode = nmodes - 2 if iter_mode == nmodes - 1 else nmodes - 1
    coords[pmode] += 1
    while coords[pmode] == tile_dims[pmode]:
        if pmode == overmode:
            return TILE_END
        coords[pmode] = 0
        pmode -= 1
        if pmode == iter_mode:
            pmode -= 1
        coords[pmode] += 1

    return get_tile_id(tile_dims, coords)


def iter_tile_ids(
    tile_dims: Sequence[int], iter_mode: int, mode_idx: int
) -> Iterator[int]:
    """Yield every tile id in the slice where ``iter_mode`` equals ``mode_idx``."""
    tile_id = get_next_tileid(TILE_BEGIN, tile_dims, iter_mode, mode_idx)
    while tile_id != TILE_END:
        if tile_id == TILE_ERR:
            raise ValueError(
                f"mode index {mode_idx} is out of bounds for mode {iter_mode}"
            )
        yield tile_id
        tile_id = get_next_tileid(tile_id, tile_dims, iter_mode, mode_idx)


def densetile(
    inds: Sequence[Sequence[int]],
    vals: Sequence[float],
    dims: Sequence[int],
    tile_dims: Sequence[int],
) -> tuple[list[list[int]], list[float], list[int]]:
    """Group nonzeros into a dense grid of tiles.

    ``inds`` holds one index sequence per mode and ``tile_dims`` the number of
    tiles along each mode. Returns the rearranged indices, the rearranged
    values and a pointer list of length ntiles+1 marking each tile's nonzeros.
    Nonzeros keep their relative order within a tile.
    """
    nmodes = len(tile_dims)
    if nmodes == 0:
        raise ValueError("at least one mode is required")
    if len(inds) != nmodes or len(dims) != nmodes:
        raise ValueError("inds, dims and tile_dims must have one entry per mode")
    if any(tdim < 1 for tdim in tile_dims):
        raise ValueError("every tile dimension must be positive")
    nnz = len(vals)
    if any(len(ind) != nnz for ind in inds):
        raise ValueError("every index sequence must have one entry per value")

    with timers[TimerId.TILE]:
        tsizes = [max(dim // tdim, 1) for dim, tdim in zip(dims, tile_dims)]
        ntiles = math.prod(tile_dims)
        buckets: list[list[int]] = [[] for _ in range(ntiles)]

        for x, point in enumerate(zip(*inds)):
            if any(index < 0 for index in point):
                raise ValueError(f"nonzero {x} has a negative index")
            # Capping at tile_dims-1 absorbs the remainder of uneven splits.
            coord = [
                min(index // tsize, tdim - 1)
                for index, tsize, tdim in zip(point, tsizes, tile_dims)
            ]
            buckets[get_tile_id(tile_dims, coord)].append(x)

        order = list(chain.from_iterable(buckets))
        new_inds = [[ind[x] for x in order] for ind in inds]
        new_vals = [vals[x] for x in order]
        ptr = [0, *accumulate(len(bucket) for bucket in buckets)]

    return new_inds, new_vals, ptr