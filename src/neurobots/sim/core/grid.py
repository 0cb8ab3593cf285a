from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

import numpy as np


class _DenseGrid:
    def __init__(self, fill: float, shape: Tuple[int, ...]) -> None:
        if any(dim <= 0 for dim in shape):
            raise ValueError(f"grid dimensions must be positive, got {'x'.join(str(dim) for dim in shape)}")
        self._data = np.full(shape, fill, dtype=np.float64)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._data.shape

    @property
    def array(self) -> np.ndarray:
        """The backing array; writes through it change the grid."""
        return self._data

    def __len__(self) -> int:
        return self._data.size

    def __getitem__(self, index: Tuple[int, ...]) -> float:
        return float(self._data[index])

    def __setitem__(self, index: Tuple[int, ...], value: float) -> None:
        self._data[index] = value

    def clear(self, value: float) -> None:
        self._data.fill(value)

    def assign(self, values: Iterable[float]) -> None:
        """Overwrite every cell in row-major order."""
        flat = np.asarray(values if isinstance(values, np.ndarray) else list(values), dtype=np.float64)
        if flat.size != self._data.size:
            raise ValueError(f"expected {self._data.size} values, got {flat.size}")
        self._data[...] = flat.reshape(self._data.shape)

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._data.flat)


class DenseGrid2(_DenseGrid):
    """Fixed-shape row-major 2D float storage on a numpy array.

    Out-of-range indices raise ``IndexError`` from numpy; callers own the
    shape contract otherwise.
    """

    def __init__(self, fill: float, rows: int, cols: int) -> None:
        super().__init__(fill, (rows, cols))

    def add(self, row: int, col: int, value: float) -> None:
        self._data[row, col] += value

    def row(self, row: int) -> List[float]:
        return self._data[row].tolist()


class DenseGrid3(_DenseGrid):
    """Fixed-shape row-major 3D float storage on a numpy array."""

    def __init__(self, fill: float, dim_a: int, dim_b: int, dim_c: int) -> None:
        super().__init__(fill, (dim_a, dim_b, dim_c))

    def add(self, a: int, b: int, c: int, value: float) -> None:
        self._data[a, b, c] += value
