"""Transform pipeline: the ordered ops attached to one geometry."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from visbase.engine.transforms import TransformOp, compose_matrices
from visbase.utils.matrices import as_3x2


@dataclass(frozen=True)
class TransformPipeline:
    """Ordered ops, first applied first.

    Immutable: ``append`` and ``reverse`` return new pipelines, so two
    geometries can never observe each other's transforms.
    """

    ops: tuple[TransformOp, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ops", tuple(self.ops))

    def __len__(self) -> int:
        return len(self.ops)

    def __iter__(self) -> Iterator[TransformOp]:
        return iter(self.ops)

    def matrix(self) -> NDArray[np.float64]:
        return compose_matrices(self.ops)

    def matrix_3x2(self) -> NDArray[np.float64]:
        return as_3x2(self.matrix())

    def append(self, op: TransformOp) -> TransformPipeline:
        """New pipeline with ``op`` applied after every existing op."""
        return TransformPipeline(self.ops + (op,))

    def reverse(self) -> TransformPipeline:
        """Pipeline undoing this one: reversed order, each op reversed."""
        return TransformPipeline(tuple(op.reverse() for op in reversed(self.ops)))
