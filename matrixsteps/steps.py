#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Step trace records for row reductions and narrated derivations"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from matrixsteps.matrix import Matrix, format_matrix


@dataclass(frozen=True)
class Step:
    """One row operation of a reduction run.

    Args:
        matrix: Snapshot of the matrix after the operation
        operation: Operation tag, e.g. 'P12', 'M1(1/2)' or 'E21(-2)'
        description: Human-readable explanation
        is_final: True for the last step of a run
    """
    matrix: Matrix
    operation: str
    description: str
    is_final: bool = False

    def __str__(self) -> str:
        return f"{self.operation}: {self.description}\n{format_matrix(self.matrix)}"


@dataclass(frozen=True)
class DerivationStep:
    """One narrated step of a derivation that is not a row operation.

    'math' holds a plain text formula (for example "det(A) = (8) - (0) = 8"),
    'matrix' an optional matrix the step refers to.
    """
    title: str
    description: str
    math: str = ''
    matrix: Optional[tuple] = None


class StepTrace:
    """Append-only builder for the steps of one reduction run.

    A trace belongs to a single engine call. build() returns the recorded
    steps as a tuple and flags the last one as final.
    """

    def __init__(self):
        self._steps: List[Step] = []

    def __len__(self) -> int:
        return len(self._steps)

    def record(self, matrix: Sequence[Sequence], operation: str, description: str) -> None:
        """Record a snapshot of a working matrix (lists are copied into tuples)."""
        snapshot = tuple(tuple(row) for row in matrix)
        self._steps.append(Step(snapshot, operation, description))

    def extend(self, steps: Iterable[Step]) -> None:
        """Continue from the steps of an earlier run, clearing their final flags."""
        self._steps.extend(replace(step, is_final=False) for step in steps)

    def build(self) -> Tuple[Step, ...]:
        if not self._steps:
            return ()
        steps = self._steps[:-1] + [replace(self._steps[-1], is_final=True)]
        return tuple(steps)
