from __future__ import annotations

import enum
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

import numpy as np

from wordament.dictionary import DictionaryIndex
from wordament.grid import COL_DELTAS, ROW_DELTAS, Grid

logger = logging.getLogger("wordament")


class FoundWord(NamedTuple):
    word: str
    score: int
    path: tuple[tuple[int, int], ...]


class DuplicatePolicy(enum.Enum):
    ALL_PATHS = "all"  # one record per distinct path
    FIRST_MATCH = "first"  # first record of each word in discovery order


@dataclass
class Solution:
    """Found words in discovery order, duplicates included, and their summed score."""

    found: list[FoundWord] = field(default_factory=list)
    score: int = 0

    def record(self, found: FoundWord):
        self.found.append(found)
        self.score += found.score

    def merge(self, other: Solution):
        self.found.extend(other.found)
        self.score += other.score

    def first_matches(self) -> Solution:
        seen: set[str] = set()
        result = Solution()
        for found in self.found:
            if found.word not in seen:
                seen.add(found.word)
                result.record(found)
        return result

    @property
    def words(self) -> list[str]:
        return [found.word for found in self.found]

    def __len__(self) -> int:
        return len(self.found)

    def __iter__(self) -> Iterator[FoundWord]:
        return iter(self.found)

    def __str__(self) -> str:
        return f"score: {self.score}, words: {', '.join(self.words)}"


@contextmanager
def _marked(visited: np.ndarray, row: int, col: int):
    """Mark a cell as used by the current path for the duration of the block."""
    visited[row, col] = True
    try:
        yield
    finally:
        visited[row, col] = False


def _explore(
    grid: Grid,
    dictionary: DictionaryIndex,
    row: int,
    col: int,
    node: int,
    candidate: str,
    score: int,
    visited: np.ndarray,
    path: list[tuple[int, int]],
) -> Solution:
    solution = Solution()
    if dictionary.is_word_at(node):
        solution.record(FoundWord(candidate, score, tuple(path)))
    if dictionary.is_terminal_at(node):
        return solution

    with _marked(visited, row, col):
        for cell, dr, dc in zip(grid.neighbors(row, col), ROW_DELTAS, COL_DELTAS):
            if cell is None:
                continue
            nr, nc = row + dr, col + dc
            if visited[nr, nc]:
                continue
            child = dictionary.step(node, cell.letter)
            if child is None:  # prune: no word has this prefix
                continue
            path.append((nr, nc))
            solution.merge(_explore(
                grid, dictionary, nr, nc, child,
                candidate + cell.letter, score + cell.value, visited, path,
            ))
            path.pop()
    return solution


def search_from(grid: Grid, dictionary: DictionaryIndex, row: int, col: int) -> Solution:
    """Find every word whose path starts at ``(row, col)``.

    Uses its own visited array, so searches from different cells never share
    mutable state.
    """
    cell = grid.get(row, col)
    node = dictionary.step(dictionary.ROOT, cell.letter)
    if node is None:
        return Solution()
    visited = np.zeros((grid.height, grid.width), dtype=bool)
    return _explore(grid, dictionary, row, col, node, cell.letter, cell.value, visited, [(row, col)])


def solve(
    grid: Grid,
    dictionary: DictionaryIndex,
    *,
    policy: DuplicatePolicy = DuplicatePolicy.ALL_PATHS,
    max_workers: int | None = None,
) -> Solution:
    """Solve the grid with a backtracking DFS from every cell, pruned by the dictionary.

    With ``max_workers`` > 1 the per-cell searches run on a thread pool.
    Partial results are always merged in row-major start order, so the
    output does not depend on the number of workers.
    """
    starts = [(r, c) for r, c, _ in grid.cells()]

    if max_workers and max_workers > 1 and len(starts) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            partials = list(executor.map(lambda rc: search_from(grid, dictionary, *rc), starts))
    else:
        partials = [search_from(grid, dictionary, r, c) for r, c in starts]

    solution = Solution()
    for partial in partials:
        solution.merge(partial)
    if policy is DuplicatePolicy.FIRST_MATCH:
        solution = solution.first_matches()

    logger.info(
        "Solved %dx%d grid: %d records (%d unique words), score=%d",
        grid.height, grid.width, len(solution), len(set(solution.words)), solution.score,
    )
    return solution
