import heapq
import sys

import numpy as np
from loguru import logger

from .frequency import FrequencyTable
from .tree import HuffmanTree, Node

STRATEGIES = ("scan", "heap")


class EmptyInputError(ValueError):
    """Raised when a tree is requested for a table without any character."""


class TreeBuilder:
    def __init__(self, is_logging: bool = False, strategy: str = "scan") -> None:
        if strategy not in STRATEGIES:
            raise ValueError(f'Unknown strategy "{strategy}" (expected one of {", ".join(STRATEGIES)})')
        self._is_logging = is_logging
        self._strategy = strategy

        logger.remove()
        logger.add(sys.stdout, filter=lambda record: self._is_logging)

        # If a message higher than ERROR is logged while _is_logging is False, log it to stderr regardless of the logging flag
        logger.add(sys.stderr, level='ERROR', filter=lambda record: not self._is_logging)

    @property
    def strategy(self) -> str:
        return self._strategy

    def build(self, table: FrequencyTable) -> Node:
        n = len(table)
        if n == 0:
            logger.error('Cannot build a Huffman tree from an empty frequency table')
            raise EmptyInputError('frequency table is empty')

        # n leaves + (n - 1) internal nodes
        total = 2 * n - 1
        logger.info(f'Distinct characters: {n}, pool size: {total}')

        # The arena: slot i of `pool` and `weights` describe the same node.
        pool: list[Node] = []
        weights = np.zeros(total, dtype=np.uint64)
        for index, (char, weight) in enumerate(table.items()):
            pool.append(Node(char, weight))
            weights[index] = weight

        if n == 1:
            logger.info(f'Single character {pool[0].symbol!r}, no merge needed')
            return pool[0]

        match self._strategy:
            case 'scan':
                self._merge_by_scan(pool, weights, n, total)
            case 'heap':
                self._merge_by_heap(pool, weights, n, total)
            case _:
                raise ValueError(f'Unknown strategy "{self._strategy}"')

        root = pool[-1]
        logger.info(f'Root weight: {root.weight}')
        return root

    def _merge_by_scan(
        self, pool: list[Node], weights: np.ndarray, n: int, total: int
    ) -> None:
        # Slots already merged into a parent
        consumed = np.zeros(total, dtype=np.bool_)
        for index in range(n, total):
            m1 = self._find_min(weights, consumed, index)
            consumed[m1] = True
            m2 = self._find_min(weights, consumed, index)
            consumed[m2] = True
            self._merge(pool, weights, index, m1, m2)

    def _merge_by_heap(
        self, pool: list[Node], weights: np.ndarray, n: int, total: int
    ) -> None:
        # (weight, slot) pairs: equal weights pop in slot order, like the scan
        queue = [(int(weights[i]), i) for i in range(n)]
        heapq.heapify(queue)
        for index in range(n, total):
            _, m1 = heapq.heappop(queue)
            _, m2 = heapq.heappop(queue)
            self._merge(pool, weights, index, m1, m2)
            heapq.heappush(queue, (pool[index].weight, index))

    @staticmethod
    def _find_min(weights: np.ndarray, consumed: np.ndarray, end: int) -> int:
        """Returns the slot of the lightest unconsumed node in [0, end), the first one on ties"""
        candidates = np.flatnonzero(~consumed[:end])
        # argmin returns the first occurrence of the minimum
        return int(candidates[np.argmin(weights[candidates])])

    @staticmethod
    def _merge(pool: list[Node], weights: np.ndarray, index: int, m1: int, m2: int) -> None:
        weight = pool[m1].weight + pool[m2].weight
        weights[index] = weight
        pool.append(Node(None, weight, left=pool[m1], right=pool[m2]))
        logger.debug(f'Merge #{index}: [{m1}] {pool[m1].weight} + [{m2}] {pool[m2].weight} -> {weight}')


def build_tree(text: str, is_logging: bool = False, strategy: str = "scan") -> HuffmanTree:
    table = FrequencyTable.build(text)
    return HuffmanTree(TreeBuilder(is_logging=is_logging, strategy=strategy).build(table))
