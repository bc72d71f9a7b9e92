from typing import Iterator, Self

from toolz import pipe


class Node:
    def __init__(
        self,
        symbol: str | None,
        weight: int,
        left: Self | None = None,
        right: Self | None = None,
    ) -> None:
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return f"symbol: {self.symbol!r}, weight: {self.weight}, left: {self.left}, right: {self.right}"

    def __repr__(self) -> str:
        if self.is_leaf():
            return f"Node({self.symbol!r}, {self.weight})"
        return f"Node(None, {self.weight}, {self.left!r}, {self.right!r})"

    def is_leaf(self) -> bool:
        return (self.left is None) and (self.right is None)

    def is_internal(self) -> bool:
        return (self.left is not None) and (self.right is not None)


class HuffmanTree:
    """Read-only view over the root returned by the builder."""

    def __init__(self, root: Node) -> None:
        self._root = root

    @property
    def root(self) -> Node:
        return self._root

    # Pre-order, iterative so that deep (skewed) trees don't hit the recursion limit
    def nodes(self) -> Iterator[Node]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _walk_depths(self) -> Iterator[tuple[Node, int]]:
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))

    def leaves(self) -> list[Node]:
        return [node for node in self.nodes() if node.is_leaf()]

    def leaf_depths(self) -> dict[str, int]:
        """Returns {symbol: depth}, i.e. the code length of every symbol"""
        return pipe(
            self._walk_depths(),
            lambda arg: filter(lambda x: x[0].is_leaf(), arg),
            lambda arg: {node.symbol: depth for node, depth in arg},
        )

    def weighted_path_length(self) -> int:
        return sum(node.weight * depth for node, depth in self._walk_depths() if node.is_leaf())

    @property
    def height(self) -> int:
        return max(depth for _, depth in self._walk_depths())

    @property
    def node_count(self) -> int:
        return sum(1 for _ in self.nodes())

    @property
    def internal_count(self) -> int:
        return sum(1 for node in self.nodes() if node.is_internal())

    def print(self) -> None:
        def print_tree(node: Node | None, start_depth: int) -> None:
            if node is not None:
                print_tree(node.right, start_depth + 1)
                label = f"{node.symbol!r}:{node.weight}" if node.is_leaf() else f"{node.weight}"
                print(f'{" " * 4 * start_depth} -> [{label}]')
                print_tree(node.left, start_depth + 1)
        print_tree(self._root, 0)
