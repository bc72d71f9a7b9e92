from phuff import HuffmanTree, Node


def sample_tree() -> HuffmanTree:
    # 6 -> (c:3, 3 -> (a:1, b:2))
    inner = Node(None, 3, Node("a", 1), Node("b", 2))
    return HuffmanTree(Node(None, 6, Node("c", 3), inner))


class TestNode:
    def test_leaf(self) -> None:
        node = Node("x", 4)
        assert node.is_leaf()
        assert not node.is_internal()

    def test_internal(self) -> None:
        node = Node(None, 3, Node("a", 1), Node("b", 2))
        assert node.is_internal()
        assert not node.is_leaf()
        assert repr(node) == "Node(None, 3, Node('a', 1), Node('b', 2))"


class TestHuffmanTree:
    def test_counts(self) -> None:
        tree = sample_tree()
        assert tree.node_count == 5
        assert tree.internal_count == 2
        assert [leaf.symbol for leaf in tree.leaves()] == ["c", "a", "b"]

    def test_depths(self) -> None:
        tree = sample_tree()
        assert tree.leaf_depths() == {"c": 1, "a": 2, "b": 2}
        assert tree.height == 2
        assert tree.weighted_path_length() == 3 * 1 + 1 * 2 + 2 * 2

    def test_single_leaf(self) -> None:
        tree = HuffmanTree(Node("z", 7))
        assert tree.node_count == 1
        assert tree.internal_count == 0
        assert tree.height == 0
        assert tree.leaf_depths() == {"z": 0}
        assert tree.weighted_path_length() == 0

    def test_nodes_preorder(self) -> None:
        tree = sample_tree()
        assert [node.weight for node in tree.nodes()] == [6, 3, 3, 1, 2]

    def test_print(self, capsys) -> None:
        sample_tree().print()
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "         -> ['b':2]",
            "     -> [3]",
            "         -> ['a':1]",
            " -> [6]",
            "     -> ['c':3]",
        ]
