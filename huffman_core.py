# filename: huffman_core.py

import heapq
import logging
from typing import Any, Dict, Hashable, Iterator, List, Mapping, NamedTuple, Tuple, Union

logger = logging.getLogger(__name__)

Symbol = Hashable


class HuffmanError(ValueError):
    """Base class for errors caused by a bad frequency table."""


class EmptyInputError(HuffmanError):
    def __init__(self):
        super().__init__("no symbol has a positive frequency")


class InvalidWeightError(HuffmanError):
    def __init__(self, symbol, weight):
        super().__init__(f"invalid weight {weight!r} for symbol {symbol!r}")
        self.symbol = symbol
        self.weight = weight


class HuffmanLeaf(NamedTuple):
    weight: int
    symbol: Any


class HuffmanNode(NamedTuple):
    weight: int
    left: "HuffmanTree"
    right: "HuffmanTree"


HuffmanTree = Union[HuffmanLeaf, HuffmanNode]


def _check_weights(frequencies):
    # Whole table is validated before the first node is created
    for symbol, weight in frequencies.items():
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise InvalidWeightError(symbol, weight)
    if not any(weight > 0 for weight in frequencies.values()):
        raise EmptyInputError()


# Stack marker: drop the last prefix bit once a subtree is finished
_ASCEND = object()


class HuffmanLogic:
    """Greedy Huffman tree construction and code derivation.

    Ties between equal weights are broken FIFO: leaves enter the heap in
    ascending symbol order, internal nodes after them in creation order, and
    the entry that entered first is extracted first. The first of the two
    extracted entries becomes the left child.
    """

    def build_tree(self, frequencies: Mapping[Symbol, int]) -> HuffmanTree:
        _check_weights(frequencies)
        symbols = sorted(s for s, w in frequencies.items() if w > 0)

        # Heap entries carry a unique order index so nodes are never compared
        priority_queue: List[Tuple[int, int, HuffmanTree]] = [
            (frequencies[s], order, HuffmanLeaf(frequencies[s], s))
            for order, s in enumerate(symbols)
        ]
        heapq.heapify(priority_queue)
        order = len(priority_queue)

        while len(priority_queue) > 1:
            _, _, left = heapq.heappop(priority_queue)
            _, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(left.weight + right.weight, left, right)
            heapq.heappush(priority_queue, (merged.weight, order, merged))
            order += 1

        root = priority_queue[0][2]
        logger.debug("built tree over %d symbols, root weight %d", len(symbols), root.weight)
        return root

    def iter_codes(self, node: HuffmanTree) -> Iterator[Tuple[Symbol, str]]:
        """Yield ``(symbol, code)`` for every leaf, left subtree first."""
        prefix: List[str] = []
        # Explicit stack keeps chain-shaped trees clear of the recursion limit
        stack: List[Tuple[Any, str]] = [(node, "")]
        while stack:
            node, bit = stack.pop()
            if node is _ASCEND:
                prefix.pop()
                continue
            if bit:
                prefix.append(bit)
                stack.append((_ASCEND, ""))
            if isinstance(node, HuffmanLeaf):
                yield node.symbol, "".join(prefix)
                continue
            assert isinstance(node, HuffmanNode), f"not a tree node: {node!r}"
            assert node.left is not None and node.right is not None, "internal node missing a child"
            stack.append((node.right, "1"))
            stack.append((node.left, "0"))

    def generate_codes(self, node: HuffmanTree) -> Dict[Symbol, str]:
        codes = dict(self.iter_codes(node))
        logger.debug("derived %d codes", len(codes))
        return codes


_logic = HuffmanLogic()


def build_tree(frequencies: Mapping[Symbol, int]) -> HuffmanTree:
    return _logic.build_tree(frequencies)


def derive_codes(root: HuffmanTree) -> Dict[Symbol, str]:
    return _logic.generate_codes(root)


def iter_codes(root: HuffmanTree) -> Iterator[Tuple[Symbol, str]]:
    return _logic.iter_codes(root)


def iter_leaves(node: HuffmanTree) -> Iterator[HuffmanLeaf]:
    stack = [node]
    while stack:
        node = stack.pop()
        if isinstance(node, HuffmanLeaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def count_internal(node: HuffmanTree) -> int:
    count = 0
    stack = [node]
    while stack:
        node = stack.pop()
        if isinstance(node, HuffmanNode):
            count += 1
            stack.append(node.left)
            stack.append(node.right)
    return count


def weighted_path_length(node: HuffmanTree) -> int:
    """Sum of depth * weight over all leaves, i.e. total encoded length in bits."""
    total = 0
    stack = [(node, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, HuffmanLeaf):
            total += depth * node.weight
        else:
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
    return total
