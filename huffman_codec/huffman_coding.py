"""
Huffman coding algorithm -
tree construction and prefix code generation
"""
from huffman_codec.errors import UnknownSymbolReferenced
from huffman_codec.frequency import ALPHABET_SIZE
from huffman_codec.priority_queue import NodeQueue


class Node:
    """
    Class object for Node in Huffman's Tree
    """

    def __init__(self, value, val_freq: int, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param value: symbol held by a leaf, None for internal node
        :param val_freq: int, the frequency in our data for this value
        :param left: left child (bit 0)
        :param right: right child (bit 1)
        """
        self.left = left
        self.right = right
        self.value = value
        self.val_freq = val_freq
        if value is not None:
            self.min_symbol = value
        else:
            self.min_symbol = min(
                child.min_symbol for child in (left, right) if child is not None
            )

    def is_leaf(self) -> bool:
        return self.value is not None

    def __lt__(self, val):
        return (self.val_freq, self.min_symbol) < (val.val_freq, val.min_symbol)

    def __repr__(self):
        if self.is_leaf():
            return f"Node(value={self.value}, val_freq={self.val_freq})"
        return f"Node(internal, val_freq={self.val_freq}, min_symbol={self.min_symbol})"


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Holds the root and the
    code table generated from it.
    """

    def __init__(self, root: Node | None = None):
        """
        Function initializes the structure of Huffman Tree.

        :param root: root node, None for empty input
        """
        self.root = root
        self.res_codes: dict[int, tuple[int, int]] = {}

    @classmethod
    def build_from_freq(cls, freq_dict: dict[int, int]) -> "HuffmanTree":
        """
        Build Huffman tree from frequency dictionary.

        A table with one symbol gets a synthetic root with the leaf on
        the left and nothing on the right, so its code is "0".

        :param freq_dict: dictionary {symbol: frequency}
        :return: HuffmanTree, root is None for an empty table
        """
        leaves = []
        for val, val_freq in freq_dict.items():
            if not 0 <= val < ALPHABET_SIZE:
                raise UnknownSymbolReferenced(f"Symbol {val} is outside the byte alphabet")
            if val_freq <= 0:
                raise UnknownSymbolReferenced(f"Symbol {val} has non-positive frequency {val_freq}")
            leaves.append(Node(val, val_freq))

        if not leaves:
            return cls()

        nodes = NodeQueue(leaves)
        if len(nodes) == 1:
            leaf = nodes.extract_min()
            return cls(Node(None, leaf.val_freq, left=leaf))

        while len(nodes) > 1:
            # left smallest node
            l = nodes.extract_min()
            # right smallest node
            r = nodes.extract_min()
            nodes.insert(Node(None, l.val_freq + r.val_freq, l, r))

        return cls(nodes.extract_min())

    def codes_generation(self) -> dict[int, tuple[int, int]]:
        """
        Generate code for each symbol with preorder traversal
        of the tree. Uses an explicit stack, so skewed trees of any
        depth are fine.

        :return: dict {symbol: (bits, length)}, bits read MSB first
        """
        self.res_codes = {}
        if self.root is None:
            return self.res_codes

        stack = [(self.root, 0, 0)]
        while stack:
            node, bits, length = stack.pop()
            if node.is_leaf():
                self.res_codes[node.value] = (bits, length)
                continue
            # right goes on the stack first so left is visited first
            if node.right is not None:
                stack.append((node.right, (bits << 1) | 1, length + 1))
            if node.left is not None:
                stack.append((node.left, bits << 1, length + 1))

        return self.res_codes

    def code_lengths(self) -> dict[int, int]:
        """Return {symbol: codeword length}."""
        if not self.res_codes:
            self.codes_generation()
        return {sym: length for sym, (_, length) in self.res_codes.items()}

    def leaf_count(self) -> int:
        """Count leaves in the tree."""
        if self.root is None:
            return 0
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                count += 1
                continue
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return count

    def describe_codes(self) -> list[str]:
        """
        Printable code table, one line per symbol in symbol order,
        e.g. ``A (0x41): 010``.
        """
        if not self.res_codes:
            self.codes_generation()
        lines = []
        for sym in sorted(self.res_codes):
            bits, length = self.res_codes[sym]
            char = chr(sym) if 32 <= sym < 127 else "."
            lines.append(f"{char} (0x{sym:02x}): {bits:0{length}b}")
        return lines

    def decode_symbol(self, reader) -> int:
        """
        Walk from the root, one bit per step (0 - left, 1 - right),
        until a leaf is reached. Costs one Python call per payload bit,
        so decoding is much slower than the bulk encode in BitWriter.

        :param reader: BitReader positioned at the start of a codeword
        :return: int, decoded symbol
        """
        node = self.root
        while not node.is_leaf():
            node = node.right if reader.read_bit() else node.left
            if node is None:
                raise UnknownSymbolReferenced("Payload references a branch with no symbol")
        return node.value
