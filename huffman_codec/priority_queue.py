"""
Min-heap of Huffman tree nodes
"""
import heapq


class NodeQueue:
    """
    Priority queue that hands out the lightest node first.

    Nodes are ordered by their own ``__lt__``; for tree nodes that is
    (weight, smallest contained symbol), so ties are broken the same way
    on every run.
    """

    def __init__(self, nodes=None) -> None:
        """
        Initialize queue, optionally with starting nodes.

        Args:
            nodes: Iterable of nodes to put into the queue
        """
        self._heap = list(nodes) if nodes is not None else []
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, node) -> None:
        """
        Add node to the queue in O(log k).

        Args:
            node: Node to add
        """
        heapq.heappush(self._heap, node)

    def extract_min(self):
        """
        Remove and return the smallest node in O(log k).

        Returns:
            The smallest node, or None if queue is empty
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap)
