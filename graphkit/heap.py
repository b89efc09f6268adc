"""A binary min-heap of (key, vertex) pairs with key decrease."""

from __future__ import annotations


class BinaryHeap:
    """Min-heap ordered by key, holding one vertex per entry."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def insert(self, key: int, vertex: int) -> None:
        self._entries.append((key, vertex))
        self._sift_up(len(self._entries) - 1)

    def extract_min(self) -> tuple[int, int]:
        """Remove and return the ``(key, vertex)`` pair with the smallest key."""
        if not self._entries:
            raise IndexError("extract from an empty heap")
        top = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> int:
        """The vertex with the smallest key, left in place."""
        if not self._entries:
            raise IndexError("peek at an empty heap")
        return self._entries[0][1]

    def decrease_key(self, vertex: int, new_key: int) -> None:
        """Give ``vertex`` the key ``new_key``; absent vertices are ignored."""
        for index, (_, held) in enumerate(self._entries):
            if held == vertex:
                self._entries[index] = (new_key, vertex)
                self._sift_up(index)
                return

    def __len__(self) -> int:
        return len(self._entries)

    def _sift_up(self, index: int) -> None:
        entries = self._entries
        while index > 0:
            parent = (index - 1) // 2
            if entries[index][0] < entries[parent][0]:
                entries[index], entries[parent] = entries[parent], entries[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and entries[child][0] < entries[smallest][0]:
                    smallest = child
            if smallest == index:
                return
            entries[index], entries[smallest] = entries[smallest], entries[index]
            index = smallest