from typing import Any, Iterable, Optional
from dataclasses import dataclass


@dataclass(eq=False)
class Event:
    id: int
    value: Any
    count: int = 0
    sequence: int = 0
    index: int = -1

    def __lt__(self, other):
        if self.count != other.count:
            return self.count < other.count
        return self.sequence < other.sequence


class EventQueue:
    """Binary min-heap of events ordered by (count, sequence).

    Every event records its own slot in ``heap`` so that an arbitrary event
    can be fixed or removed in O(log n) without searching for it.
    """

    def __init__(self):
        self.heap = []

    @classmethod
    def heapify(cls, events: Iterable[Event]):
        queue = cls()
        queue.heap = list(events)
        for i, event in enumerate(queue.heap):
            event.index = i
        for i in reversed(range(len(queue.heap) // 2)):
            queue._bubble_down(i)
        return queue

    def _parent(self, i: int):
        return (i - 1) // 2

    def _left(self, i: int):
        return 2 * i + 1

    def _right(self, i: int):
        return 2 * i + 2

    def _swap(self, i: int, j: int):
        self.heap[i], self.heap[j] = self.heap[j], self.heap[i]
        self.heap[i].index = i
        self.heap[j].index = j

    def _bubble_up(self, i: int) -> bool:
        moved = False
        while i > 0:
            parent = self._parent(i)
            if self.heap[i] < self.heap[parent]:
                self._swap(i, parent)
                i = parent
                moved = True
            else:
                break
        return moved

    def _bubble_down(self, i: int):
        size = len(self.heap)
        while True:
            smallest = i
            left = self._left(i)
            right = self._right(i)

            if left < size and self.heap[left] < self.heap[smallest]:
                smallest = left
            if right < size and self.heap[right] < self.heap[smallest]:
                smallest = right

            if smallest != i:
                self._swap(i, smallest)
                i = smallest
            else:
                break

    def _check_index(self, index: int):
        if index < 0 or index >= len(self.heap):
            raise IndexError(f"heap index {index} out of range (size {len(self.heap)})")

    def insert(self, event: Event):
        event.index = len(self.heap)
        self.heap.append(event)
        self._bubble_up(event.index)

    def fix(self, index: int):
        """Restore heap order after the event at ``index`` changed its key.

        The event may need to move either way, so try up first and only
        sift down when it stayed put.
        """
        self._check_index(index)
        if not self._bubble_up(index):
            self._bubble_down(index)

    def remove(self, index: int) -> Event:
        self._check_index(index)
        last = len(self.heap) - 1
        if index != last:
            self._swap(index, last)
        event = self.heap.pop()
        event.index = -1
        if index != last:
            self.fix(index)
        return event

    def extract_min(self) -> Optional[Event]:
        if not self.heap:
            return None
        return self.remove(0)

    def peek(self) -> Optional[Event]:
        return self.heap[0] if self.heap else None

    peek_min = peek

    def size(self):
        return len(self.heap)

    def is_empty(self):
        return len(self.heap) == 0

    def __len__(self):
        return len(self.heap)
