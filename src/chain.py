class Chain:
    class Node:
        def __init__(self, entry):
            self.entry = entry
            self.next = None

    def __init__(self):
        self._head = None
        self._size = 0

    def prepend(self, entry):
        node = self.Node(entry)
        node.next = self._head
        self._head = node
        self._size += 1

    def find(self, key):
        current = self._head
        while current is not None:
            if current.entry.key == key:
                return current.entry
            current = current.next
        return None

    @property
    def head(self):
        if self._head is None:
            raise IndexError("head of empty chain")
        return self._head.entry

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def __len__(self):
        return self._size

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.entry
            current = current.next

    def __str__(self):
        return "\n".join(str(entry) for entry in self)
