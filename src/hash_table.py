import logging

from chain import Chain
from entry import Entry
from murmur_hash import hash_string, random_seed

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 1
MAX_LOAD_FACTOR = 0.7


class WordTable:
    """Chained hash table counting words case-insensitively.

    Buckets hold optional Chains of Entries keyed by the lowercase word. The
    bucket array starts at length 1 and doubles whenever the load factor is
    above MAX_LOAD_FACTOR at the start of an insertion.
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = random_seed()
        if not 0 <= seed < 2**32:
            raise ValueError(f"seed must be in [0, 2**32), got {seed}")
        self._seed = seed
        self._buckets = [None] * INITIAL_CAPACITY
        self._size = 0

    @property
    def seed(self):
        return self._seed

    @property
    def capacity(self):
        return len(self._buckets)

    @property
    def load_factor(self):
        return self._size / len(self._buckets)

    def bucket_index(self, word):
        return hash_string(word.lower(), self._seed) % len(self._buckets)

    def insert(self, word):
        """Record one occurrence of word and return its Entry."""
        if not isinstance(word, str):
            raise TypeError(f"word must be a string, got {type(word).__name__}")
        if not word:
            raise ValueError("cannot insert an empty word")

        if self.load_factor > MAX_LOAD_FACTOR:
            self.grow()

        key = word.lower()
        index = hash_string(key, self._seed) % len(self._buckets)
        chain = self._buckets[index]

        if chain is not None:
            entry = chain.find(key)
            if entry is not None:
                entry.record_occurrence(word)
                return entry
        else:
            chain = Chain()
            self._buckets[index] = chain

        entry = Entry(word)
        chain.prepend(entry)
        self._size += 1
        return entry

    def insert_all(self, words):
        for word in words:
            self.insert(word)

    def find(self, word):
        chain = self._buckets[self.bucket_index(word)]
        if chain is None:
            return None
        return chain.find(word.lower())

    def grow(self):
        """Double the bucket array and re-file every entry under its own hash.

        Entries are relinked, not copied. Walking each old chain tail to head
        and prepending keeps the relative order of entries that land in the
        same new bucket.
        """
        old_buckets = self._buckets
        self._buckets = [None] * (len(old_buckets) * 2)

        for chain in old_buckets:
            if chain is None:
                continue
            for entry in reversed(list(chain)):
                index = hash_string(entry.key, self._seed) % len(self._buckets)
                if self._buckets[index] is None:
                    self._buckets[index] = Chain()
                self._buckets[index].prepend(entry)

        logger.debug(
            "Grew table from %d to %d buckets (%d entries)",
            len(old_buckets), len(self._buckets), self._size,
        )

    def chain_lengths(self):
        return [0 if chain is None else len(chain) for chain in self._buckets]

    def report(self):
        lines = [f"Words {self._size}", ""]
        for chain in self._buckets:
            if chain is not None:
                lines.append(str(chain))
        return "\n".join(lines) + "\n"

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def __len__(self):
        return self._size

    def __contains__(self, word):
        return self.find(word) is not None

    def __iter__(self):
        for chain in self._buckets:
            if chain is not None:
                yield from chain
