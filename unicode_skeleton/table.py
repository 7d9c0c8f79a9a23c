"""
Sorted confusables table: source codepoint -> prototype character sequence.
"""

from array import array
from bisect import bisect_left

MAX_CODEPOINT = 0x10FFFF

# Offsets live in an array("L"), at least 32 bits wide.
MAX_POOL_SIZE = 0xFFFFFFFF


class TableBuildError(ValueError):
    pass


def _is_valid_codepoint(cp):
    return 0 <= cp <= MAX_CODEPOINT and not 0xD800 <= cp <= 0xDFFF


class ConfusablesTable:
    """
    Immutable lookup table built from (source, prototype) pairs.

    Keys must arrive sorted and unique. Prototypes are packed into a single
    string, each entry owning pool[offsets[i]:offsets[i + 1]].
    """

    __slots__ = ("_keys", "_offsets", "_pool")

    def __init__(self, entries, max_pool_size=MAX_POOL_SIZE):
        keys = array("L")
        offsets = array("L")
        chunks = []
        pool_size = 0

        for source, prototype in entries:
            if not _is_valid_codepoint(source):
                raise TableBuildError(f"Invalid source codepoint: {source:#x}")
            if keys and source <= keys[-1]:
                if source == keys[-1]:
                    raise TableBuildError(f"Duplicate source codepoint: U+{source:04X}")
                raise TableBuildError(f"Source codepoints not sorted at U+{source:04X}")

            prototype = list(prototype)
            if not prototype:
                raise TableBuildError(f"Empty prototype for U+{source:04X}")
            for cp in prototype:
                if not _is_valid_codepoint(cp):
                    raise TableBuildError(f"Invalid prototype codepoint {cp:#x} for U+{source:04X}")

            if pool_size + len(prototype) > max_pool_size:
                raise TableBuildError(f"Prototype pool exceeds capacity of {max_pool_size} characters")

            keys.append(source)
            offsets.append(pool_size)
            chunks.append("".join(map(chr, prototype)))
            pool_size += len(prototype)

        pool = "".join(chunks)

        # One substitution pass must be enough: no prototype may be a key.
        for char in set(pool):
            i = bisect_left(keys, ord(char))
            if i < len(keys) and keys[i] == ord(char):
                raise TableBuildError(f"Prototype character U+{ord(char):04X} is itself a table key")

        self._keys = keys
        self._offsets = offsets
        self._pool = pool

    def _index(self, cp):
        i = bisect_left(self._keys, cp)
        if i < len(self._keys) and self._keys[i] == cp:
            return i
        return None

    def _slice(self, i):
        start = self._offsets[i]
        end = self._offsets[i + 1] if i + 1 < len(self._offsets) else len(self._pool)
        return self._pool[start:end]

    def lookup(self, c):
        """Return the prototype for ``c`` (a codepoint or a character), or None."""
        cp = ord(c) if isinstance(c, str) else c
        i = self._index(cp)
        if i is None:
            return None
        return self._slice(i)

    def items(self):
        for i, cp in enumerate(self._keys):
            yield chr(cp), self._slice(i)

    @property
    def pool_size(self):
        return len(self._pool)

    def __contains__(self, c):
        cp = ord(c) if isinstance(c, str) else c
        return self._index(cp) is not None

    def __len__(self):
        return len(self._keys)

    def __repr__(self):
        return f"<ConfusablesTable entries={len(self)} pool_size={self.pool_size}>"
