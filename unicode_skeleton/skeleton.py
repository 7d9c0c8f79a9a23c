"""
Skeletons as defined by Unicode Technical Standard #39.

    skeleton(X) = NFD(prototypes of each character of NFD(X))

Every stage is a generator, so confusable() stops at the first difference.
"""

import unicodedata
from itertools import zip_longest

from .data import get_table

_END = object()


def _is_starter(char):
    # Nothing below U+0300 decomposes to a leading combining mark.
    if char < "\u0300":
        return True
    return unicodedata.combining(unicodedata.normalize("NFD", char)[0]) == 0


def _nfd(segment):
    return iter(unicodedata.normalize("NFD", "".join(segment)))


def decompose(chars):
    """
    Lazy canonical decomposition (NFD) of an iterable of characters.

    Input is cut before each character whose decomposition starts with a
    starter; canonical reordering never crosses a starter, so normalizing the
    pieces separately gives the same result as normalizing the whole string.
    """
    segment = []
    for char in chars:
        if segment and _is_starter(char):
            yield from _nfd(segment)
            segment = []
        segment.append(char)

    if segment:
        yield from _nfd(segment)


def prototype_chars(c, table=None):
    if table is None:
        table = get_table()
    prototype = table.lookup(c)
    return iter(c if prototype is None else prototype)


def skeleton_chars(text, table=None):
    """
    Iterate over the skeleton of ``text`` (a str or an iterable of characters).

    The iterator is single pass; call again on the original input to
    recompute.
    """
    if table is None:
        table = get_table()
    expanded = (p for c in decompose(text) for p in prototype_chars(c, table))
    return decompose(expanded)


def skeleton(text, table=None):
    return "".join(skeleton_chars(text, table))


def confusable(a, b, table=None):
    """Return True if ``a`` and ``b`` have the same skeleton."""
    if table is None:
        table = get_table()
    pairs = zip_longest(skeleton_chars(a, table), skeleton_chars(b, table), fillvalue=_END)
    for x, y in pairs:
        if x != y:
            return False
    return True
