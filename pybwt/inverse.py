#!/usr/bin/env python
# Copyright 2006--2007-01-21 Paul Sladen
# http://www.paul.sladen.org/projects/compression/
#
# You may use and distribute this code under any DFSG-compatible
# license (eg. BSD, GNU GPLv2).
#
# Inverse Burrows-Wheeler transform.  No row index is transmitted: the
# walk starts from the sentinel's row of the first column and stops when
# it gets back there.  The walk is bounded to N steps: an encoded
# sequence that is not a single LF cycle raises instead of looping.

import typing as T

from pybwt.errors import InternalInvariantViolation
from pybwt.log import log
from pybwt.sentinel import DEFAULT_POLICY, SentinelPolicy, Symbol, Symbols


def first_column(last: T.Sequence[Symbol], policy: SentinelPolicy) -> T.List[Symbol]:
    return sorted(last, key=policy.key)


def lf_mapping(first: T.Sequence[Symbol], last: T.Sequence[Symbol]) -> T.List[int]:
    """
    Build Next: Next[i] is the row of last holding the same occurrence of
    the symbol first[i], counting occurrences from the left in both columns.

    One pass over each column with a running count per symbol.
    """
    # base[c] is where the next unclaimed c sits in the first column
    base: T.Dict[Symbol, int] = {}
    for i, symbol in enumerate(first):
        base.setdefault(symbol, i)

    pointers = [-1] * len(last)
    for i, symbol in enumerate(last):
        pointers[base[symbol]] = i
        base[symbol] += 1
    return pointers


def decode(seq: Symbols, policy: T.Optional[SentinelPolicy] = None) -> Symbols:
    """
    Invert encode(): rebuild the original sequence from the last column.

    Raises MalformedEncodingError if seq is empty or does not contain the
    sentinel exactly once, and InternalInvariantViolation if the LF walk
    is not a single cycle through all N rows.
    """
    if policy is None:
        policy = DEFAULT_POLICY
    policy.validate_encoding(seq)

    last = list(seq)
    n = len(last)
    first = first_column(last, policy)
    nxt = lf_mapping(first, last)
    # the sentinel sorts first, so it owns row 0
    start = 0
    log("decode: length", n, "start row", start)

    out: T.List[Symbol] = [None] * (n - 1)
    curr = start
    for pos in range(n - 1):
        curr = nxt[curr]
        if curr == start:
            raise InternalInvariantViolation(
                f"LF walk returned to the sentinel row after {pos} of {n - 1} symbols"
            )
        out[pos] = first[curr]
    if nxt[curr] != start:
        raise InternalInvariantViolation(
            f"LF walk did not return to the sentinel row after {n - 1} symbols"
        )
    return policy.join(out, seq)
