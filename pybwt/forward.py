#!/usr/bin/env python
# Copyright 2006--2007-01-21 Paul Sladen
# http://www.paul.sladen.org/projects/compression/
#
# You may use and distribute this code under any DFSG-compatible
# license (eg. BSD, GNU GPLv2).
#
# Forward Burrows-Wheeler transform.  The input gets the sentinel
# appended, all cyclic rotations of the result are sorted and the last
# symbol of every sorted rotation is emitted.  Rotations are never
# copied: each one is identified by its start offset into the augmented
# buffer.

import typing as T

from pybwt.log import log
from pybwt.sentinel import DEFAULT_POLICY, SentinelPolicy, Symbol, Symbols


def augment(seq: Symbols, policy: SentinelPolicy) -> T.List[Symbol]:
    policy.validate_input(seq)
    symbols = list(seq)
    symbols.append(policy.symbol_for(seq))
    return symbols


def _dense_ranks(order: T.List[int], keyof: T.Callable[[int], T.Any]) -> T.List[int]:
    rank = [0] * len(order)
    r = 0
    prev = keyof(order[0])
    for i in order:
        k = keyof(i)
        if k != prev:
            r += 1
            prev = k
        rank[i] = r
    return rank


def sort_rotations(symbols: T.List[Symbol], policy: SentinelPolicy) -> T.List[int]:
    """
    Return the start offsets of the rotations of symbols in sorted order.

    Prefix doubling over cyclic shifts: after the pass with width k,
    rank[i] orders the rotations by their first 2k symbols.  Once every
    rank is distinct the order is final.  All sorts are stable, so two
    rotations that compare equal keep their start offset order.
    """
    n = len(symbols)
    if n == 0:
        return []
    keys = [policy.key(s) for s in symbols]
    order = sorted(range(n), key=keys.__getitem__)
    rank = _dense_ranks(order, keys.__getitem__)

    k = 1
    passes = 0
    while rank[order[-1]] < n - 1 and k < n:
        pair = lambda i: (rank[i], rank[(i + k) % n])
        order.sort(key=pair)
        rank = _dense_ranks(order, pair)
        k <<= 1
        passes += 1
    log("sorted", n, "rotations in", passes, "doubling passes")
    return order


def sort_rotations_naive(symbols: T.List[Symbol], policy: SentinelPolicy) -> T.List[int]:
    """Reference sort: materialize every rotation and compare them whole."""
    n = len(symbols)
    keys = [policy.key(s) for s in symbols]
    return sorted(range(n), key=lambda i: keys[i:] + keys[:i])


def last_column(symbols: T.List[Symbol], order: T.List[int]) -> T.List[Symbol]:
    # rotation starting at i ends with the symbol just before i
    return [symbols[i - 1] for i in order]


def encode(
    seq: Symbols, policy: T.Optional[SentinelPolicy] = None, naive: bool = False
) -> Symbols:
    """
    Burrows-Wheeler transform seq.

    The result has the type of seq, is one symbol longer and holds the
    sentinel exactly once.  Raises InvalidInputError if seq already
    contains the sentinel.
    """
    if policy is None:
        policy = DEFAULT_POLICY
    symbols = augment(seq, policy)
    log("encode: augmented length", len(symbols), "naive" if naive else "doubling")
    if naive:
        order = sort_rotations_naive(symbols, policy)
    else:
        order = sort_rotations(symbols, policy)
    return policy.join(last_column(symbols, order), seq)
