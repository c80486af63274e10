#!/usr/bin/env python
# Copyright 2006--2007-01-21 Paul Sladen
# http://www.paul.sladen.org/projects/compression/
#
# You may use and distribute this code under any DFSG-compatible
# license (eg. BSD, GNU GPLv2).

"""
The sentinel policy: the reserved terminator symbol, the symbol ordering
built around it, and the input checks both transforms run before doing
any work.

The sentinel always sorts before every other symbol, whatever its native
codepoint is. Both transforms must sort with key() or the LF mapping
built by the inverse no longer matches the rows sorted by the forward
transform.
"""

import typing as T

from pybwt.errors import (
    InvalidInputError,
    MalformedEncodingError,
    ResourceExhausted,
)

Symbol = T.Any
Symbols = T.Union[str, bytes, bytearray, T.List[T.Any], T.Tuple[T.Any, ...]]


class SentinelPolicy:
    """
    A reserved symbol plus an optional cap on sequence length.

    The symbol is either a one-character string or a byte value. Text
    input uses the character form, bytes/bytearray input uses the byte
    form, other sequences compare their elements against both.
    """

    def __init__(
        self, symbol: T.Union[str, int] = "$", max_length: T.Optional[int] = None
    ) -> None:
        if isinstance(symbol, bool):
            raise TypeError("sentinel must be a str or an int, not bool")
        if isinstance(symbol, str):
            if len(symbol) != 1:
                raise ValueError(f"sentinel must be a single character, got {symbol!r}")
            self.char = symbol
            self.byte: T.Optional[int] = ord(symbol) if ord(symbol) < 256 else None
        elif isinstance(symbol, int):
            if not 0 <= symbol <= 255:
                raise ValueError(f"sentinel byte out of range: {symbol}")
            self.char = chr(symbol)
            self.byte = symbol
        else:
            raise TypeError(f"sentinel must be a str or an int, got {type(symbol)!r}")
        if max_length is not None and max_length < 0:
            raise ValueError("max_length must not be negative")
        self.symbol = symbol
        self.max_length = max_length

    def __repr__(self) -> str:
        return f"SentinelPolicy(symbol={self.symbol!r}, max_length={self.max_length!r})"

    def symbol_for(self, seq: Symbols) -> Symbol:
        """Return the sentinel as an element of seq."""
        if isinstance(seq, (bytes, bytearray)):
            if self.byte is None:
                raise ValueError(
                    f"sentinel {self.char!r} has no byte value, cannot use it with bytes"
                )
            return self.byte
        if isinstance(seq, str):
            return self.char
        return self.symbol

    def is_sentinel(self, s: Symbol) -> bool:
        if isinstance(s, str):
            return s == self.char
        return s == self.byte

    def key(self, s: Symbol) -> T.Tuple[int, Symbol]:
        """Sort key: the sentinel first, everything else by natural order."""
        if self.is_sentinel(s):
            return (0, 0)
        return (1, s)

    def ordering(self, a: Symbol, b: Symbol) -> int:
        """cmp-style comparison of two symbols under key()."""
        ka, kb = self.key(a), self.key(b)
        return (ka > kb) - (ka < kb)

    def count(self, seq: Symbols) -> int:
        if isinstance(seq, (str, bytes, bytearray)):
            return seq.count(self.symbol_for(seq))
        return sum(1 for s in seq if self.is_sentinel(s))

    def _check_length(self, seq: Symbols) -> None:
        if self.max_length is not None and len(seq) > self.max_length:
            raise ResourceExhausted(
                f"sequence of {len(seq)} symbols exceeds max_length={self.max_length}"
            )

    def validate_input(self, seq: Symbols) -> None:
        """Check a sequence about to be encoded."""
        self._check_length(seq)
        n = self.count(seq)
        if n:
            raise InvalidInputError(
                f"input contains the sentinel {self.symbol!r} {n} time(s)"
            )

    def validate_encoding(self, seq: Symbols) -> None:
        """Check a sequence about to be decoded."""
        if not len(seq):
            raise MalformedEncodingError("encoded sequence is empty")
        self._check_length(seq)
        n = self.count(seq)
        if n != 1:
            raise MalformedEncodingError(
                f"encoded sequence must contain the sentinel {self.symbol!r} "
                f"exactly once, found {n}"
            )

    @staticmethod
    def join(symbols: T.Sequence[Symbol], like: Symbols) -> Symbols:
        """Rebuild a sequence of the same type as like from symbols."""
        if isinstance(like, str):
            return "".join(symbols)
        if isinstance(like, bytearray):
            return bytearray(symbols)
        if isinstance(like, bytes):
            return bytes(symbols)
        if isinstance(like, tuple):
            return tuple(symbols)
        return list(symbols)


DEFAULT_POLICY = SentinelPolicy("$")
