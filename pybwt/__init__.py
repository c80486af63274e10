#!/usr/bin/env python
# Copyright 2006--2007-01-21 Paul Sladen
# http://www.paul.sladen.org/projects/compression/
#
# You may use and distribute this code under any DFSG-compatible
# license (eg. BSD, GNU GPLv2).
#
# Stand-alone pure-Python sentinel-delimited Burrows-Wheeler transform.
# This is a preprocessing stage only: feed encode()'s output to a
# run-length or entropy coder of your choice.

from pybwt.errors import (
    BWTError,
    InternalInvariantViolation,
    InvalidInputError,
    MalformedEncodingError,
    ResourceExhausted,
)
from pybwt.forward import encode
from pybwt.inverse import decode
from pybwt.sentinel import DEFAULT_POLICY, SentinelPolicy

__all__ = [
    "encode",
    "decode",
    "SentinelPolicy",
    "DEFAULT_POLICY",
    "BWTError",
    "InvalidInputError",
    "MalformedEncodingError",
    "InternalInvariantViolation",
    "ResourceExhausted",
]
