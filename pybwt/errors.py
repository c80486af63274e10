#!/usr/bin/env python
# Copyright 2006--2007-01-21 Paul Sladen
# http://www.paul.sladen.org/projects/compression/
#
# You may use and distribute this code under any DFSG-compatible
# license (eg. BSD, GNU GPLv2).

"""
Exceptions raised by the transforms. All of them are precondition
failures detected before any work is done, except for
InternalInvariantViolation which is raised mid-walk by decode().
"""


class BWTError(Exception):
    """Base class for every error raised by pybwt."""


class InvalidInputError(BWTError, ValueError):
    """Raised when encode() input already contains the sentinel."""


class MalformedEncodingError(BWTError, ValueError):
    """Raised when decode() input is empty or does not hold exactly one
    sentinel."""


class InternalInvariantViolation(BWTError, RuntimeError):
    """Raised when the LF walk does not return to the sentinel row after
    exactly N steps, i.e. the mapping is not a single cycle."""


class ResourceExhausted(BWTError):
    """Raised when the input is longer than the policy's max_length."""
