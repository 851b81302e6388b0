"""Compile declarative BGP routing intent into FRR-ready configuration.

The package takes a single, already merged routing specification (routers,
neighbours, originated prefixes and per-neighbour advertise/receive policies)
and resolves it into the data model an FRR renderer consumes:

* originated prefixes partitioned per address family;
* one outgoing filter per advertised prefix, carrying any standard and large
  communities attached to it;
* incoming filters (or an "accept everything" flag) per neighbour.

Compilation is a pure function.  It performs no I/O and keeps no state between
calls, so the same specification always yields an equal result.  Loading the
specification from disk and the command line entry point live in the
``frr_policy_agent`` package.
"""

from .compiler import api_to_config  # noqa: F401
from .exceptions import CompilationError, MalformedAddress, PolicyViolation  # noqa: F401

__all__ = [
    "CompilationError",
    "MalformedAddress",
    "PolicyViolation",
    "api_to_config",
]
