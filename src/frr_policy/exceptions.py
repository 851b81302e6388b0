"""Errors raised while compiling a routing specification."""

from __future__ import annotations


class CompilationError(ValueError):
    """Base class for failures that abort a compilation."""


class MalformedAddress(CompilationError):
    """An address or prefix could not be classified into an address family."""

    def __init__(self, address: str) -> None:
        super().__init__(f"failed to find ipfamily for {address!r}")
        self.address = address


class PolicyViolation(CompilationError):
    """A community was attached to a prefix the neighbour may not receive."""

    def __init__(self, prefix: str, community: str, neighbor: str) -> None:
        super().__init__(
            f"prefix {prefix} with community {community} "
            f"not in allowed list for neighbor {neighbor}"
        )
        self.prefix = prefix
        self.community = community
        self.neighbor = neighbor
