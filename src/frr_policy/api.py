"""Declarative routing specification accepted by the compiler.

These dataclasses mirror the user facing API object: routers, their BGP
neighbours and the advertise/receive policies attached to each neighbour.
They are immutable so a specification can be compiled any number of times
(or concurrently) without the compiler being able to alter it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

DEFAULT_BGP_PORT = 179
LARGE_COMMUNITY_PREFIX = "large:"


@dataclass(frozen=True)
class AllowAll:
    """Allow every prefix the router knows about."""


@dataclass(frozen=True)
class AllowRestricted:
    """Allow only the explicitly listed prefixes.

    An empty list denies everything, which is the default posture for both
    directions of a neighbour.
    """

    prefixes: Sequence[str] = ()


AllowedPrefixes = Union[AllowAll, AllowRestricted]


@dataclass(frozen=True)
class CommunityPrefixes:
    """Tag ``prefixes`` with ``community`` when advertising them.

    ``community`` is either a standard ``"ASN:VALUE"`` community or a large
    community written as ``"large:GLOBAL:LOCAL1:LOCAL2"``.
    """

    prefixes: Sequence[str]
    community: str

    @property
    def is_large(self) -> bool:
        return self.community.startswith(LARGE_COMMUNITY_PREFIX)

    @property
    def value(self) -> str:
        """The community with any ``large:`` marker stripped."""

        if self.is_large:
            return self.community[len(LARGE_COMMUNITY_PREFIX):]
        return self.community


@dataclass(frozen=True)
class Advertise:
    """Outbound policy of a neighbour."""

    allowed: AllowedPrefixes = field(default_factory=AllowRestricted)
    prefixes_with_community: Sequence[CommunityPrefixes] = ()


@dataclass(frozen=True)
class Receive:
    """Inbound policy of a neighbour."""

    allowed: AllowedPrefixes = field(default_factory=AllowRestricted)


@dataclass(frozen=True)
class Neighbor:
    """BGP neighbour description.

    Attributes
    ----------
    asn:
        The peer Autonomous System Number.
    address:
        The peer IP address.  Its address family is derived from it, never
        declared.
    port:
        TCP port used to reach the peer.
    to_advertise:
        Prefixes (and communities) we announce to the peer.
    to_receive:
        Prefixes we accept from the peer.
    """

    asn: int
    address: str
    port: int = DEFAULT_BGP_PORT
    to_advertise: Advertise = field(default_factory=Advertise)
    to_receive: Receive = field(default_factory=Receive)


@dataclass(frozen=True)
class Router:
    """A BGP speaker, optionally bound to a VRF (``""`` is the default VRF)."""

    asn: int
    id: str = ""
    vrf: str = ""
    prefixes: Sequence[str] = ()
    neighbors: Sequence[Neighbor] = ()


@dataclass(frozen=True)
class Specification:
    """A single, already merged routing specification."""

    routers: Sequence[Router] = ()
