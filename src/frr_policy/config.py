"""Resolved configuration handed to the FRR renderer.

Every prefix bearing sequence is a real list, empty when there is nothing to
render, so the renderer never has to tell "missing" apart from "empty".
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .ipfamily import IPFamily


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


class _Serializable:
    def to_dict(self) -> Dict[str, Any]:
        """Return JSON friendly data with enums rendered by value."""

        return _plain(asdict(self))


@dataclass
class OutgoingFilter(_Serializable):
    """A prefix we advertise, with the communities to tag it with."""

    ip_family: IPFamily
    prefix: str
    communities: List[str] = field(default_factory=list)
    large_communities: List[str] = field(default_factory=list)


@dataclass
class IncomingFilter(_Serializable):
    ip_family: IPFamily
    prefix: str


@dataclass
class AllowedOut(_Serializable):
    prefixes_v4: List[OutgoingFilter] = field(default_factory=list)
    prefixes_v6: List[OutgoingFilter] = field(default_factory=list)

    def filters_for(self, family: IPFamily) -> List[OutgoingFilter]:
        if family is IPFamily.IPV4:
            return self.prefixes_v4
        if family is IPFamily.IPV6:
            return self.prefixes_v6
        raise ValueError(f"unknown address family {family!r}")


@dataclass
class AllowedIn(_Serializable):
    """Inbound policy; when ``all`` is set the prefix lists are ignored."""

    all: bool = False
    prefixes_v4: List[IncomingFilter] = field(default_factory=list)
    prefixes_v6: List[IncomingFilter] = field(default_factory=list)


@dataclass
class NeighborConfig(_Serializable):
    ip_family: IPFamily
    name: str
    asn: int
    addr: str
    port: int
    outgoing: AllowedOut = field(default_factory=AllowedOut)
    incoming: AllowedIn = field(default_factory=AllowedIn)


@dataclass
class RouterConfig(_Serializable):
    my_asn: int
    router_id: str
    vrf: str = ""
    ipv4_prefixes: List[str] = field(default_factory=list)
    ipv6_prefixes: List[str] = field(default_factory=list)
    neighbors: List[NeighborConfig] = field(default_factory=list)


@dataclass
class Config(_Serializable):
    routers: List[RouterConfig] = field(default_factory=list)
