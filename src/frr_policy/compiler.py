"""Translate a routing specification into the resolved FRR configuration.

Compilation walks the specification once, in declaration order:

1. each router's originated prefixes are split per address family;
2. each neighbour gets its outgoing and incoming filters materialised from
   its advertise/receive policies;
3. communities are attached to the outgoing filters built in step 2.

A community that targets a prefix the neighbour is not allowed to receive
aborts the whole compilation with :class:`PolicyViolation`; the first such
violation in declaration order is the one reported.
"""

from __future__ import annotations

from typing import List, Sequence

from .api import (
    Advertise,
    AllowAll,
    AllowedPrefixes,
    Neighbor,
    Receive,
    Router,
    Specification,
)
from .config import (
    AllowedIn,
    AllowedOut,
    Config,
    IncomingFilter,
    NeighborConfig,
    OutgoingFilter,
    RouterConfig,
)
from .exceptions import PolicyViolation
from .ipfamily import IPFamily, classify, partition


def api_to_config(spec: Specification) -> Config:
    """Compile ``spec`` into a :class:`Config`.

    Raises :class:`MalformedAddress` if a prefix or neighbour address cannot
    be classified and :class:`PolicyViolation` if a community targets a
    prefix outside the neighbour's outgoing allow list.  Nothing is returned
    on failure.
    """

    return Config(routers=[_router_config(router) for router in spec.routers])


def _router_config(router: Router) -> RouterConfig:
    ipv4_prefixes, ipv6_prefixes = partition(router.prefixes)
    config = RouterConfig(
        my_asn=router.asn,
        router_id=router.id,
        vrf=router.vrf,
        ipv4_prefixes=ipv4_prefixes,
        ipv6_prefixes=ipv6_prefixes,
    )
    for neighbor in router.neighbors:
        config.neighbors.append(_neighbor_config(neighbor, router.prefixes))
    return config


def _neighbor_config(neighbor: Neighbor, router_prefixes: Sequence[str]) -> NeighborConfig:
    family = classify(neighbor.address)
    outgoing = _outgoing(neighbor.to_advertise, router_prefixes)
    _attach_communities(neighbor, outgoing)
    return NeighborConfig(
        ip_family=family,
        name=f"{neighbor.asn}@{neighbor.address}",
        asn=neighbor.asn,
        addr=neighbor.address,
        port=neighbor.port,
        outgoing=outgoing,
        incoming=_incoming(neighbor.to_receive),
    )


def _allowed_prefixes(allowed: AllowedPrefixes, router_prefixes: Sequence[str]) -> Sequence[str]:
    # "allow all" means every prefix the router currently originates.
    if isinstance(allowed, AllowAll):
        return router_prefixes
    return allowed.prefixes


def _outgoing(advertise: Advertise, router_prefixes: Sequence[str]) -> AllowedOut:
    ipv4, ipv6 = partition(_allowed_prefixes(advertise.allowed, router_prefixes))
    return AllowedOut(
        prefixes_v4=[OutgoingFilter(IPFamily.IPV4, prefix) for prefix in ipv4],
        prefixes_v6=[OutgoingFilter(IPFamily.IPV6, prefix) for prefix in ipv6],
    )


def _incoming(receive: Receive) -> AllowedIn:
    if isinstance(receive.allowed, AllowAll):
        return AllowedIn(all=True)
    ipv4, ipv6 = partition(receive.allowed.prefixes)
    return AllowedIn(
        all=False,
        prefixes_v4=[IncomingFilter(IPFamily.IPV4, prefix) for prefix in ipv4],
        prefixes_v6=[IncomingFilter(IPFamily.IPV6, prefix) for prefix in ipv6],
    )


def _attach_communities(neighbor: Neighbor, outgoing: AllowedOut) -> None:
    for entry in neighbor.to_advertise.prefixes_with_community:
        for prefix in entry.prefixes:
            filters = outgoing.filters_for(classify(prefix))
            target = _find_filter(filters, prefix)
            if target is None:
                raise PolicyViolation(prefix, entry.community, neighbor.address)
            # No dedup: the same community declared twice is rendered twice.
            if entry.is_large:
                target.large_communities.append(entry.value)
            else:
                target.communities.append(entry.value)


def _find_filter(filters: List[OutgoingFilter], prefix: str) -> OutgoingFilter | None:
    return next((f for f in filters if f.prefix == prefix), None)
