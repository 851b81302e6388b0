"""Address family detection shared by every compilation step."""

from __future__ import annotations

import ipaddress
from enum import Enum
from typing import Iterable, List, Tuple

from .exceptions import MalformedAddress


class IPFamily(str, Enum):
    """Address families understood by the FRR renderer."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


def classify(value: str) -> IPFamily:
    """Return the family of ``value``, a bare address or a CIDR prefix.

    Host bits are not checked: ``10.0.0.1/24`` is an IPv4 prefix like any
    other.  Anything the :mod:`ipaddress` module rejects raises
    :class:`MalformedAddress`.
    """

    if not isinstance(value, str):
        raise MalformedAddress(value)
    try:
        if "/" in value:
            parsed = ipaddress.ip_network(value, strict=False)
        else:
            parsed = ipaddress.ip_address(value)
    except ValueError as exc:
        raise MalformedAddress(value) from exc
    if parsed.version == 4:
        return IPFamily.IPV4
    return IPFamily.IPV6


def partition(prefixes: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split ``prefixes`` into ``(ipv4, ipv6)`` keeping the input order."""

    ipv4: List[str] = []
    ipv6: List[str] = []
    for prefix in prefixes:
        if classify(prefix) is IPFamily.IPV4:
            ipv4.append(prefix)
        else:
            ipv6.append(prefix)
    return ipv4, ipv6
