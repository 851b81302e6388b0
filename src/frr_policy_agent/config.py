"""YAML loader for routing specifications."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping

import yaml

from frr_policy.api import (
    DEFAULT_BGP_PORT,
    Advertise,
    AllowAll,
    AllowedPrefixes,
    AllowRestricted,
    CommunityPrefixes,
    Neighbor,
    Receive,
    Router,
    Specification,
)

LOG = logging.getLogger(__name__)

_ALLOW_ALL_MODES = {"all", "allowall"}
_ALLOW_RESTRICTED_MODES = {"", "filtered", "allowrestricted", "restricted"}


def _get(entry: Mapping[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    if camel in entry:
        return entry[camel]
    return entry.get(snake, default)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping")
    return value


def _str(value: Any, what: str) -> str:
    # Unquoted YAML such as 65000:10 decodes to a base-60 int, not the text.
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string, got {value!r}")
    return value


def _int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {value!r}") from None


def _string_list(value: Any, what: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list")
    return [_str(item, what) for item in value]


def _parse_allowed(section: Any, what: str) -> AllowedPrefixes:
    section = _mapping(section, what)
    mode = str(section.get("mode") or "").lower()
    if mode in _ALLOW_ALL_MODES:
        return AllowAll()
    if mode in _ALLOW_RESTRICTED_MODES:
        return AllowRestricted(
            prefixes=tuple(_string_list(section.get("prefixes"), f"{what} prefixes"))
        )
    raise ValueError(f"Unsupported allow mode '{section.get('mode')}' in {what}")


def _parse_community_prefixes(entries: Any) -> List[CommunityPrefixes]:
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError("'prefixesWithCommunity' must be a list")
    parsed = []
    for entry in entries:
        entry = _mapping(entry, "community entry")
        if "community" not in entry:
            raise ValueError("community entry missing 'community'")
        parsed.append(
            CommunityPrefixes(
                prefixes=tuple(_string_list(entry.get("prefixes"), "community prefixes")),
                community=_str(entry["community"], "community"),
            )
        )
    return parsed


def _parse_neighbor(entry: Any) -> Neighbor:
    entry = _mapping(entry, "neighbor")
    advertise = _mapping(_get(entry, "toAdvertise", "to_advertise"), "toAdvertise")
    receive = _mapping(_get(entry, "toReceive", "to_receive"), "toReceive")

    return Neighbor(
        asn=_int(entry["asn"], "neighbor asn"),
        address=_str(entry["address"], "neighbor address"),
        port=_int(entry.get("port") or DEFAULT_BGP_PORT, "neighbor port"),
        to_advertise=Advertise(
            allowed=_parse_allowed(advertise.get("allowed"), "toAdvertise"),
            prefixes_with_community=tuple(
                _parse_community_prefixes(
                    _get(advertise, "prefixesWithCommunity", "prefixes_with_community")
                )
            ),
        ),
        to_receive=Receive(allowed=_parse_allowed(receive.get("allowed"), "toReceive")),
    )


def _parse_router(entry: Any) -> Router:
    entry = _mapping(entry, "router")
    neighbors_data = entry.get("neighbors") or []
    if not isinstance(neighbors_data, list):
        raise ValueError("'neighbors' must be a list")

    return Router(
        asn=_int(entry["asn"], "router asn"),
        id=_str(entry.get("id") or "", "router id"),
        vrf=_str(entry.get("vrf") or "", "router vrf"),
        prefixes=tuple(_string_list(entry.get("prefixes"), "router prefixes")),
        neighbors=tuple(_parse_neighbor(neigh) for neigh in neighbors_data),
    )


def _routers_section(data: Mapping[str, Any]) -> Iterable[Any]:
    # Accept the bare document as well as the shape of the API resource.
    if "spec" in data:
        data = _mapping(data["spec"], "'spec'")
    if "bgp" in data:
        data = _mapping(data["bgp"], "'bgp'")
    routers = data.get("routers") or []
    if not isinstance(routers, list):
        raise ValueError("'routers' section must be a list")
    return routers


def parse_specification(data: Any) -> Specification:
    """Build a :class:`Specification` from already decoded YAML/JSON data."""

    if data is None:
        return Specification()
    if not isinstance(data, dict):
        raise ValueError("Routing specification must be a mapping")

    routers = tuple(_parse_router(entry) for entry in _routers_section(data))
    LOG.debug(
        "parsed specification with %d routers and %d neighbors",
        len(routers),
        sum(len(router.neighbors) for router in routers),
    )
    return Specification(routers=routers)


def load_specification(path: Path) -> Specification:
    LOG.debug("loading routing specification from %s", path)
    return parse_specification(yaml.safe_load(Path(path).read_text()))
