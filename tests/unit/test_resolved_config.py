import json

import pytest

from frr_policy.config import (
    AllowedIn,
    AllowedOut,
    Config,
    IncomingFilter,
    NeighborConfig,
    OutgoingFilter,
    RouterConfig,
)
from frr_policy.ipfamily import IPFamily


def test_defaults_are_empty_lists():
    router = RouterConfig(my_asn=65000, router_id="10.0.0.1")

    assert router.ipv4_prefixes == []
    assert router.ipv6_prefixes == []
    assert router.neighbors == []
    assert AllowedOut() == AllowedOut(prefixes_v4=[], prefixes_v6=[])
    assert AllowedIn().all is False


def test_default_lists_are_not_shared():
    first = AllowedOut()
    second = AllowedOut()

    first.prefixes_v4.append(OutgoingFilter(IPFamily.IPV4, "10.0.0.0/8"))

    assert second.prefixes_v4 == []


def test_filters_for_family():
    out = AllowedOut(
        prefixes_v4=[OutgoingFilter(IPFamily.IPV4, "10.0.0.0/8")],
        prefixes_v6=[OutgoingFilter(IPFamily.IPV6, "fd00::/8")],
    )

    assert out.filters_for(IPFamily.IPV4) is out.prefixes_v4
    assert out.filters_for(IPFamily.IPV6) is out.prefixes_v6


def test_to_dict_is_json_serialisable():
    config = Config(
        routers=[
            RouterConfig(
                my_asn=65000,
                router_id="10.0.0.1",
                ipv4_prefixes=["10.0.0.0/24"],
                neighbors=[
                    NeighborConfig(
                        ip_family=IPFamily.IPV4,
                        name="65001@10.0.0.2",
                        asn=65001,
                        addr="10.0.0.2",
                        port=179,
                        outgoing=AllowedOut(
                            prefixes_v4=[
                                OutgoingFilter(
                                    IPFamily.IPV4,
                                    "10.0.0.0/24",
                                    communities=["10:1"],
                                    large_communities=["1:2:3"],
                                )
                            ]
                        ),
                        incoming=AllowedIn(
                            prefixes_v6=[IncomingFilter(IPFamily.IPV6, "fd00::/8")]
                        ),
                    )
                ],
            )
        ]
    )

    data = json.loads(json.dumps(config.to_dict()))

    neighbor = data["routers"][0]["neighbors"][0]
    assert neighbor["ip_family"] == "ipv4"
    assert neighbor["outgoing"]["prefixes_v4"] == [
        {
            "ip_family": "ipv4",
            "prefix": "10.0.0.0/24",
            "communities": ["10:1"],
            "large_communities": ["1:2:3"],
        }
    ]
    assert neighbor["incoming"] == {
        "all": False,
        "prefixes_v4": [],
        "prefixes_v6": [{"ip_family": "ipv6", "prefix": "fd00::/8"}],
    }
    assert data["routers"][0]["ipv6_prefixes"] == []


def test_filters_for_unknown_family():
    with pytest.raises(ValueError, match="unknown address family"):
        AllowedOut().filters_for("ipv5")
