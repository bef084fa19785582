# -----------------------------------------------------------------------------
# Public Imports
# -----------------------------------------------------------------------------

import pytest

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10 import Os10BgpNeighborAf, Os10Catalog, get_resource_type, supports
from netcam_os10.os10_errors import DuplicateResourceError, InvalidValueError

# -----------------------------------------------------------------------------
#
#                               TEST CODE BEGINS
#
# -----------------------------------------------------------------------------


@pytest.fixture()
def declarations() -> dict:
    return {
        "os10_bgp_neighbor_af": {
            "testdc1-af": {
                "asn": "65537",
                "neighbor": "1.1.1.3",
                "type": "ip",
                "ip_ver": "ipv4",
                "activate": "true",
                "next_hop_self": "true",
            },
            "TEMP1-af": {
                "name": "TEMP1-af",
                "asn": "1.1",
                "neighbor": "TEMP1",
                "type": "template",
                "ip_ver": "ipv4",
                "activate": "true",
            },
        }
    }


def test_supports():
    assert supports == {"os10_bgp_neighbor_af": Os10BgpNeighborAf}
    assert get_resource_type("os10_bgp_neighbor_af") is Os10BgpNeighborAf


def test_supports_unknown_type():
    with pytest.raises(RuntimeError):
        get_resource_type("os10_bgp_neighbor")


def test_catalog_from_declarations(declarations):
    catalog = Os10Catalog.from_declarations(declarations)

    assert len(catalog) == 2
    assert {rsrc.name for rsrc in catalog} == {"testdc1-af", "TEMP1-af"}

    rsrc = catalog.get("os10_bgp_neighbor_af", "TEMP1-af")
    assert rsrc.asn == "65537"
    assert catalog.get("os10_bgp_neighbor_af", "nosuch") is None


def test_catalog_conflicting_name(declarations):
    declarations["os10_bgp_neighbor_af"]["TEMP1-af"]["name"] = "TEMP2-af"

    with pytest.raises(InvalidValueError):
        Os10Catalog.from_declarations(declarations)


def test_catalog_unsupported_type():
    with pytest.raises(RuntimeError):
        Os10Catalog.from_declarations({"os10_vrf": {"blue": {}}})


def test_catalog_duplicate_name(declarations):
    catalog = Os10Catalog.from_declarations(declarations)

    with pytest.raises(DuplicateResourceError) as excinfo:
        catalog.add(Os10BgpNeighborAf.from_params({"name": "testdc1-af"}))

    assert excinfo.value.value == "testdc1-af"
    assert len(catalog) == 2


def test_catalog_changes(declarations):
    catalog = Os10Catalog.from_declarations(declarations)

    observed = {
        "os10_bgp_neighbor_af": {
            "testdc1-af": {"activate": "absent", "next_hop_self": "absent"},
        }
    }

    changes = catalog.changes(observed)

    # the template is not on the device, and the neighbor next-hop-self is at
    # the default value of false.

    assert set(changes) == {
        ("os10_bgp_neighbor_af", "testdc1-af"),
        ("os10_bgp_neighbor_af", "TEMP1-af"),
    }
    assert list(changes[("os10_bgp_neighbor_af", "testdc1-af")]) == ["next_hop_self"]
    assert list(changes[("os10_bgp_neighbor_af", "TEMP1-af")]) == ["ensure"]


def test_catalog_changes_insync(declarations):
    catalog = Os10Catalog.from_declarations(declarations)

    observed = {
        "os10_bgp_neighbor_af": {
            "testdc1-af": {"activate": "true", "next_hop_self": "true"},
            "TEMP1-af": {"ensure": "present"},
        }
    }

    assert catalog.changes(observed) == {}


def test_catalog_changes_malformed_observed(declarations):
    """
    A malformed value reported for one resource does not prevent the compare
    of the remaining resources.
    """
    declarations["os10_bgp_neighbor_af"]["testdc1-af"]["route_map"] = ["", "OUT"]
    catalog = Os10Catalog.from_declarations(declarations)

    observed = {
        "os10_bgp_neighbor_af": {
            "testdc1-af": {
                "activate": "true",
                "next_hop_self": "true",
                "route_map": ["OUT"],
            },
        }
    }

    changes = catalog.changes(observed)

    assert list(changes[("os10_bgp_neighbor_af", "testdc1-af")]) == ["route_map"]
    assert list(changes[("os10_bgp_neighbor_af", "TEMP1-af")]) == ["ensure"]
