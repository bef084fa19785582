# -----------------------------------------------------------------------------
# Public Imports
# -----------------------------------------------------------------------------

import pytest

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10 import Os10BgpNeighborAf
from netcam_os10.os10_errors import InvalidValueError
from netcam_os10.os10_insync import insync_exact, insync_with_default
from netcam_os10.os10_types import Tristate

# -----------------------------------------------------------------------------
#
#                               TEST CODE BEGINS
#
# -----------------------------------------------------------------------------

ABSENT, TRUE, FALSE = Tristate.absent, Tristate.true, Tristate.false


@pytest.mark.parametrize(
    "is_value, should, expected",
    [
        (ABSENT, TRUE, True),
        (ABSENT, FALSE, False),
        (TRUE, TRUE, True),
        (FALSE, TRUE, False),
        (TRUE, ABSENT, True),
        (FALSE, ABSENT, False),
        (ABSENT, ABSENT, True),
    ],
)
def test_insync_default_true(is_value, should, expected):
    assert insync_with_default(is_value, should, default=TRUE) is expected


@pytest.mark.parametrize(
    "is_value, should, expected",
    [
        (ABSENT, FALSE, True),
        (ABSENT, TRUE, False),
        (FALSE, FALSE, True),
        (TRUE, FALSE, False),
        (FALSE, ABSENT, True),
        (TRUE, ABSENT, False),
    ],
)
def test_insync_default_false(is_value, should, expected):
    assert insync_with_default(is_value, should, default=FALSE) is expected


@pytest.mark.parametrize("prop_name", ["activate", "sender_side_loop_detection"])
def test_resource_properties_default_true(prop_name):
    """
    The properties that default to true on the device accept an absent
    observed value when the desired value is true.
    """
    insync = Os10BgpNeighborAf.property_insync

    assert insync(prop_name, ABSENT, TRUE) is True
    assert insync(prop_name, ABSENT, FALSE) is False
    assert insync(prop_name, TRUE, TRUE) is True
    assert insync(prop_name, FALSE, TRUE) is False


@pytest.mark.parametrize("prop_name", ["next_hop_self", "soft_reconfiguration"])
def test_resource_properties_default_false(prop_name):
    insync = Os10BgpNeighborAf.property_insync

    assert insync(prop_name, ABSENT, FALSE) is True
    assert insync(prop_name, ABSENT, TRUE) is False


@pytest.mark.parametrize("prop_name", ["distribute_list", "route_map"])
def test_resource_properties_ordered_pair(prop_name):
    insync = Os10BgpNeighborAf.property_insync

    assert insync(prop_name, ["IN", "OUT"], ["IN", "OUT"]) is True
    assert insync(prop_name, ["IN", "OUT"], ["OUT", "IN"]) is False
    assert insync(prop_name, ["", ""], ["", ""]) is True


@pytest.mark.parametrize("prop_name", ["allowas_in", "add_path"])
def test_resource_properties_plain_equality(prop_name):
    """no implied default; an absent value never matches a configured one"""

    insync = Os10BgpNeighborAf.property_insync

    assert insync(prop_name, "3", "3") is True
    assert insync(prop_name, None, "3") is False
    assert insync(prop_name, "", "") is True


def test_insync_exact():
    assert insync_exact("both 3", "both 3") is True
    assert insync_exact("both 3", "send 3") is False


def test_property_insync_unknown_property():
    with pytest.raises(InvalidValueError):
        Os10BgpNeighborAf.property_insync("asn", "1", "1")


@pytest.mark.parametrize(
    "prop_name, is_value, should",
    [
        ("route_map", ("IN", "OUT"), ["IN", "OUT"]),
        ("distribute_list", ["IN", "OUT"], ("IN", "OUT")),
        ("activate", True, "true"),
        ("activate", None, "true"),
        ("activate", "absent", True),
        ("next_hop_self", None, False),
        ("soft_reconfiguration", False, "absent"),
        ("allowas_in", 9, "9"),
        ("ensure", None, "absent"),
    ],
)
def test_property_insync_raw_values(prop_name, is_value, should):
    """
    The values given by the host engine are normalized the same way as the
    declared values before the compare; None is a value not reported by the
    device.
    """
    assert Os10BgpNeighborAf.property_insync(prop_name, is_value, should) is True


@pytest.mark.parametrize(
    "prop_name, is_value, should",
    [
        ("route_map", ("OUT", "IN"), ["IN", "OUT"]),
        ("route_map", ["IN"], ["IN", "OUT"]),
        ("activate", False, "true"),
        ("next_hop_self", None, True),
        ("allowas_in", None, "9"),
    ],
)
def test_property_insync_raw_values_mismatch(prop_name, is_value, should):
    assert Os10BgpNeighborAf.property_insync(prop_name, is_value, should) is False
