# -----------------------------------------------------------------------------
# Public Imports
# -----------------------------------------------------------------------------

import pytest

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_asn import munge_asn
from netcam_os10.os10_errors import InvalidValueError

# -----------------------------------------------------------------------------
#
#                               TEST CODE BEGINS
#
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [
        ("65537", "65537"),
        ("1.5", "65541"),
        ("0.1", "1"),
        ("1.1", "65537"),
        ("65535.65535", "4294967295"),
    ],
)
def test_munge_asn(value, expected):
    assert munge_asn(value) == expected


def test_munge_asn_plain_unchanged():
    """
    The plain form is returned as given, and so re-applying the munge to a
    plain result does not change it.
    """
    assert munge_asn("4200000000") == "4200000000"
    assert munge_asn(munge_asn("1.5")) == "65541"


def test_munge_asn_int_value():
    assert munge_asn(65001) == "65001"


@pytest.mark.parametrize(
    "value", ["abc", "1.2.3", "", "1.", ".1", "-1", "1:1", "65001\n", "65 001"]
)
def test_munge_asn_invalid(value):
    with pytest.raises(InvalidValueError) as excinfo:
        munge_asn(value)

    assert excinfo.value.attribute == "asn"
    assert excinfo.value.value == value
    assert f"Unrecognized value for asn {value}" in str(excinfo.value)
