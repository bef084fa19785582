#  Copyright 2021 Jeremy Schulman
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

# -----------------------------------------------------------------------------
# System Imports
# -----------------------------------------------------------------------------

import re

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_errors import InvalidValueError

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = ["munge_asn", "ASN_HIGH_SHIFT"]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------

# a 4-byte ASN in "asdot" notation is <high-16-bits>.<low-16-bits>

ASN_HIGH_SHIFT = 65536

_RE_ASN = re.compile(r"(?P<high>[0-9]+)(\.(?P<low>[0-9]+))?")


def munge_asn(value) -> str:
    """
    Normalize an autonomous system number into its plain decimal string form.
    The OS10 device accepts either the plain form ("65537") or the dotted
    "high.low" form ("1.1"); the device always reports the plain form, so the
    desired value is converted once when the resource is constructed.

    Notes
    -----
    This function must be applied only once to a given value; the plain result
    of a dotted input is returned unchanged when re-applied, but re-applying to
    a dotted value is not a supported path.

    Parameters
    ----------
    value:
        The User provided ASN value, converted to string before matching.

    Returns
    -------
    The ASN as a decimal integer string.

    Raises
    ------
    InvalidValueError
        When the value is neither a plain nor a dotted ASN.
    """
    as_str = str(value)

    if not (found := _RE_ASN.fullmatch(as_str)):
        raise InvalidValueError(
            f"Unrecognized value for asn {as_str}", attribute="asn", value=value
        )

    if (low := found.group("low")) is None:
        return as_str

    return str(int(found.group("high")) * ASN_HIGH_SHIFT + int(low))
