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

# =============================================================================
# This file contains the os10_bgp_neighbor_af resource type, used to manage the
# address family (ipv4 or ipv6) sub-configuration of a BGP neighbor, or of a
# BGP peer-template.  For example:
#
#   {
#       "name": "testdc1-af",
#       "asn": "65537",
#       "neighbor": "1.1.1.3",
#       "type": "ip",
#       "ip_ver": "ipv4",
#       "activate": "true",
#       "allowas_in": "9",
#       "add_path": "both 3",
#       "next_hop_self": "true",
#       "distribute_list": ["IN", "OUT"],
#       "route_map": ["", "OUT"],
#   }
# =============================================================================

# -----------------------------------------------------------------------------
# System Imports
# -----------------------------------------------------------------------------

from functools import partial
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_asn import munge_asn
from netcam_os10.os10_errors import InvalidValueError, ConstraintViolationError
from netcam_os10.os10_insync import insync_with_default
from netcam_os10.os10_resource import Os10Property, Os10Resource, ValueParser
from netcam_os10.os10_types import Tristate, parse_enum, parse_tristate

from .os10_bgp_neighbor_af_defs import (
    OS10_BGP_NEIGHBOR_AF_TYPE,
    OS10_BGP_NEIGHBOR_AF_DEFAULTS,
    OS10_POLICY_NAME_MAX_LEN,
    OS10_POLICY_PAIR_LEN,
    OS10_ALLOWAS_IN_MIN,
    OS10_ALLOWAS_IN_MAX,
    NeighborType,
    IpVersion,
)

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = ["Os10BgpNeighborAf"]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------


def _parse_string(value, attribute: str) -> str:
    if not isinstance(value, str):
        raise InvalidValueError(
            f"Invalid value {value!r} for {attribute}: must be a string",
            attribute=attribute,
            value=value,
        )
    return value


def _parse_asn(value, _attribute: str) -> str:
    return munge_asn(value)


def _parse_neighbor_type(value, attribute: str) -> NeighborType:
    return parse_enum(NeighborType, value, attribute)


def _parse_ip_ver(value, attribute: str) -> IpVersion:
    return parse_enum(IpVersion, value, attribute)


def _parse_allowas_in(value, attribute: str) -> str:
    """
    The device reports the value as an integer, and the User may declare it as
    either an integer or a string; both are stored as the decimal string.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)

    if not (isinstance(value, str) and value.isascii() and value.isdigit()):
        raise InvalidValueError(
            f"Invalid value {value!r} for {attribute}: must be a number",
            attribute=attribute,
            value=value,
        )

    if not OS10_ALLOWAS_IN_MIN <= int(value) <= OS10_ALLOWAS_IN_MAX:
        raise ConstraintViolationError(
            f"Invalid value {value!r} for {attribute}: valid values are "
            f"{OS10_ALLOWAS_IN_MIN}-{OS10_ALLOWAS_IN_MAX}",
            attribute=attribute,
            value=value,
        )

    return str(int(value))


def _parse_policy_pair(value, attribute: str) -> Tuple[str, str]:
    """
    Validate the [inbound, outbound] pair of policy names.  There must be
    exactly two entries, each a string of at most 140 characters; the empty
    string is allowed and denotes no policy for that direction.
    """
    if not isinstance(value, (list, tuple)):
        raise InvalidValueError(
            f"Invalid value {value!r} for {attribute}: must be a list of "
            "[inbound, outbound] names",
            attribute=attribute,
            value=value,
        )

    if len(value) != OS10_POLICY_PAIR_LEN:
        raise ConstraintViolationError(
            f"Invalid value {value!r} for {attribute}: expected exactly "
            f"{OS10_POLICY_PAIR_LEN} entries, got {len(value)}",
            attribute=attribute,
            value=value,
        )

    for entry in value:
        _parse_string(entry, attribute)
        if len(entry) > OS10_POLICY_NAME_MAX_LEN:
            raise ConstraintViolationError(
                f"Invalid value {entry!r} for {attribute}: names are limited to "
                f"{OS10_POLICY_NAME_MAX_LEN} characters",
                attribute=attribute,
                value=value,
            )

    return tuple(value)


def _tristate(prop_name: str) -> Os10Property:
    return Os10Property(
        parser=parse_tristate,
        insync=partial(
            insync_with_default, default=OS10_BGP_NEIGHBOR_AF_DEFAULTS[prop_name]
        ),
        absent=Tristate.absent,
    )


class Os10BgpNeighborAf(Os10Resource):
    """
    Address family sub-configuration under the BGP neighbor sub-configuration.

    Attributes
    ----------
    asn: str
        Autonomous System number of the bgp configuration.  Valid values are
        1-4294967295 or 0.1-65535.65535; the dotted form is stored as the
        plain number.

    neighbor: str
        The neighbor IP address, or the peer-template name.

    type: NeighborType
        Whether the `neighbor` is an ip or a template.

    ip_ver: IpVersion
        The address family, ipv4 or ipv6.

    activate: Tristate
        Enable the address family for this neighbor.  Default true.

    allowas_in: str
        Allowed number of local AS occurrences in the as-path, 1-10.

    add_path: str
        Send or receive multiple paths, for example "both 3".  The empty
        string removes the configuration.

    distribute_list: Tuple[str, str]
        The [inbound, outbound] prefix-list names used to filter routing
        updates.  An empty name denotes no filter for that direction.

    next_hop_self: Tristate
        Enable the next hop calculation for this neighbor.  Default false.

    route_map: Tuple[str, str]
        The [inbound, outbound] route-map names.  An empty name denotes no
        route-map for that direction.

    sender_side_loop_detection: Tristate
        Sender side loop detect for this neighbor.  Default true.

    soft_reconfiguration: Tristate
        Per neighbor soft reconfiguration.  Default false.
    """

    resource_type: ClassVar[str] = OS10_BGP_NEIGHBOR_AF_TYPE

    parameters: ClassVar[Mapping[str, ValueParser]] = MappingProxyType(
        {
            "asn": _parse_asn,
            "neighbor": _parse_string,
            "type": _parse_neighbor_type,
            "ip_ver": _parse_ip_ver,
        }
    )

    # the tri-state properties bind the default-implied comparison with their
    # BGP protocol default.

    properties: ClassVar[Mapping[str, Os10Property]] = MappingProxyType(
        {
            **Os10Resource.properties,
            "activate": _tristate("activate"),
            "allowas_in": Os10Property(parser=_parse_allowas_in),
            "add_path": Os10Property(parser=_parse_string),
            "distribute_list": Os10Property(parser=_parse_policy_pair),
            "next_hop_self": _tristate("next_hop_self"),
            "route_map": Os10Property(parser=_parse_policy_pair),
            "sender_side_loop_detection": _tristate("sender_side_loop_detection"),
            "soft_reconfiguration": _tristate("soft_reconfiguration"),
        }
    )

    # parameters

    asn: Optional[str] = None
    neighbor: Optional[str] = None
    type: Optional[NeighborType] = None
    ip_ver: Optional[IpVersion] = None

    # properties

    activate: Optional[Tristate] = None
    allowas_in: Optional[str] = None
    add_path: Optional[str] = None
    distribute_list: Optional[Tuple[str, str]] = None
    next_hop_self: Optional[Tristate] = None
    route_map: Optional[Tuple[str, str]] = None
    sender_side_loop_detection: Optional[Tristate] = None
    soft_reconfiguration: Optional[Tristate] = None
