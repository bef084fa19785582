# -----------------------------------------------------------------------------
# System Imports
# -----------------------------------------------------------------------------

from enum import Enum
from types import MappingProxyType

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_types import Tristate

OS10_BGP_NEIGHBOR_AF_TYPE = "os10_bgp_neighbor_af"

# route-map and prefix-list names are limited by OS10 to 140 characters

OS10_POLICY_NAME_MAX_LEN = 140

# the [inbound, outbound] policy names

OS10_POLICY_PAIR_LEN = 2

OS10_ALLOWAS_IN_MIN = 1
OS10_ALLOWAS_IN_MAX = 10


class NeighborType(str, Enum):
    ip = "ip"
    template = "template"


class IpVersion(str, Enum):
    ipv4 = "ipv4"
    ipv6 = "ipv6"


# This mapping table declares the BGP protocol default for each of the
# tri-state properties.  A property that is absent on either side of the
# comparison is considered to have this value.

OS10_BGP_NEIGHBOR_AF_DEFAULTS: MappingProxyType[str, Tristate] = MappingProxyType(
    {
        "activate": Tristate.true,
        "next_hop_self": Tristate.false,
        "sender_side_loop_detection": Tristate.true,
        "soft_reconfiguration": Tristate.false,
    }
)
