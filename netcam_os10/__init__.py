# -----------------------------------------------------------------------------
# System Imports
# -----------------------------------------------------------------------------

import importlib.metadata as importlib_metadata

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from .os10_asn import munge_asn
from .os10_errors import (
    Os10ResourceError,
    InvalidValueError,
    ConstraintViolationError,
    DuplicateResourceError,
)
from .os10_insync import insync_exact, insync_with_default
from .os10_types import Ensure, Tristate
from .os10_resource import Os10Resource, PropertyChange
from .bgp_neighbor_af import Os10BgpNeighborAf, NeighborType, IpVersion
from .os10_supports import supports, get_resource_type
from .os10_catalog import Os10Catalog
from .os10_plugin_init import plugin_init

plugin_version = importlib_metadata.version("netcam-os10")
plugin_description = "Netcam resource types for Dell OS10 systems"
