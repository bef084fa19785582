from .os10_bgp_neighbor_af_defs import NeighborType, IpVersion
from .os10_bgp_neighbor_af import Os10BgpNeighborAf
