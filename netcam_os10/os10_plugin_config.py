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

from typing import Any, Dict

# -----------------------------------------------------------------------------
# Public Imports
# -----------------------------------------------------------------------------

from pydantic import BaseModel, Field

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = ["Os10PluginConfig"]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------


# -----------------------------------------------------------------------------
# Use pydantic models to validate the User configuration file.  Configure
# pydantic to prevent the User from providing (accidentally) any fields that are
# not specifically supported; via the extra="forbid" config.
# -----------------------------------------------------------------------------


class Os10PluginConfig(BaseModel, extra="forbid"):
    """
    define the schema for the plugin configuration

    Attributes
    ----------
    resources:
        The desired resources keyed by resource type name, then by resource
        name, for example:

            [plugins.config.resources.os10_bgp_neighbor_af.testdc1-af]
            asn = "65537"
            neighbor = "1.1.1.3"
            type = "ip"
            ip_ver = "ipv4"
    """

    resources: Dict[str, Dict[str, Dict[str, Any]]] = Field(default_factory=dict)
