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

from typing import Optional
from dataclasses import dataclass

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from .os10_plugin_config import Os10PluginConfig
from .os10_catalog import Os10Catalog


@dataclass
class Os10Globals:
    """
    Define a class to encapsulate the global variables used by this plugin.

    Attributes
    ----------
    config: Os10PluginConfig
        This is the plugin configuration as declared in the User configuration
        file.

    catalog: Os10Catalog
        The desired resources compiled from the configuration.
    """

    config: Optional[Os10PluginConfig] = None
    catalog: Optional[Os10Catalog] = None


# -----------------------------------------------------------------------------
# Globals
# -----------------------------------------------------------------------------

# the global variables used by this plugin
g_os10 = Os10Globals()
