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

import logging

from pydantic import ValidationError

from .os10_errors import Os10ResourceError
from .os10_plugin_globals import g_os10
from .os10_plugin_config import Os10PluginConfig
from .os10_catalog import Os10Catalog


def plugin_init(plugin_def: dict):
    """
    This function is the required plugin 'hook' that is called during the host
    tool initialization process.  The primary purpose of this function is to
    pass along the User defined configuration from the tool configuration file.

    Parameters
    ----------
    plugin_def: dict
        The plugin definition as declared in the User configuration file.
    """

    if not (config := plugin_def.get("config")):
        return

    os10_plugin_config(config)


def os10_plugin_config(config: dict):
    """
    Called during plugin init, this function is used to validate the plugin
    configuration and compile the declared resources into the catalog.

    Parameters
    ----------
    config: dict
        The dict object as defined in the User configuration file.
    """

    try:
        g_os10.config = Os10PluginConfig.model_validate(config)
    except ValidationError as exc:
        raise RuntimeError(f"Failed to load OS10 plugin configuration: {str(exc)}")

    try:
        g_os10.catalog = Os10Catalog.from_declarations(g_os10.config.resources)
    except Os10ResourceError as exc:
        raise RuntimeError(f"Failed to load OS10 resources: {str(exc)}") from exc

    logging.getLogger("Os10Plugin").debug(
        "loaded %s resources", len(g_os10.catalog)
    )
