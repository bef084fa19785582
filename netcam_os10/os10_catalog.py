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

import logging
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from .os10_errors import DuplicateResourceError, InvalidValueError
from .os10_resource import Os10Resource, PropertyChange
from .os10_supports import get_resource_type

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = ["Os10Catalog", "ResourceKey"]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------

# (resource_type, name)
ResourceKey = Tuple[str, str]


class Os10Catalog:
    """
    The collection of desired resources declared by the User.  A resource name
    must be unique within its resource type.
    """

    def __init__(self):
        self._resources: Dict[ResourceKey, Os10Resource] = dict()
        self.logger = logging.getLogger("Os10Catalog")

    @classmethod
    def from_declarations(
        cls, declarations: Mapping[str, Mapping[str, Mapping[str, Any]]]
    ) -> "Os10Catalog":
        """
        Build the catalog from the User declarations.

        Parameters
        ----------
        declarations: Mapping
            Keyed by the resource type name, then by the resource name; the
            values are the resource attributes.  The `name` attribute may be
            omitted since it is taken from the key.

        Raises
        ------
        RuntimeError
            When a resource type is not supported.

        Os10ResourceError
            When a resource fails validation.
        """
        catalog = cls()

        for resource_type, resources in declarations.items():
            resource_cls = get_resource_type(resource_type)

            for name, params in resources.items():
                params = dict(params)

                if params.setdefault("name", name) != name:
                    raise InvalidValueError(
                        f"{resource_type}[{name}]: conflicting name {params['name']!r}",
                        attribute="name",
                        value=params["name"],
                    )

                catalog.add(resource_cls.from_params(params))

        catalog.logger.debug("compiled %s resources", len(catalog))
        return catalog

    def add(self, resource: Os10Resource):
        """
        Add the resource to the catalog.

        Raises
        ------
        DuplicateResourceError
            When a resource of the same type and name already exists.
        """
        key = (resource.resource_type, resource.name)

        if key in self._resources:
            raise DuplicateResourceError(
                f"Duplicate declaration: {resource.resource_type}[{resource.name}] "
                "is already declared",
                attribute="name",
                value=resource.name,
            )

        self._resources[key] = resource

    def get(self, resource_type: str, name: str) -> Optional[Os10Resource]:
        return self._resources.get((resource_type, name))

    def __iter__(self) -> Iterator[Os10Resource]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)

    def changes(
        self, observed: Mapping[str, Mapping[str, Mapping[str, Any]]]
    ) -> Dict[ResourceKey, Dict[str, PropertyChange]]:
        """
        Compare each resource in the catalog with the observed device state.

        Parameters
        ----------
        observed: Mapping
            The device state keyed the same way as the declarations; a resource
            missing from the observed state does not exist on the device.

        Returns
        -------
        The out-of-sync properties for each out-of-sync resource.  Resources
        that are in sync are not included.
        """
        results = dict()

        for (resource_type, name), resource in self._resources.items():
            is_state = observed.get(resource_type, {}).get(name)

            if changed := resource.changes(is_state):
                results[(resource_type, name)] = changed

        self.logger.debug(
            "%s of %s resources out of sync", len(results), len(self._resources)
        )
        return results
