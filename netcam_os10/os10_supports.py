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

from typing import Type

from .os10_resource import Os10Resource
from .bgp_neighbor_af import Os10BgpNeighborAf


supports: dict[str, Type[Os10Resource]] = {
    cls.resource_type: cls for cls in (Os10BgpNeighborAf,)
}


def get_resource_type(resource_type: str) -> Type[Os10Resource]:
    """
    Returns the resource class that implements the given resource type name.

    Raises
    ------
    RuntimeError
        When the resource type is not supported by this plugin.
    """
    if not (resource_cls := supports.get(resource_type)):
        raise RuntimeError(f"Unsupported OS10 resource type: {resource_type}")

    return resource_cls
