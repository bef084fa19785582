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

from enum import Enum
from typing import Type, TypeVar

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_errors import InvalidValueError

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = ["Ensure", "Tristate", "parse_enum", "parse_tristate"]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------

E = TypeVar("E", bound=Enum)


class Ensure(str, Enum):
    """resource lifecycle state"""

    present = "present"
    absent = "absent"


class Tristate(str, Enum):
    """
    A boolean property that the device may also report as not configured.
    The `absent` value is used both for a property the User explicitly wants
    to leave to the device default, and for a property the device does not
    report.
    """

    absent = "absent"
    true = "true"
    false = "false"


def parse_enum(enum_cls: Type[E], value, attribute: str) -> E:
    """
    Match the raw User value against the closed set of enum values.

    Parameters
    ----------
    enum_cls:
        The Enum class that defines the allowed values.

    value:
        The raw value, either an instance of the Enum or its string value.

    attribute: str
        The resource attribute name, used for the error message.

    Raises
    ------
    InvalidValueError
        When the value is not one of the enum values.
    """
    if isinstance(value, enum_cls):
        return value

    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidValueError(
            f"Invalid value {value!r} for {attribute}. Valid values are {allowed}",
            attribute=attribute,
            value=value,
        ) from None


def parse_tristate(value, attribute: str) -> Tristate:
    """Same as `parse_enum`, but also accepting python bool values."""
    if isinstance(value, bool):
        return Tristate.true if value else Tristate.false

    return parse_enum(Tristate, value, attribute)
