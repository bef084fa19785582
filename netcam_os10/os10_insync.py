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

from typing import Any, Callable

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_types import Tristate

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    "InsyncPredicate",
    "insync_exact",
    "insync_with_default",
]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------

# (is_value, should) -> in-sync
InsyncPredicate = Callable[[Any, Any], bool]


def insync_exact(is_value, should) -> bool:
    """plain equality; ordered sequences must match position for position"""
    return is_value == should


def insync_with_default(is_value, should, default: Tristate) -> bool:
    """
    Compare the observed and desired value of a tri-state property where an
    absent value on either side means "the protocol default".  This allows the
    User to omit a property, or the device to not report it, without forcing a
    change when the effective behavior already matches the default.

    Parameters
    ----------
    is_value:
        The observed value from the device.

    should:
        The desired value from the resource declaration.

    default: Tristate
        The protocol default, either Tristate.true or Tristate.false.

    Returns
    -------
    True when the two values are equivalent, False otherwise.
    """
    if is_value == should:
        return True

    if is_value == Tristate.absent:
        return should == default

    if should == Tristate.absent:
        return is_value == default

    return False
