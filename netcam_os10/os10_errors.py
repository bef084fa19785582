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

from typing import Any, Optional

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = [
    "Os10ResourceError",
    "InvalidValueError",
    "ConstraintViolationError",
    "DuplicateResourceError",
]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------


class Os10ResourceError(ValueError):
    """
    Base class for all errors raised while building an OS10 resource from the
    User declared values.  These errors are subclasses of ValueError so that
    they can be raised from within pydantic validators; the resource
    `from_params` constructor unwraps them from the pydantic ValidationError
    so that the Caller receives the original error.

    Attributes
    ----------
    attribute: str, optional
        The name of the resource attribute that failed validation.

    value:
        The offending value, as provided by the Caller.
    """

    def __init__(
        self, message: str, attribute: Optional[str] = None, value: Any = None
    ):
        super().__init__(message)
        self.attribute = attribute
        self.value = value


class InvalidValueError(Os10ResourceError):
    """value fails a format or enumeration check"""


class ConstraintViolationError(Os10ResourceError):
    """value is well-formed but breaks a size or count constraint"""


class DuplicateResourceError(Os10ResourceError):
    """the same resource type and name is declared more than once"""
