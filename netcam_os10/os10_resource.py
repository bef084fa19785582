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

# =============================================================================
# This file contains the base class for the OS10 declarative resource types.
# A resource type declares its parameters (identity values that are never
# compared) and its properties (values that are compared between the desired
# and the observed device state).  Each declared attribute has a parser that
# is used to validate and normalize the User value, and each property has an
# in-sync predicate that is used by the host engine comparison.
# =============================================================================

# -----------------------------------------------------------------------------
# System Imports
# -----------------------------------------------------------------------------

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Mapping, NamedTuple, Optional

# -----------------------------------------------------------------------------
# Public Imports
# -----------------------------------------------------------------------------

from pydantic import BaseModel, ValidationError, model_validator

# -----------------------------------------------------------------------------
# Private Imports
# -----------------------------------------------------------------------------

from netcam_os10.os10_errors import Os10ResourceError, InvalidValueError
from netcam_os10.os10_insync import InsyncPredicate, insync_exact
from netcam_os10.os10_types import Ensure, parse_enum

# -----------------------------------------------------------------------------
# Exports
# -----------------------------------------------------------------------------

__all__ = ["Os10Resource", "Os10Property", "PropertyChange", "ValueParser"]

# -----------------------------------------------------------------------------
#
#                                 CODE BEGINS
#
# -----------------------------------------------------------------------------

# (raw_value, attribute_name) -> normalized value
ValueParser = Callable[[Any, str], Any]


@dataclass(frozen=True)
class Os10Property:
    """
    Declares one comparable attribute of a resource type.

    Attributes
    ----------
    parser: ValueParser
        Validates and normalizes the raw value, used for both the desired and
        the observed values.

    insync: InsyncPredicate
        Returns True when the observed value satisfies the desired value.

    absent:
        The normalized value used when the device does not report the
        property.
    """

    parser: ValueParser
    insync: InsyncPredicate = insync_exact
    absent: Any = None


class PropertyChange(NamedTuple):
    """one out-of-sync property found during comparison"""

    name: str
    is_value: Any
    should: Any


def _parse_ensure(value, attribute: str) -> Ensure:
    return parse_enum(Ensure, value, attribute)


class Os10Resource(BaseModel, extra="forbid", frozen=True):
    """
    Base class for the OS10 resource types.  Subclasses declare their pydantic
    fields and two class-level tables:

        `parameters` - mapping of parameter name to its value parser
        `properties` - mapping of property name to its Os10Property

    Instances are immutable once constructed; a new instance is created from
    the declared values for each convergence run.
    """

    resource_type: ClassVar[str] = "os10_resource"

    parameters: ClassVar[Mapping[str, ValueParser]] = MappingProxyType({})

    properties: ClassVar[Mapping[str, Os10Property]] = MappingProxyType(
        {"ensure": Os10Property(parser=_parse_ensure, absent=Ensure.absent)}
    )

    name: str
    ensure: Ensure = Ensure.present

    # -------------------------------------------------------------------------
    #
    #                              Construction
    #
    # -------------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def _parse_declared_values(cls, data: Any) -> Any:
        """run the declared parser for each User provided attribute value"""

        if not isinstance(data, Mapping):
            return data

        parsed = dict(data)

        for attr, value in data.items():
            if value is None:
                continue

            if parser := cls.parameters.get(attr):
                parsed[attr] = parser(value, attr)

            elif prop := cls.properties.get(attr):
                parsed[attr] = prop.parser(value, attr)

        return parsed

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "Os10Resource":
        """
        Create the resource instance from the mapping of attribute name to raw
        value as declared by the User.

        Parameters
        ----------
        params: Mapping
            The attribute values, including the resource `name`.

        Returns
        -------
        The validated resource instance.

        Raises
        ------
        Os10ResourceError
            The first validation error found in the declared values.
        """
        try:
            resource = cls.model_validate(dict(params))

        except ValidationError as exc:
            raise cls._resource_error(exc) from None

        logging.getLogger(cls.__name__).debug(
            "%s[%s]: constructed", cls.resource_type, resource.name
        )
        return resource

    @classmethod
    def _resource_error(cls, exc: ValidationError) -> Os10ResourceError:
        """
        Unwrap the pydantic validation error.  When a declared parser raised the
        error, return that original error.  Otherwise the error was detected by
        pydantic itself (unknown attribute, missing name, wrong type) and it is
        converted into an InvalidValueError.
        """
        errors = exc.errors()

        for err in errors:
            if isinstance(orig := err.get("ctx", {}).get("error"), Os10ResourceError):
                return orig

        err = errors[0]
        attribute = ".".join(str(loc) for loc in err["loc"]) or None
        value = err.get("input")

        if err["type"] == "extra_forbidden":
            message = f"Unknown attribute {attribute} for {cls.resource_type}"

        elif err["type"] == "missing":
            message = f"Missing required attribute {attribute} for {cls.resource_type}"

        else:
            message = f"Invalid value {value!r} for {attribute}: {err['msg']}"

        return InvalidValueError(message, attribute=attribute, value=value)

    # -------------------------------------------------------------------------
    #
    #                              Comparison
    #
    # -------------------------------------------------------------------------

    @classmethod
    def property_insync(cls, prop_name: str, is_value, should) -> bool:
        """
        Returns True when the observed value of the property satisfies the
        desired value, using the predicate declared for that property.  Both
        values are normalized with the property parser before the compare, so
        that for example a tuple observed value matches a list desired value.

        Parameters
        ----------
        prop_name: str
            The property name.

        is_value:
            The observed value; None denotes the device does not report it.

        should:
            The desired value.

        Raises
        ------
        InvalidValueError
            When the property is not declared by this resource type.
        """
        if prop_name not in cls.properties:
            raise InvalidValueError(
                f"Unknown property {prop_name} for {cls.resource_type}",
                attribute=prop_name,
            )

        is_value = cls.observed_value(prop_name, is_value)

        if should is not None:
            should = cls._normalize(prop_name, should)

        return cls.properties[prop_name].insync(is_value, should)

    @classmethod
    def observed_value(cls, prop_name: str, raw_value):
        """normalize a value reported by the device for comparison"""

        if raw_value is None:
            return cls.properties[prop_name].absent

        return cls._normalize(prop_name, raw_value)

    @classmethod
    def _normalize(cls, prop_name: str, raw_value):
        """
        Run the property parser on a value used for comparison.  A value that
        the parser rejects is returned as-is; it can never match a validated
        desired value, and so the property is reported out of sync rather than
        failing the comparison.
        """
        try:
            return cls.properties[prop_name].parser(raw_value, prop_name)

        except Os10ResourceError as exc:
            logging.getLogger(cls.__name__).debug(
                "%s: comparing unparsed value %r: %s", prop_name, raw_value, exc
            )
            return raw_value

    def managed_properties(self):
        """the properties, other than ensure, declared by the User"""

        return [
            prop_name
            for prop_name in self.properties
            if prop_name != "ensure" and getattr(self, prop_name) is not None
        ]

    def changes(
        self, observed: Optional[Mapping[str, Any]]
    ) -> Dict[str, PropertyChange]:
        """
        Compare the desired state of this resource with the observed device
        state.

        Parameters
        ----------
        observed: Mapping, optional
            The attribute values reported by the device.  None, or an empty
            mapping, denotes that the resource does not exist on the device.

        Returns
        -------
        The out-of-sync properties, keyed by property name.  An empty dict
        denotes the resource is in sync.
        """
        log = logging.getLogger(f"{self.resource_type}[{self.name}]")
        observed = observed or {}

        is_ensure = self.observed_value(
            "ensure", observed.get("ensure", Ensure.present if observed else None)
        )

        # when the ensure values differ, none of the other properties are
        # compared; the resource is either created or removed as a whole.

        if not self.property_insync("ensure", is_ensure, self.ensure):
            log.info("ensure: is %r, should be %r", is_ensure, self.ensure)
            return {"ensure": PropertyChange("ensure", is_ensure, self.ensure)}

        if self.ensure == Ensure.absent:
            return {}

        changed = dict()

        for prop_name in self.managed_properties():
            should = getattr(self, prop_name)
            is_value = self.observed_value(prop_name, observed.get(prop_name))

            if self.property_insync(prop_name, is_value, should):
                continue

            log.info("%s: is %r, should be %r", prop_name, is_value, should)
            changed[prop_name] = PropertyChange(prop_name, is_value, should)

        return changed

    def insync(self, observed: Optional[Mapping[str, Any]]) -> bool:
        """Returns True when the observed state requires no change"""
        return not self.changes(observed)
