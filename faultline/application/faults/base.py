"""Shared behaviour for concrete fault kinds."""

from __future__ import annotations

from faultline.application.ports.fault import Fault
from faultline.application.services.base import LoggingMixin
from faultline.domain.models.fault_spec import FaultSpec


class BaseFault(LoggingMixin, Fault):
    """Holds the id and spec, and gives faults value semantics.

    Subclasses extend _identity() with whatever else they derive from
    the spec.
    """

    def __init__(self, fault_id: str, spec: FaultSpec) -> None:
        self._id = fault_id
        self._spec = spec
        self._init_logger()

    @property
    def id(self) -> str:
        return self._id

    @property
    def spec(self) -> FaultSpec:
        return self._spec

    def _identity(self) -> tuple[object, ...]:
        return (self._id, self._spec)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BaseFault) or type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())
