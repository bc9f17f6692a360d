"""
Errors and diagnostics raised by the reflectance models.

Fatal conditions are exceptions and abort the call before any model is
evaluated. Non-fatal conditions (inputs outside the fitted domain of a model,
or assumptions imposed on the inputs) are warnings: they are emitted through
the :mod:`warnings` machinery and, optionally, returned to the caller as
:class:`Diagnostic` records so they can be inspected programmatically.
"""

import warnings
from dataclasses import dataclass, field
from typing import List, Tuple, Type


class ReflectanceInputError(ValueError):
    """Base class for invalid inputs to the reflectance models."""


class MissingArgumentError(ReflectanceInputError):
    """A coefficient required by the requested configuration is missing."""


class OutOfRangeError(ReflectanceInputError):
    """A supplied value lies outside its physical range."""


class InvalidArgumentError(ReflectanceInputError):
    """An unrecognized model or reflectance token was supplied."""


class ReflectanceWarning(UserWarning):
    """Base class for non-fatal diagnostics of the reflectance models."""


class DomainExtrapolationWarning(ReflectanceWarning):
    """Inputs lie outside the domain used to fit the parametrization."""


class AssumptionOverrideWarning(ReflectanceWarning):
    """An input was overridden or ignored by a model assumption."""


@dataclass(frozen=True)
class Diagnostic:
    """
    A single non-fatal notice.

    Attributes
    ----------
    category : type
        Warning class, a subclass of :class:`ReflectanceWarning`.
    message : str
        Human readable description.
    """

    category: Type[ReflectanceWarning]
    message: str

    @property
    def is_extrapolation(self) -> bool:
        """True if the notice reports extrapolation beyond model domain."""
        return issubclass(self.category, DomainExtrapolationWarning)


@dataclass
class DiagnosticLog:
    """
    Ordered accumulation of the diagnostics of one call.

    Each recorded notice is also emitted with :func:`warnings.warn`.

    Parameters
    ----------
    stacklevel : int, optional
        Stack level handed to :func:`warnings.warn`, so the warning points
        at the caller of the public function. Default is 3, the caller
        of :meth:`extrapolation` or :meth:`override`.
    """

    stacklevel: int = 3
    records: List[Diagnostic] = field(default_factory=list)

    def add(self, category: Type[ReflectanceWarning], message: str) -> Diagnostic:
        diagnostic = Diagnostic(category=category, message=message)
        self.records.append(diagnostic)
        warnings.warn(message, category, stacklevel=self.stacklevel)
        return diagnostic

    def extrapolation(self, message: str) -> Diagnostic:
        return self.add(DomainExtrapolationWarning, message)

    def override(self, message: str) -> Diagnostic:
        return self.add(AssumptionOverrideWarning, message)

    def as_tuple(self) -> Tuple[Diagnostic, ...]:
        return tuple(self.records)

    def __len__(self) -> int:
        return len(self.records)
