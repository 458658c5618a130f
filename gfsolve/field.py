"""Implementation of elements of a finite field of integers modulo m."""

import warnings
from numbers import Integral

from sympy import isprime


class ModulusMismatchError(ValueError):
    """Raised when two field elements with different moduli are combined."""


class InvalidModulusError(ValueError):
    """Raised when a field is constructed with a negative modulus."""


class NoInverseError(ArithmeticError):
    """Raised when an element has no multiplicative inverse for its modulus."""


class NonPrimeModulusWarning(UserWarning):
    pass


def check_modulus(modulus: int) -> None:
    """Warn if modulus is not prime, in which case division may fail."""
    if not isprime(modulus):
        warnings.warn(
            f"Modulus {modulus} is not prime, some elements have no inverse.",
            NonPrimeModulusWarning,
            stacklevel=3,
        )


class FieldElement:
    """An element of the integers modulo m.

    Parameters
    ----------
    value : int
        Any integer, reduced to the canonical range [0, modulus).
    modulus : int
        The modulus m >= 0, ideally prime.
    """

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: int, modulus: int):
        if not isinstance(value, Integral):
            raise TypeError("value must be an integer")
        if not isinstance(modulus, Integral):
            raise TypeError("modulus must be an integer")
        if modulus < 0:
            raise InvalidModulusError("modulus must be non-negative")
        # Python's % takes the sign of the divisor, so the result is never negative
        self._value = int(value) % int(modulus)
        self._modulus = int(modulus)

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    def __str__(self):
        """String representation of FieldElement, the canonical value only."""
        return str(self._value)

    def __repr__(self):
        """Canonical string representation of FieldElement."""
        return f"FieldElement({self._value}, {self._modulus})"

    def __eq__(self, other):
        """Check equality of value and modulus."""
        if isinstance(other, FieldElement):
            return self._value == other._value and self._modulus == other._modulus
        return NotImplemented

    def __hash__(self):
        return hash((self._value, self._modulus))

    def __int__(self):
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def _coerce(self, other):
        """Promote an integer into this field and check moduli agree."""
        if isinstance(other, Integral):
            return FieldElement(other, self._modulus)
        if not isinstance(other, FieldElement):
            raise TypeError("other must be a FieldElement or an integer")
        if other._modulus != self._modulus:
            raise ModulusMismatchError(
                f"Elements must share a modulus, got {self._modulus} and {other._modulus}"
            )
        return other

    def add(self, other):
        """Add two elements of the same field."""
        other = self._coerce(other)
        return FieldElement(self._value + other._value, self._modulus)

    def sub(self, other):
        """Subtract two elements of the same field."""
        other = self._coerce(other)
        return FieldElement(self._value - other._value, self._modulus)

    def mul(self, other):
        """Multiply two elements of the same field."""
        other = self._coerce(other)
        return FieldElement(self._value * other._value, self._modulus)

    def div(self, other):
        """Divide two elements of the same field, i.e. multiply by the inverse of other."""
        other = self._coerce(other)
        if other._value == 0:
            raise ZeroDivisionError("division by the zero element")
        return self.mul(other.multiplicative_inverse())

    def multiplicative_inverse(self):
        """Find the inverse of the element, using brute force method.

        The search is ascending over [0, modulus), so the smallest representative is returned.

        Raises
        ------
        NoInverseError
            If value and modulus are not coprime, e.g. zero or a zero divisor of a composite modulus.
        """
        for i in range(self._modulus):
            if (self._value * i) % self._modulus == 1:
                return FieldElement(i, self._modulus)
        raise NoInverseError(
            f"{self._value} has no inverse modulo {self._modulus}"
        )

    def __add__(self, other):
        if isinstance(other, (FieldElement, Integral)):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Integral):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (FieldElement, Integral)):
            return self.sub(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Integral):
            return FieldElement(other, self._modulus).sub(self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (FieldElement, Integral)):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Integral):
            return self.mul(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (FieldElement, Integral)):
            return self.div(other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Integral):
            return FieldElement(other, self._modulus).div(self)
        return NotImplemented

    def __neg__(self):
        """Additive inverse of the element."""
        return FieldElement(-self._value, self._modulus)

    def __pow__(self, power):
        """Raise the element to an integer power, negative powers invert first."""
        if not isinstance(power, Integral):
            raise TypeError("power must be an Integral instance")
        if power < 0:
            return self.multiplicative_inverse() ** (-power)
        return FieldElement(pow(self._value, int(power), self._modulus), self._modulus)


class Field:
    """A finite field of order p, used as a factory for its elements."""

    def __init__(self, p: int):
        """Initialise a finite field of order p."""

        if not isinstance(p, Integral):
            raise TypeError("p must be an integer")
        if p < 0:
            raise InvalidModulusError("p must be non-negative")
        check_modulus(p)

        self.p = int(p)

    def __repr__(self):
        """Canonical string representation of Field."""
        return f"Field({self.p})"

    def __eq__(self, other):
        """Check if two Field instances are equal."""
        if isinstance(other, Field):
            return self.p == other.p
        return False

    def __hash__(self):
        return hash(self.p)

    def element(self, value: int) -> FieldElement:
        return FieldElement(value, self.p)

    def zero(self) -> FieldElement:
        return FieldElement(0, self.p)

    def one(self) -> FieldElement:
        return FieldElement(1, self.p)

    def elements(self):
        """Yield every element of the field in ascending order."""
        for i in range(self.p):
            yield FieldElement(i, self.p)
