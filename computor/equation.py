"""Polynomial equation held as terms sorted by power."""

import bisect
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Component:
    """One term: coefficient * X^power."""

    power: int
    coefficient: float


@dataclass
class Equation:
    """Terms of a reduced equation, sorted by ascending power, one per power."""

    components: list = field(default_factory=list)

    def add(self, component):
        """Add a term, merging it with an existing term of the same power."""
        for index, existing in enumerate(self.components):
            if existing.power == component.power:
                self.components[index] = replace(
                    existing, coefficient=existing.coefficient + component.coefficient
                )
                return
        position = bisect.bisect_right(
            [existing.power for existing in self.components], component.power
        )
        self.components.insert(position, component)

    def reduced_form(self):
        """Return the 'Reduced form: ... = 0' line, or '' when there are no terms."""
        if not self.components:
            return ""
        terms = "".join(
            "%s%.6g * X^%d " % ("+" if c.coefficient > 0 else "", c.coefficient, c.power)
            for c in self.components
        )
        return f"Reduced form: {terms}= 0"

    def coefficients(self):
        """Return the coefficients of X^0, X^1 and X^2."""
        values = [0.0, 0.0, 0.0]
        for component in self.components:
            if 0 <= component.power < 3:
                values[component.power] = component.coefficient
        return tuple(values)

    def degree(self):
        """Return the highest power with a non-zero coefficient, or 0."""
        return max((c.power for c in self.components if c.coefficient), default=0)