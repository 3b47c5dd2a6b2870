"""Base categorizer protocol defining the contract for all categorizers."""

from typing import Any, Protocol


class Categorizer(Protocol):
    """Protocol defining the categorizer contract.

    Categorizers are pure functions of one raw value. They map values in
    whatever unit a signal is measured (counts, durations, booleans,
    checklists) onto the same 1-5 level scale. Implementations keep no
    state between calls.
    """

    def evaluate(self, value: Any) -> int | None:
        """Categorize a raw value.

        Args:
            value: Raw signal value as supplied by data collection

        Returns:
            Level between 1-5, or None if the value could not be evaluated
        """
        ...
