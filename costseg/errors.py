"""Configuration errors raised by the engine.

Degenerate-but-valid inputs (zero basis, empty cash flows, 0% rates) never
raise; they return empty or None results instead.
"""


class CostSegError(Exception):
    """Base class for engine errors."""


class InvalidRecoveryPeriodError(CostSegError, ValueError):
    def __init__(self, period, valid_periods):
        self.period = period
        self.valid_periods = tuple(valid_periods)
        super().__init__(
            f"Invalid MACRS recovery period: {period}. "
            f"Valid periods are: {', '.join(str(p) for p in self.valid_periods)}"
        )


class UnknownPropertyTypeError(CostSegError, ValueError):
    def __init__(self, property_type, valid_types):
        self.property_type = property_type
        self.valid_types = tuple(valid_types)
        super().__init__(
            f'Unknown property type: "{property_type}". '
            f"Valid types are: {', '.join(self.valid_types)}"
        )
