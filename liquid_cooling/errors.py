"""
Errors raised at the configuration boundary of the calculator.

Malformed numbers are never errors (the normalizer substitutes fallbacks);
an unknown lookup key is, since it points to a caller or config bug.

Author: HVAC Team
Date: 2025-11-24
"""


class ConfigurationError(ValueError):
    """Unknown key for one of the reference tables (coolant, W-class, redundancy)."""

    def __init__(self, table, key, accepted=()):
        self.table = table
        self.key = key
        self.accepted = tuple(accepted)
        message = f"Unknown {table} '{key}'"
        if self.accepted:
            message += f", must be one of: {', '.join(self.accepted)}"
        super().__init__(message)
