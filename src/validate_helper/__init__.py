"""validate-helper: guard clauses for function preconditions.

Import the guards as a module so call sites read like the check they make::

    from validate_helper import validate

    validate.not_null(order, "order")
    validate.positive(order.quantity, "order", "quantity")
"""

from validate_helper import validate
from validate_helper.errors import ArgumentViolation, NullViolation, parameter_path
from validate_helper.validate import DEFAULT_MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "ArgumentViolation",
    "NullViolation",
    "__version__",
    "parameter_path",
    "validate",
]
