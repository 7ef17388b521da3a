"""
Base Validator

Abstract base class for all field validators.
"""

import logging
from abc import ABC, abstractmethod

from formfields.config import settings

logger = logging.getLogger(__name__)


class BaseValidator(ABC):
    """
    Abstract base class for field validators.

    All validators must implement the validate() method, which returns True
    when the value satisfies the field's format rule. Validators are
    stateless and never raise for any input; anything that is not a string
    is simply invalid.
    """

    name = "base"

    @abstractmethod
    def validate(self, value) -> bool:
        """
        Validate a field value.

        Args:
            value: The value to validate

        Returns:
            True if the value satisfies the rule, False otherwise.
        """
        pass

    def __call__(self, value) -> bool:
        is_valid = self.validate(value)
        if settings.VERBOSE:
            length = len(value) if isinstance(value, str) else None
            logger.info(
                f"VALIDATE | {self.name}: {'accepted' if is_valid else 'rejected'} (length={length})"
            )
        return is_valid

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
