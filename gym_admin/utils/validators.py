# =======================================================================================
# gym_admin/utils/validators.py - Validation Helpers
# =======================================================================================

import math
from typing import Optional
from .exceptions import InputValidationError
from ..models.enums import PAYMENT_METHODS, ACCESS_TYPES, PaymentMethod, AccessType


class InputValidator:
    """Checks user input before anything is sent to the backend."""

    @staticmethod
    def validate_credentials(email: str, password: str) -> None:
        if not (email or "").strip() or not password:
            raise InputValidationError("Email and password are required")

    @staticmethod
    def validate_payment_amount(amount) -> float:
        """Amount must be a finite number greater than zero."""
        try:
            value = float(amount)
        except (TypeError, ValueError):
            raise InputValidationError("Invalid amount")

        if math.isnan(value) or math.isinf(value) or value <= 0:
            raise InputValidationError("Invalid amount")
        return value

    @staticmethod
    def validate_payment_method(method: Optional[str]) -> PaymentMethod:
        normalized = (method or "").strip().upper()
        if normalized not in PAYMENT_METHODS:
            raise InputValidationError(
                f"Invalid payment method, expected one of {', '.join(PAYMENT_METHODS)}"
            )
        return normalized

    @staticmethod
    def validate_access_type(access_type: Optional[str]) -> AccessType:
        normalized = (access_type or "").strip().upper()
        if normalized not in ACCESS_TYPES:
            raise InputValidationError("Access type must be ENTRY or EXIT")
        return normalized

    @staticmethod
    def validate_plan_selection(plan_id: Optional[int]) -> int:
        if plan_id is None:
            raise InputValidationError("Select a membership plan")
        return plan_id

    @staticmethod
    def validate_new_plan(name: str, duration_days: int, price: float) -> None:
        """
        A catalog entry needs a name, a positive duration and a price that
        is not negative.
        """
        if not (name or "").strip():
            raise InputValidationError("Plan name is required")
        if duration_days is None or duration_days <= 0:
            raise InputValidationError("Duration must be at least one day")
        if price is None or price < 0:
            raise InputValidationError("Price cannot be negative")

    @staticmethod
    def validate_gym_name(name: Optional[str]) -> None:
        if not (name or "").strip():
            raise InputValidationError("Gym name is required")

    @staticmethod
    def validate_new_member(name: str) -> None:
        if not (name or "").strip():
            raise InputValidationError("Name is required")

    @staticmethod
    def clean_reference(reference: Optional[str]) -> Optional[str]:
        """Blank references are sent as absent."""
        if reference is None:
            return None
        reference = reference.strip()
        return reference or None
