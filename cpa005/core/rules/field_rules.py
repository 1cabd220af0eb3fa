"""
Field contract table and the rule engine that applies it.

Every CPA-005 field the converter writes is listed here with the validators
its value must pass. Builders ask FieldRules to check a value and record the
first failure in their ErrorLog instead of raising.
"""

from typing import Any

from cpa005.core.error_log import ErrorLog
from cpa005.core.validators import (
    BaseValidator,
    DigitsValidator,
    LengthValidator,
    RangeValidator,
    ValidationError,
)
from cpa005.observability.metrics import validation_failures_total


def _contract(label: str, *rules: tuple[type[BaseValidator], dict[str, Any]]) -> list[BaseValidator]:
    return [validator_class(label, parameters) for validator_class, parameters in rules]


FIELD_CONTRACTS: dict[str, list[BaseValidator]] = {
    "transaction_code": _contract(
        "Transaction Code",
        (LengthValidator, {"exact": 3}),
    ),
    "amount": _contract(
        "Amount",
        (RangeValidator, {"min": 0, "max_digits": 10}),
    ),
    "payment_day": _contract(
        "Payment Date day number",
        (RangeValidator, {"min": 1, "max": 366}),
    ),
    "financial_institution_number": _contract(
        "Financial Institution Number",
        (LengthValidator, {"max": 4}),
    ),
    "branch_number": _contract(
        "Branch Number",
        (DigitsValidator, {"allow_empty": False}),
        (LengthValidator, {"max": 5}),
    ),
    "account_number": _contract(
        "Account Number",
        (DigitsValidator, {}),
        (LengthValidator, {"max": 12}),
    ),
    "client_short_name": _contract(
        "Client Short Name",
        (LengthValidator, {"max": 15}),
    ),
    "customer_name": _contract(
        "Customer Name",
        (LengthValidator, {"max": 30}),
    ),
    "client_name": _contract(
        "Client Name",
        (LengthValidator, {"max": 30}),
    ),
    "client_number": _contract(
        "Client Number",
        (LengthValidator, {"exact": 10}),
        (DigitsValidator, {}),
    ),
    "customer_number": _contract(
        "Customer Number",
        (LengthValidator, {"max": 19}),
    ),
    "sundry_information": _contract(
        "Client Sundry Information",
        (LengthValidator, {"max": 15}),
    ),
    "file_creation_number": _contract(
        "File Creation Number",
        (RangeValidator, {"min": 0, "max_digits": 4}),
    ),
    "file_creation_year": _contract(
        "File Creation Date year",
        (RangeValidator, {"min": 0, "max_digits": 4}),
    ),
    "file_creation_day": _contract(
        "File Creation Date day number",
        (RangeValidator, {"min": 1, "max": 366}),
    ),
}


class FieldRules:
    """
    Applies field contracts to single values.

    Validators for a field run in order and stop at the first failure, so
    each bad field produces exactly one message.
    """

    def __init__(self, contracts: dict[str, list[BaseValidator]] | None = None):
        """
        Initialize the rule engine.

        Args:
            contracts: Field name to validator list; defaults to FIELD_CONTRACTS
        """
        self.contracts = contracts if contracts is not None else FIELD_CONTRACTS

    def check(self, field_name: str, value: Any) -> ValidationError | None:
        """
        Return the first contract violation for ``value``, or None.

        Raises:
            KeyError: If no contract is registered for ``field_name``
        """
        for validator in self.contracts[field_name]:
            try:
                validator.validate(value)
            except ValidationError as e:
                return e
        return None

    def validate(self, field_name: str, value: Any, error_log: ErrorLog) -> bool:
        """
        Check ``value`` and write any violation to ``error_log``.

        Returns:
            True when the value satisfies the contract
        """
        error = self.check(field_name, value)
        if error is None:
            return True

        validation_failures_total.labels(field_name=field_name, rule_type=error.rule_name).inc()
        error_log.write(error.message)
        return False

    def get_rule_summary(self) -> dict[str, list[str]]:
        """Field name to the rule types guarding it."""
        return {
            field_name: [validator.rule_type for validator in validators]
            for field_name, validators in self.contracts.items()
        }
