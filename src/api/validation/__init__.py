"""
Request Validation

Single-rule validations composed into ordered chains.
"""

from .protocols import EmailValidator, Validation
from .required_field_validation import RequiredFieldValidation
from .email_validation import EmailValidation
from .compare_fields_validation import CompareFieldsValidation
from .validation_composite import ValidationComposite
from .email_validator_adapter import EmailValidatorAdapter


def make_signup_validation(email_validator: EmailValidator) -> ValidationComposite:
    validations = [
        RequiredFieldValidation(field)
        for field in ("name", "email", "password", "passwordConfirmation")
    ]
    validations.append(EmailValidation("email", email_validator))
    validations.append(CompareFieldsValidation("password", "passwordConfirmation"))
    return ValidationComposite(validations)


def make_login_validation(email_validator: EmailValidator) -> ValidationComposite:
    validations = [RequiredFieldValidation(field) for field in ("email", "password")]
    validations.append(EmailValidation("email", email_validator))
    return ValidationComposite(validations)


__all__ = [
    "Validation",
    "EmailValidator",
    "RequiredFieldValidation",
    "EmailValidation",
    "CompareFieldsValidation",
    "ValidationComposite",
    "EmailValidatorAdapter",
    "make_signup_validation",
    "make_login_validation",
]
