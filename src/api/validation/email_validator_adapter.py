from email_validator import EmailNotValidError, validate_email

from .protocols import EmailValidator


class EmailValidatorAdapter(EmailValidator):
    """Syntax-only email check backed by the email-validator package"""

    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
