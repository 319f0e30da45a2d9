"""
Application-level errors.

Infrastructure errors are raised where they happen and travel unchanged
through use cases until a controller maps them to a response.
"""


class PersistenceError(Exception):
    """Document store could not complete the operation"""


class DuplicateKeyError(PersistenceError):
    """Insert collided with a unique field of the collection"""

    def __init__(self, collection: str, field: str):
        self.collection = collection
        self.field = field
        super().__init__(f"Duplicate value for unique field '{field}' in '{collection}'")


class SigningError(Exception):
    """Access token could not be signed"""


class VerificationError(Exception):
    """Access token is malformed, tampered with, expired or signed with another secret"""


class InvalidCredentialsError(Exception):
    """Unknown email or wrong password; the two cases are never told apart"""

    def __init__(self):
        super().__init__("Invalid email or password")
