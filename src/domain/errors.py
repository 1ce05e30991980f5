"""
Domain Errors

Raised by repository adapters so the application layer never has to
know about driver-specific exceptions.
"""


class DomainError(Exception):
    pass


class EmailAlreadyRegisteredError(DomainError):
    """The store's unique constraint on email rejected an insert"""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered")
