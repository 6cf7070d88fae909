"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Raised for inputs the lending engine cannot price, such as a negative
    contribution or a zero-month loan. Ineligibility (an active loan, too
    little savings) is an ordinary result and is never raised.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}
