"""
Root of the attribute formatter exceptions.
"""


class StoreException(Exception):
    """
    Raised for malformed attribute data and missing store resources.

    Attributes:
        message: Text shown to the caller (run.py prints it to stderr)
        details: Ids and keys involved, included in the logged repr
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        # run.py logs failures with {e!r}
        context = "".join(f", {key}={value!r}" for key, value in self.details.items())
        return f"{type(self).__name__}({self.message!r}{context})"
