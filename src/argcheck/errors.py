"""Errors raised for misuse of the check API.

Validation failures are never reported through these types. They are
produced by the error factory the caller hands to :class:`~argcheck.check.Check`.
"""


class InvalidCheckError(Exception):
    """A check was wired or invoked incorrectly.

    Raised for programming errors only: a test applied to a subject it
    cannot handle, a missing custom message, or an inconsistent formatter
    registry.
    """

    @classmethod
    def not_applicable(cls, test_name: str, subject: object) -> "InvalidCheckError":
        return cls(f"Test {test_name} not applicable to {type(subject).__name__}")
