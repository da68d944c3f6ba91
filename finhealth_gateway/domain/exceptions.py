"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class IncompleteProfileError(DomainException):
    """Profile is missing one or more required sections"""

    def __init__(self, missing_sections: list[str]):
        self.missing_sections = missing_sections
        super().__init__(f"Missing profile sections: {', '.join(missing_sections)}")


class InvalidProfileDataError(DomainException):
    """Profile contains a malformed amount (negative, NaN or infinite)"""

    pass


class NarrativeServiceError(DomainException):
    """Narrative generation service returned an error or is unavailable"""

    pass
