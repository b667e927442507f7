class GymCRMError(Exception):
    """Base class for all back-office domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except GymCRMError`` clause can catch any domain error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class FollowUpNotFoundError(GymCRMError):
    """Raised when a follow-up does not exist in the caller's organization."""

    def __init__(self, detail: str = "Follow-up not found"):
        super().__init__(detail)


class InvalidFilterError(GymCRMError):
    """Raised when a taskboard filter value cannot be interpreted.

    Never reaches the client: the parsing helpers catch it and fall back
    to the default for that filter.
    """

    def __init__(self, detail: str = "Invalid filter value"):
        super().__init__(detail)


class UpstreamLookupError(GymCRMError):
    """Raised when a referenced member, enquiry or staff record is missing.

    Recovered locally by rendering the affected field as ``"N/A"``.
    """

    def __init__(self, detail: str = "Referenced record not found"):
        super().__init__(detail)
