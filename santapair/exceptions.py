"""
Errors raised by the participant store.

Views catch these and report them to the user with ``flash``.
"""


class SantaPairError(Exception):
    """Base class for application errors."""
    pass


class ParticipantNotFound(SantaPairError):
    def __init__(self, participant_id):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} not found")


class InvalidParticipantName(SantaPairError):
    """Name is empty or too long."""
    pass


class ConfigurationError(SantaPairError):
    """A setting read by ``create_app`` has a value it cannot use."""

    def __init__(self, setting, value):
        self.setting = setting
        self.value = value
        super().__init__(f"Invalid value for {setting}: {value!r}")
