"""Errors raised by the type-selection wizard."""


class WizardError(ValueError):
    """Base class for all wizard failures."""


class InvalidTransition(WizardError):
    """Event is not accepted at the current step, or the choice is not offered."""


class EncodeError(WizardError):
    """Selection cannot be turned into a type identifier."""


class IncompleteSelection(EncodeError):
    """A required field of the chosen path is still unset."""


class InvalidCombination(EncodeError):
    """The question/answer modality pair is forbidden by the catalog."""


class DecodeError(WizardError):
    """A type identifier cannot be turned back into wizard state."""

    reason = "decode_error"

    def __init__(self, type_id: str, message: str) -> None:
        super().__init__(message)
        self.type_id = type_id


class MalformedTypeId(DecodeError):
    reason = "malformed"


class UnknownType(DecodeError):
    reason = "unknown_type"


class StaleCombination(DecodeError):
    """Identifier is well formed but no longer allowed by the catalog."""

    reason = "stale_combination"
