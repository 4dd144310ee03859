class InputError(ValueError):
    """Raised for blank names/slots or malformed rows coming from the caller."""


class ScheduleContractError(RuntimeError):
    """A successful result was paired with an incomplete assignment map.

    This is a programming error: the solver only reports success once every
    exam holds a teacher.
    """
