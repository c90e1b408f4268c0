from typing import Sequence


class MissingFieldsError(ValueError):
    def __init__(self, required: Sequence[str], missing: Sequence[str]):
        self.required = list(required)
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.required)}")


class InvalidFieldError(ValueError):
    pass


class DuplicateUserError(ValueError):
    pass


class DuplicateFeedbackError(ValueError):
    pass


class NotFoundError(ValueError):
    pass


class DataAccessError(Exception):
    """A persistence-layer failure, already prefixed with what was being done."""
