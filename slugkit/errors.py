# slugkit/errors.py


class SlugError(Exception):
    """Base class for slug generation failures."""


class InvalidSeparatorError(SlugError, ValueError):
    pass


class InvalidIdentifierError(SlugError, ValueError):
    pass


class ExhaustedUniquenessAttemptsError(SlugError):
    def __init__(self, base: str, attempts: int):
        super().__init__(f"no free slug for '{base}' after {attempts} attempts")
        self.base = base
        self.attempts = attempts
