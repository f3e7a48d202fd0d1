# slugkit/services/unique_slug_service.py
import logging
import secrets
from typing import Any, Iterator, Optional

from ..config import SlugSettings
from ..errors import ExhaustedUniquenessAttemptsError
from ..models import ExistenceCheck
from .slug_service import SlugService

logger = logging.getLogger(__name__)


class UniqueSlugService:
    """
    Appends -1, -2, ... to the base slug until the store reports the candidate free.

    The check and the caller's later insert are not atomic: two concurrent
    callers can both receive the same candidate. Keep a unique constraint on
    the slug column; this only keeps collisions rare.
    """

    def __init__(
        self,
        repo: ExistenceCheck,
        slugs: Optional[SlugService] = None,
        settings: Optional[SlugSettings] = None,
    ):
        self.settings = settings or (slugs.settings if slugs else SlugSettings())
        self.slugs = slugs or SlugService(self.settings)
        self.repo = repo

    def _candidates(self, base: str, separator: str) -> Iterator[str]:
        yield base
        for n in range(1, self.settings.max_attempts + 1):
            yield f"{base}{separator}{n}"
        for _ in range(self.settings.random_attempts):
            yield f"{base}{separator}{secrets.token_hex(3)}"

    def generate_unique(
        self,
        text: str,
        table: str,
        column: Optional[str] = None,
        separator: Optional[str] = None,
        exclude_key: Optional[Any] = None,
    ) -> str:
        if column is None:
            column = self.settings.default_column
        if separator is None:
            separator = self.settings.default_separator
        base = self.slugs.generate(text, separator)

        attempts = 0
        for candidate in self._candidates(base, separator):
            attempts += 1
            if attempts == self.settings.max_attempts + 2:
                logger.warning("slug '%s' still taken after %d counters; trying random suffixes",
                               base, self.settings.max_attempts)
            if not self.repo.exists(table, column, candidate, exclude_key):
                if candidate != base:
                    logger.info("slug '%s' taken in %s.%s; using '%s'", base, table, column, candidate)
                return candidate
            logger.debug("slug candidate '%s' taken in %s.%s", candidate, table, column)

        raise ExhaustedUniquenessAttemptsError(base, attempts)
