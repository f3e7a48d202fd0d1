# slugkit/hooks/record_hook.py
import logging
from typing import Any, Dict, Mapping, Optional

from ..config import SlugOverrides, SlugSettings, resolve
from ..services.unique_slug_service import UniqueSlugService

logger = logging.getLogger(__name__)


class SlugRecordHook:
    """
    Call from the persistence path, right before a record is written.

    Records are plain dicts; the slug is written into the configured column
    in place and the same dict is returned.
    """

    def __init__(self, unique: UniqueSlugService, settings: Optional[SlugSettings] = None):
        self.unique = unique
        self.settings = settings or unique.settings

    def _apply(self, record: Dict[str, Any], table: str, key: Any, overrides: Optional[SlugOverrides]):
        cfg = resolve(overrides, self.settings)
        source = record.get(cfg.source_field)
        if source is None or (isinstance(source, str) and not source.strip()):
            return record
        record[cfg.column] = self.unique.generate_unique(
            str(source), table, cfg.column, cfg.separator, exclude_key=key
        )
        return record

    def before_create(
        self,
        record: Dict[str, Any],
        table: str,
        overrides: Optional[SlugOverrides] = None,
    ) -> Dict[str, Any]:
        return self._apply(record, table, None, overrides)

    def before_update(
        self,
        record: Dict[str, Any],
        original: Mapping[str, Any],
        table: str,
        key: Any,
        overrides: Optional[SlugOverrides] = None,
    ) -> Dict[str, Any]:
        cfg = resolve(overrides, self.settings)
        if not cfg.regenerate_on_update:
            return record
        if record.get(cfg.source_field) == original.get(cfg.source_field):
            return record
        logger.debug("%s[%s]: %s changed, regenerating slug", table, key, cfg.source_field)
        return self._apply(record, table, key, overrides)

    def regenerate(
        self,
        record: Dict[str, Any],
        table: str,
        key: Any = None,
        overrides: Optional[SlugOverrides] = None,
    ) -> Dict[str, Any]:
        return self._apply(record, table, key, overrides)
