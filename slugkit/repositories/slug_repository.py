# slugkit/repositories/slug_repository.py
from typing import Any, Optional
from ..infra.db.bq_client import q_scalar, fq
from ..utils.validators import ensure_identifier


class BigQuerySlugRepository:
    """
    Existence check against `project.dataset.<table>`.
    No caching: every call hits the table so it sees the latest committed rows.
    """

    def __init__(self, key_column: str = "id", dataset: Optional[str] = None):
        self.key_column = ensure_identifier(key_column, "key column")
        self.dataset = dataset

    def exists(
        self,
        table: str,
        column: str,
        candidate: str,
        exclude_key: Optional[Any] = None,
    ) -> bool:
        ensure_identifier(table, "table")
        ensure_identifier(column, "column")
        sql = f"""
        SELECT EXISTS (
          SELECT 1
          FROM {fq(table, self.dataset)}
          WHERE {column} = @candidate
            AND (@exclude_key IS NULL OR CAST({self.key_column} AS STRING) != @exclude_key)
        )
        """
        found = q_scalar(sql, {
            "candidate": candidate,
            "exclude_key": None if exclude_key is None else str(exclude_key),
        })
        return bool(found)
