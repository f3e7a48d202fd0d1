# slugkit/infra/db/bq_client.py

import os
from typing import Any, Dict, Optional
from google.cloud import bigquery
from ..auth.credentials import load_credentials, resolve_project_id

__all__ = [
    "client",
    "fq",
    "q_scalar",
]

_DATASET = os.getenv("BQ_DATASET", "slugs")
_bq_client: Optional[bigquery.Client] = None


# ----------------------------
# Client / helpers
# ----------------------------
def client() -> bigquery.Client:
    global _bq_client
    if _bq_client is None:
        creds = load_credentials()
        _bq_client = bigquery.Client(project=resolve_project_id(creds), credentials=creds)
    return _bq_client


def fq(table: str, dataset: Optional[str] = None) -> str:
    return f"`{client().project}.{dataset or _DATASET}.{table}`"


# ----------------------------
# Query helpers
# ----------------------------
def _infer_type(v: Any) -> str:
    if isinstance(v, bool):  return "BOOL"
    if isinstance(v, int):   return "INT64"
    if isinstance(v, float): return "FLOAT64"
    return "STRING"


def _job_config(params: Optional[Dict[str, Any]]) -> Optional[bigquery.QueryJobConfig]:
    if not params:
        return None
    qp = [bigquery.ScalarQueryParameter(k, _infer_type(v), v) for k, v in params.items()]
    return bigquery.QueryJobConfig(query_parameters=qp)


def q_scalar(sql: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """First column of the first row, or None for an empty result."""
    for row in client().query(sql, job_config=_job_config(params)).result():
        return row[0]
    return None
