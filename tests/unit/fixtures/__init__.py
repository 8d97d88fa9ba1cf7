"""Builders for ingestion job payloads used across the unit tests."""

from typing import Any, Dict, List, Optional

SERVICE_URL = "https://lakehouse.test/lakehouse/api/v2"
AUTH_INSTANCE_ID = "crn:v1:bluemix:public:lakehouse:us-south:a/abc:def::"


def ingestion_job(job_id: str, status: str = "completed") -> Dict[str, Any]:
    return {
        "job_id": job_id,
        "status": status,
        "source_file_type": "parquet",
        "target_table": "iceberg_data.ingest.sales",
        "engine_id": "spark123",
    }


def envelope(
    job_ids: List[str], next_start: Optional[str] = None
) -> Dict[str, Any]:
    """Build an ingestion job collection page.

    Parameters:
        job_ids: Ids of the jobs on the page.
        next_start: Cursor of the following page; the page is the last one
            when omitted.
    """
    page: Dict[str, Any] = {
        "ingestion_jobs": [ingestion_job(job_id) for job_id in job_ids],
        "first": {"href": f"{SERVICE_URL}/ingestion_jobs?jobs_per_page=2"},
    }
    if next_start is not None:
        page["next"] = {
            "href": f"{SERVICE_URL}/ingestion_jobs?jobs_per_page=2&start={next_start}"
        }
    return page
