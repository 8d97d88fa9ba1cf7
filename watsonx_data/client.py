"""Client for the watsonx.data lakehouse API, version 2.

Each method maps to one REST operation: it checks the required parameters,
builds the path, query, headers and body, and sends the request through the
shared request helper. Every method returns a ``DetailedResponse``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests
from typing_extensions import Self

from ._core._models import DetailedResponse
from ._core._request import RequestConfig, request
from ._core._validators import require_non_empty
from .common import get_sdk_headers
from .config import DEFAULT_SERVICE_NAME, DEFAULT_SERVICE_URL, ServiceConfig
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

JSON = "application/json"
MERGE_PATCH_JSON = "application/merge-patch+json"


class WatsonxDataV2:
    """The public API for IBM watsonx.data.

    Parameters:
        config: Service settings; defaults to ``ServiceConfig()``.
        session: ``requests.Session`` to send requests with. The client
            creates and owns one when omitted.
    """

    DEFAULT_SERVICE_URL = DEFAULT_SERVICE_URL
    DEFAULT_SERVICE_NAME = DEFAULT_SERVICE_NAME

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ServiceConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()

    @classmethod
    def new_instance(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        service_url: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Self:
        """Construct a client from ``<SERVICE_NAME>_*`` environment variables.

        Parameters:
            service_name: Name of the service to configure.
            service_url: Base URL; takes precedence over the environment.
            environ: Mapping to read instead of ``os.environ``.
        """
        config = ServiceConfig.from_environment(service_name, environ)
        if service_url:
            config = config.with_overrides(service_url=service_url)
        return cls(config)

    # -- configuration -----------------------------------------------------

    @property
    def service_url(self) -> str:
        return self.config.service_url

    def set_service_url(self, service_url: str) -> None:
        if not service_url:
            raise ConfigurationError("The service URL is required")
        self.config = self.config.with_overrides(service_url=service_url.rstrip("/"))

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        """Set headers included with every request."""
        self.config = self.config.with_overrides(headers=dict(headers))

    def set_bearer_token(self, bearer_token: Optional[str]) -> None:
        self.config = self.config.with_overrides(bearer_token=bearer_token)

    def enable_retries(self, max_retries: int = 4, backoff_factor: float = 1.0) -> None:
        """Retry throttled (429) and failed (5xx) requests with exponential backoff."""
        self.config = self.config.with_overrides(
            max_retries=max_retries, backoff_factor=backoff_factor
        )

    def disable_retries(self) -> None:
        self.config = self.config.with_overrides(max_retries=0)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(
        self,
        operation_id: str,
        method: str,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
        content_type: str = JSON,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        if path_params:
            path = path.format(
                **{k: quote(str(v), safe="") for k, v in path_params.items()}
            )

        request_headers: Dict[str, Any] = dict(self.config.headers)
        request_headers.update(
            get_sdk_headers(self.config.service_name, operation_id)
        )
        request_headers["Accept"] = JSON
        request_headers["AuthInstanceId"] = auth_instance_id
        json_body = None
        if body is not None:
            json_body = {k: v for k, v in body.items() if v is not None}
            request_headers["Content-Type"] = content_type
        request_headers.update(headers or {})

        config = RequestConfig(
            method=method,
            url=self.config.service_url.rstrip("/") + path,
            params=params or {},
            headers=request_headers,
            json=json_body,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
            backoff_factor=self.config.backoff_factor,
            verify=not self.config.disable_ssl_verification,
        )
        response = request(config, session=self.session, auth_token=self.config.bearer_token)
        logger.debug("%s returned status %s", operation_id, response.status_code)
        return DetailedResponse.from_response(response)

    # -- buckets -----------------------------------------------------------

    def list_bucket_registrations(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Get the list of registered buckets.

        Parameters:
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.

        Returns:
            A ``DetailedResponse`` whose result holds ``bucket_registrations``.
        """
        return self._request(
            "list_bucket_registrations",
            "GET",
            "/bucket_registrations",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_bucket_registration(
        self,
        bucket_details: Mapping[str, Any],
        bucket_type: str,
        description: str,
        managed_by: str,
        *,
        associated_catalog: Optional[Mapping[str, Any]] = None,
        bucket_display_name: Optional[str] = None,
        region: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Register a new bucket.

        Parameters:
            bucket_details: Access details (``bucket_name``, ``endpoint``,
                ``access_key``, ``secret_key``).
            bucket_type: Bucket type, e.g. ``ibm_cos`` or ``amazon_s3``.
            description: Bucket description.
            managed_by: ``ibm`` or ``customer``.
            associated_catalog: Catalog to create on top of the bucket.
            bucket_display_name: Display name of the bucket.
            region: Region where the bucket is located.
            tags: Tags for the bucket.
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.
        """
        require_non_empty(
            {
                "bucket_details": bucket_details,
                "bucket_type": bucket_type,
                "description": description,
                "managed_by": managed_by,
            },
            ["bucket_details", "bucket_type", "description", "managed_by"],
        )
        body = {
            "bucket_details": bucket_details,
            "bucket_type": bucket_type,
            "description": description,
            "managed_by": managed_by,
            "associated_catalog": associated_catalog,
            "bucket_display_name": bucket_display_name,
            "region": region,
            "tags": tags,
        }
        return self._request(
            "create_bucket_registration",
            "POST",
            "/bucket_registrations",
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_bucket_registration(
        self,
        bucket_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Get a registered bucket."""
        require_non_empty({"bucket_id": bucket_id}, ["bucket_id"])
        return self._request(
            "get_bucket_registration",
            "GET",
            "/bucket_registrations/{bucket_id}",
            path_params={"bucket_id": bucket_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def deregister_bucket(
        self,
        bucket_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Deregister a bucket."""
        require_non_empty({"bucket_id": bucket_id}, ["bucket_id"])
        return self._request(
            "deregister_bucket",
            "DELETE",
            "/bucket_registrations/{bucket_id}",
            path_params={"bucket_id": bucket_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def update_bucket_registration(
        self,
        bucket_id: str,
        *,
        bucket_details: Optional[Mapping[str, Any]] = None,
        bucket_display_name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Update a bucket registration.

        Only the fields that are passed are sent, as a JSON merge patch.
        """
        require_non_empty({"bucket_id": bucket_id}, ["bucket_id"])
        body = {
            "bucket_details": bucket_details,
            "bucket_display_name": bucket_display_name,
            "description": description,
            "tags": tags,
        }
        return self._request(
            "update_bucket_registration",
            "PATCH",
            "/bucket_registrations/{bucket_id}",
            path_params={"bucket_id": bucket_id},
            body=body,
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_activate_bucket(
        self,
        bucket_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Activate a bucket."""
        require_non_empty({"bucket_id": bucket_id}, ["bucket_id"])
        return self._request(
            "create_activate_bucket",
            "POST",
            "/bucket_registrations/{bucket_id}/activate",
            path_params={"bucket_id": bucket_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_deactivate_bucket(
        self,
        bucket_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Deactivate a bucket."""
        require_non_empty({"bucket_id": bucket_id}, ["bucket_id"])
        return self._request(
            "delete_deactivate_bucket",
            "DELETE",
            "/bucket_registrations/{bucket_id}/deactivate",
            path_params={"bucket_id": bucket_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_bucket_objects(
        self,
        bucket_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """List the objects stored in a bucket."""
        require_non_empty({"bucket_id": bucket_id}, ["bucket_id"])
        return self._request(
            "list_bucket_objects",
            "GET",
            "/bucket_registrations/{bucket_id}/objects",
            path_params={"bucket_id": bucket_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    # -- databases ---------------------------------------------------------

    def list_database_registrations(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Get the list of registered databases."""
        return self._request(
            "list_database_registrations",
            "GET",
            "/database_registrations",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_database_registration(
        self,
        database_display_name: str,
        database_type: str,
        *,
        associated_catalog: Optional[Mapping[str, Any]] = None,
        created_on: Optional[int] = None,
        database_details: Optional[Mapping[str, Any]] = None,
        database_properties: Optional[List[Mapping[str, Any]]] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Register a new database.

        Parameters:
            database_display_name: Display name of the database.
            database_type: Connector type, e.g. ``db2`` or ``postgresql``.
            associated_catalog: Catalog to create for the database.
            created_on: Creation date as a unix timestamp.
            database_details: Connection details (host, port, credentials).
            database_properties: Extra connector properties.
            description: Database description.
            tags: Tags for the database.
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.
        """
        require_non_empty(
            {
                "database_display_name": database_display_name,
                "database_type": database_type,
            },
            ["database_display_name", "database_type"],
        )
        body = {
            "database_display_name": database_display_name,
            "database_type": database_type,
            "associated_catalog": associated_catalog,
            "created_on": created_on,
            "database_details": database_details,
            "database_properties": database_properties,
            "description": description,
            "tags": tags,
        }
        return self._request(
            "create_database_registration",
            "POST",
            "/database_registrations",
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_database(
        self,
        database_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Get a registered database."""
        require_non_empty({"database_id": database_id}, ["database_id"])
        return self._request(
            "get_database",
            "GET",
            "/database_registrations/{database_id}",
            path_params={"database_id": database_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_database_catalog(
        self,
        database_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Delete a database registration and its catalog."""
        require_non_empty({"database_id": database_id}, ["database_id"])
        return self._request(
            "delete_database_catalog",
            "DELETE",
            "/database_registrations/{database_id}",
            path_params={"database_id": database_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def update_database(
        self,
        database_id: str,
        *,
        database_details: Optional[Mapping[str, Any]] = None,
        database_display_name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Update a database registration as a JSON merge patch."""
        require_non_empty({"database_id": database_id}, ["database_id"])
        body = {
            "database_details": database_details,
            "database_display_name": database_display_name,
            "description": description,
            "tags": tags,
        }
        return self._request(
            "update_database",
            "PATCH",
            "/database_registrations/{database_id}",
            path_params={"database_id": database_id},
            body=body,
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    # -- engines -----------------------------------------------------------

    def list_presto_engines(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._request(
            "list_presto_engines",
            "GET",
            "/presto_engines",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_presto_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            "get_presto_engine",
            "GET",
            "/presto_engines/{engine_id}",
            path_params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_presto_engine(
        self,
        origin: str,
        *,
        associated_catalogs: Optional[List[str]] = None,
        description: Optional[str] = None,
        engine_details: Optional[Mapping[str, Any]] = None,
        engine_display_name: Optional[str] = None,
        region: Optional[str] = None,
        tags: Optional[List[str]] = None,
        version: Optional[str] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Create a Presto engine.

        Parameters:
            origin: ``native`` for engines managed by watsonx.data, ``external``
                or ``discover`` otherwise.
            associated_catalogs: Catalogs to attach to the engine.
            description: Engine description.
            engine_details: Node sizing (``size_config``, ``coordinator``,
                ``worker``) or the connection of an external engine.
            engine_display_name: Display name of the engine.
            region: Region of the engine.
            tags: Tags for the engine.
            version: Presto version.
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.
        """
        require_non_empty({"origin": origin}, ["origin"])
        body = {
            "origin": origin,
            "associated_catalogs": associated_catalogs,
            "description": description,
            "engine_details": engine_details,
            "engine_display_name": engine_display_name,
            "region": region,
            "tags": tags,
            "version": version,
        }
        return self._request(
            "create_presto_engine",
            "POST",
            "/presto_engines",
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def update_presto_engine(
        self,
        engine_id: str,
        *,
        description: Optional[str] = None,
        engine_display_name: Optional[str] = None,
        engine_properties: Optional[Mapping[str, Any]] = None,
        engine_restart: Optional[str] = None,
        remove_engine_properties: Optional[Mapping[str, Any]] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Update a Presto engine with a JSON merge patch.

        ``engine_restart`` is ``force`` to restart the engine right away.
        """
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        body = {
            "description": description,
            "engine_display_name": engine_display_name,
            "engine_properties": engine_properties,
            "engine_restart": engine_restart,
            "remove_engine_properties": remove_engine_properties,
            "tags": tags,
        }
        return self._request(
            "update_presto_engine",
            "PATCH",
            "/presto_engines/{engine_id}",
            path_params={"engine_id": engine_id},
            body=body,
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Delete a Presto engine."""
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            "delete_engine",
            "DELETE",
            "/presto_engines/{engine_id}",
            path_params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def pause_presto_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._engine_action(
            "pause_presto_engine", "pause", engine_id, auth_instance_id, headers
        )

    def resume_presto_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._engine_action(
            "resume_presto_engine", "resume", engine_id, auth_instance_id, headers
        )

    def restart_presto_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._engine_action(
            "restart_presto_engine", "restart", engine_id, auth_instance_id, headers
        )

    def scale_presto_engine(
        self,
        engine_id: str,
        *,
        coordinator: Optional[Mapping[str, Any]] = None,
        worker: Optional[Mapping[str, Any]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Scale the coordinator and worker nodes of a Presto engine.

        Each node spec is a mapping with ``node_type`` and ``quantity``.
        """
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            "scale_presto_engine",
            "POST",
            "/presto_engines/{engine_id}/scale",
            path_params={"engine_id": engine_id},
            body={"coordinator": coordinator, "worker": worker},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def _engine_action(
        self,
        operation_id: str,
        action: str,
        engine_id: str,
        auth_instance_id: Optional[str],
        headers: Optional[Mapping[str, str]],
    ) -> DetailedResponse:
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            operation_id,
            "POST",
            "/presto_engines/{engine_id}/" + action,
            path_params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_spark_engines(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._request(
            "list_spark_engines",
            "GET",
            "/spark_engines",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_spark_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            "get_spark_engine",
            "GET",
            "/spark_engines/{engine_id}",
            path_params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_spark_engine(
        self,
        origin: str,
        *,
        associated_catalogs: Optional[List[str]] = None,
        description: Optional[str] = None,
        engine_details: Optional[Mapping[str, Any]] = None,
        engine_display_name: Optional[str] = None,
        status: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Create a Spark engine, or register an external one.

        Parameters:
            origin: ``native``, ``external`` or ``discover``.
            associated_catalogs: Catalogs to attach to the engine.
            description: Engine description.
            engine_details: Connection or sizing details of the engine.
            engine_display_name: Display name of the engine.
            status: Initial engine status.
            tags: Tags for the engine.
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.
        """
        require_non_empty({"origin": origin}, ["origin"])
        body = {
            "origin": origin,
            "associated_catalogs": associated_catalogs,
            "description": description,
            "engine_details": engine_details,
            "engine_display_name": engine_display_name,
            "status": status,
            "tags": tags,
        }
        return self._request(
            "create_spark_engine",
            "POST",
            "/spark_engines",
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def update_spark_engine(
        self,
        engine_id: str,
        *,
        description: Optional[str] = None,
        engine_details: Optional[Mapping[str, Any]] = None,
        engine_display_name: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        body = {
            "description": description,
            "engine_details": engine_details,
            "engine_display_name": engine_display_name,
            "tags": tags,
        }
        return self._request(
            "update_spark_engine",
            "PATCH",
            "/spark_engines/{engine_id}",
            path_params={"engine_id": engine_id},
            body=body,
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_spark_engine(
        self,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            "delete_spark_engine",
            "DELETE",
            "/spark_engines/{engine_id}",
            path_params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_spark_engine_applications(
        self,
        engine_id: str,
        *,
        state: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """List the applications submitted to a Spark engine.

        ``state`` filters by application state, e.g. ``["running"]``.
        """
        require_non_empty({"engine_id": engine_id}, ["engine_id"])
        return self._request(
            "list_spark_engine_applications",
            "GET",
            "/spark_engines/{engine_id}/applications",
            path_params={"engine_id": engine_id},
            params={"state": state},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_spark_engine_application(
        self,
        engine_id: str,
        application_details: Mapping[str, Any],
        *,
        job_endpoint: Optional[str] = None,
        service_instance_id: Optional[str] = None,
        type: Optional[str] = None,
        volumes: Optional[List[Mapping[str, Any]]] = None,
        state: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Submit an application to a Spark engine.

        Parameters:
            engine_id: Spark engine id.
            application_details: Application to run (``application``,
                ``arguments``, ``conf``, ``env``, ``name``).
            job_endpoint: Job endpoint of an external engine.
            service_instance_id: Service instance of an external engine.
            type: Engine type, ``iae`` or ``emr``.
            volumes: Volumes to mount.
            state: Application state filter sent as a query parameter.
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.
        """
        require_non_empty(
            {"engine_id": engine_id, "application_details": application_details},
            ["engine_id", "application_details"],
        )
        body = {
            "application_details": application_details,
            "job_endpoint": job_endpoint,
            "service_instance_id": service_instance_id,
            "type": type,
            "volumes": volumes,
        }
        return self._request(
            "create_spark_engine_application",
            "POST",
            "/spark_engines/{engine_id}/applications",
            path_params={"engine_id": engine_id},
            params={"state": state},
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_spark_engine_applications(
        self,
        engine_id: str,
        application_id: str,
        *,
        state: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Stop a Spark application."""
        require_non_empty(
            {"engine_id": engine_id, "application_id": application_id},
            ["engine_id", "application_id"],
        )
        return self._request(
            "delete_spark_engine_applications",
            "DELETE",
            "/spark_engines/{engine_id}/applications",
            path_params={"engine_id": engine_id},
            params={"application_id": application_id, "state": state},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_spark_engine_application_status(
        self,
        engine_id: str,
        application_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty(
            {"engine_id": engine_id, "application_id": application_id},
            ["engine_id", "application_id"],
        )
        return self._request(
            "get_spark_engine_application_status",
            "GET",
            "/spark_engines/{engine_id}/applications/{application_id}",
            path_params={"engine_id": engine_id, "application_id": application_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_other_engines(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """List engines that are not managed by watsonx.data."""
        return self._request(
            "list_other_engines",
            "GET",
            "/other_engines",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    # -- catalogs, schemas and tables ----------------------------------------

    def list_catalogs(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._request(
            "list_catalogs",
            "GET",
            "/catalogs",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_catalog(
        self,
        catalog_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"catalog_id": catalog_id}, ["catalog_id"])
        return self._request(
            "get_catalog",
            "GET",
            "/catalogs/{catalog_id}",
            path_params={"catalog_id": catalog_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_schemas(
        self,
        engine_id: str,
        catalog_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """List the schemas of a catalog, as seen by an engine."""
        require_non_empty(
            {"engine_id": engine_id, "catalog_id": catalog_id},
            ["engine_id", "catalog_id"],
        )
        return self._request(
            "list_schemas",
            "GET",
            "/catalogs/{catalog_id}/schemas",
            path_params={"catalog_id": catalog_id},
            params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_schema(
        self,
        engine_id: str,
        catalog_id: str,
        custom_path: str,
        schema_name: str,
        *,
        bucket_name: Optional[str] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Create a schema in a catalog.

        Parameters:
            engine_id: Engine that runs the DDL.
            catalog_id: Catalog to create the schema in.
            custom_path: Storage path of the schema inside the bucket.
            schema_name: Name of the new schema.
            bucket_name: Bucket holding the schema data.
            auth_instance_id: CRN of the watsonx.data instance.
            headers: Custom request headers.
        """
        require_non_empty(
            {
                "engine_id": engine_id,
                "catalog_id": catalog_id,
                "custom_path": custom_path,
                "schema_name": schema_name,
            },
            ["engine_id", "catalog_id", "custom_path", "schema_name"],
        )
        body = {
            "custom_path": custom_path,
            "schema_name": schema_name,
            "bucket_name": bucket_name,
        }
        return self._request(
            "create_schema",
            "POST",
            "/catalogs/{catalog_id}/schemas",
            path_params={"catalog_id": catalog_id},
            params={"engine_id": engine_id},
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_schema(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty(
            {"engine_id": engine_id, "catalog_id": catalog_id, "schema_id": schema_id},
            ["engine_id", "catalog_id", "schema_id"],
        )
        return self._request(
            "delete_schema",
            "DELETE",
            "/catalogs/{catalog_id}/schemas/{schema_id}",
            path_params={"catalog_id": catalog_id, "schema_id": schema_id},
            params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_tables(
        self,
        catalog_id: str,
        schema_id: str,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty(
            {"catalog_id": catalog_id, "schema_id": schema_id, "engine_id": engine_id},
            ["catalog_id", "schema_id", "engine_id"],
        )
        return self._request(
            "list_tables",
            "GET",
            "/catalogs/{catalog_id}/schemas/{schema_id}/tables",
            path_params={"catalog_id": catalog_id, "schema_id": schema_id},
            params={"engine_id": engine_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_table(
        self,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Get a table, including its columns."""
        return self._table_request(
            "get_table",
            "GET",
            "",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_table(
        self,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        engine_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._table_request(
            "delete_table",
            "DELETE",
            "",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def rename_table(
        self,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        engine_id: str,
        *,
        table_name: Optional[str] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Rename a table."""
        return self._table_request(
            "rename_table",
            "PATCH",
            "",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            body={"table_name": table_name},
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def rollback_table(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        *,
        snapshot_id: Optional[str] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Roll an Iceberg table back to one of its snapshots."""
        return self._table_request(
            "rollback_table",
            "POST",
            "/rollback",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            body={"snapshot_id": snapshot_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_columns(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._table_request(
            "list_columns",
            "GET",
            "/columns",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_columns(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        *,
        columns: Optional[List[Mapping[str, Any]]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Add columns to a table.

        Each column is a mapping with ``column_name``, ``type`` and optionally
        ``comment``, ``length``, ``precision`` and ``scale``.
        """
        return self._table_request(
            "create_columns",
            "POST",
            "/columns",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            body={"columns": columns},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def update_column(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        column_id: str,
        *,
        column_name: Optional[str] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Rename a column."""
        return self._table_request(
            "update_column",
            "PATCH",
            "/columns/{column_id}",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            column_id=column_id,
            body={"column_name": column_name},
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_column(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        column_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._table_request(
            "delete_column",
            "DELETE",
            "/columns/{column_id}",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            column_id=column_id,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def list_table_snapshots(
        self,
        engine_id: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """List the snapshots of an Iceberg table."""
        return self._table_request(
            "list_table_snapshots",
            "GET",
            "/snapshots",
            catalog_id,
            schema_id,
            table_id,
            engine_id,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def _table_request(
        self,
        operation_id: str,
        method: str,
        suffix: str,
        catalog_id: str,
        schema_id: str,
        table_id: str,
        engine_id: str,
        *,
        column_id: Optional[str] = None,
        **kwargs: Any,
    ) -> DetailedResponse:
        path_params = {
            "catalog_id": catalog_id,
            "schema_id": schema_id,
            "table_id": table_id,
        }
        if "{column_id}" in suffix:
            path_params["column_id"] = column_id
        required = {**path_params, "engine_id": engine_id}
        require_non_empty(required, list(required))
        return self._request(
            operation_id,
            method,
            "/catalogs/{catalog_id}/schemas/{schema_id}/tables/{table_id}" + suffix,
            path_params=path_params,
            params={"engine_id": engine_id},
            **kwargs,
        )

    # -- services ----------------------------------------------------------

    def list_milvus_services(
        self,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        return self._request(
            "list_milvus_services",
            "GET",
            "/milvus_services",
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def get_milvus_service(
        self,
        service_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"service_id": service_id}, ["service_id"])
        return self._request(
            "get_milvus_service",
            "GET",
            "/milvus_services/{service_id}",
            path_params={"service_id": service_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def create_milvus_service(
        self,
        origin: str,
        *,
        description: Optional[str] = None,
        service_display_name: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Create a Milvus vector database service."""
        require_non_empty({"origin": origin}, ["origin"])
        body = {
            "origin": origin,
            "description": description,
            "service_display_name": service_display_name,
            "tags": tags,
        }
        return self._request(
            "create_milvus_service",
            "POST",
            "/milvus_services",
            body=body,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def update_milvus_service(
        self,
        service_id: str,
        *,
        description: Optional[str] = None,
        service_display_name: Optional[str] = None,
        tags: Optional[List[str]] = None,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"service_id": service_id}, ["service_id"])
        body = {
            "description": description,
            "service_display_name": service_display_name,
            "tags": tags,
        }
        return self._request(
            "update_milvus_service",
            "PATCH",
            "/milvus_services/{service_id}",
            path_params={"service_id": service_id},
            body=body,
            content_type=MERGE_PATCH_JSON,
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    def delete_milvus_service(
        self,
        service_id: str,
        *,
        auth_instance_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        require_non_empty({"service_id": service_id}, ["service_id"])
        return self._request(
            "delete_milvus_service",
            "DELETE",
            "/milvus_services/{service_id}",
            path_params={"service_id": service_id},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )

    # -- ingestion ---------------------------------------------------------

    def list_ingestion_jobs(
        self,
        auth_instance_id: str,
        *,
        start: Optional[str] = None,
        jobs_per_page: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> DetailedResponse:
        """Get one page of ingestion jobs.

        Use ``IngestionJobsPager`` to walk through every page.

        Parameters:
            auth_instance_id: CRN of the watsonx.data instance.
            start: Page cursor, taken from the ``next.href`` of the previous page.
            jobs_per_page: Number of jobs per page.
            headers: Custom request headers.

        Returns:
            A ``DetailedResponse`` whose result holds ``ingestion_jobs`` and
            the ``first``/``next`` page links.
        """
        require_non_empty({"auth_instance_id": auth_instance_id}, ["auth_instance_id"])
        return self._request(
            "list_ingestion_jobs",
            "GET",
            "/ingestion_jobs",
            params={"start": start, "jobs_per_page": jobs_per_page},
            auth_instance_id=auth_instance_id,
            headers=headers,
        )
