"""Synchronous client for the Recman API.

:class:`RecmanApi` turns each named operation into exactly one
authenticated ``GET`` against the single Recman endpoint. Every request
goes through the same pipeline:

1. The operation builds its query parameters (a fixed ``scope`` plus any
   filters and a ``fields`` projection).
2. :func:`prepare_fields` flattens ``fields`` to a comma-separated string.
3. :meth:`RecmanApi.build_url` merges in ``key`` and ``type=json``, which
   always override caller-supplied values of the same name.
4. The response body is decoded as JSON and checked with
   :func:`raise_for_api_error`.

Recman allows only 200 requests per day. Unless you handle caching
yourself, use :class:`~recman.client.cached.CachedRecmanApi` instead.

See Also:
    https://help.recman.no/no/help/api/
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Union

import httpx

from recman import scopes
from recman.exceptions import (
    ApiError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
    ValidationError,
)
from recman.models import DEFAULT_BASE_URL, ApiErrorDetail, LocationField, RequestConfig
from recman.output import get_output

Fields = Union[str, Sequence[str]]
Ids = Iterable[Union[int, str]]


def prepare_fields(fields: Optional[Fields]) -> Optional[str]:
    """Convert a ``fields`` value to the comma-separated form the API expects.

    Args:
        fields: A sequence of field names, an already joined string, or
            ``None``.

    Returns:
        The joined string, the string unchanged, or ``None`` when no
        fields were given.
    """
    if fields is None:
        return None
    if isinstance(fields, str):
        return fields
    return ",".join(str(f) for f in fields)


def _or_default(fields: Optional[Fields], default: Fields) -> Fields:
    """Return *fields*, or *default* when no projection was given.

    Only ``None`` selects the default; an empty value is sent as is.
    """
    return default if fields is None else fields


def _join_ids(ids: Ids) -> str:
    """Join filter ids with commas. An empty sequence means "no filter"."""
    return ",".join(str(i) for i in ids)


def raise_for_api_error(data: Any) -> None:
    """Raise :class:`ApiError` if *data* is an error payload.

    The API reports errors either as a single ``{"code", "message"}``
    object or as a list of them; for a list only the first entry is used.

    Raises:
        ApiError: If *data* is a mapping with an ``error`` key.
    """
    if not isinstance(data, dict) or data.get("error") is None:
        return

    error = data["error"]
    if isinstance(error, list):
        if not error:
            raise ApiError(None, "Unknown API error")
        error = error[0]

    if isinstance(error, dict):
        detail = ApiErrorDetail.model_validate(error)
    else:
        detail = ApiErrorDetail(message=str(error))

    raise ApiError(detail.code, detail.message)


class RecmanApi:
    """Client for the Recman API.

    Each public ``get_*`` method issues one request and returns the decoded
    JSON payload unchanged (a ``list`` or ``dict`` depending on the scope).

    Args:
        api_key: Your Recman API key.
        http_client: Optional :class:`httpx.Client` to send requests with.
            When omitted the client creates its own and closes it in
            :meth:`close`; an injected client is left open.
        base_url: The Recman endpoint.
        request_config: Timeout and SSL settings for a client-owned
            :class:`httpx.Client`. Ignored when *http_client* is given.

    Example::

        with RecmanApi("my-api-key") as api:
            for post in api.get_job_post_list():
                print(post["name"])
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.Client] = None,
        base_url: str = DEFAULT_BASE_URL,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._owns_client = http_client is None
        if http_client is None:
            config = request_config or RequestConfig()
            http_client = httpx.Client(
                timeout=config.timeout,
                verify=config.verify_ssl,
                follow_redirects=True,
            )
        self._client = http_client

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> RecmanApi:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------ #
    # Request pipeline
    # ------------------------------------------------------------------ #

    def build_url(self, params: dict[str, Any]) -> str:
        """Build the full request URL from *params*.

        ``fields`` is flattened with :func:`prepare_fields`, ``None`` values
        are dropped, and ``key`` / ``type`` are set last so callers cannot
        override them.
        """
        query: dict[str, Any] = {k: v for k, v in params.items() if v is not None}
        fields = prepare_fields(params.get("fields"))
        if fields is not None:
            query["fields"] = fields
        query["key"] = self._api_key
        query["type"] = "json"
        return str(httpx.URL(self._base_url, params=query))

    def perform_request(self, params: dict[str, Any]) -> Any:
        """Send one authenticated GET with *params* and return the payload.

        Raises:
            TransportError: On network / timeout errors.
            HttpStatusError: On an HTTP 4xx / 5xx without an API error body.
            MalformedResponseError: If the body is not valid JSON.
            ApiError: If the payload contains an ``error`` key.
        """
        url = self.build_url(params)
        output = get_output()
        output.debug(f"GET {self._base_url} scope={params.get('scope')}")

        try:
            response = self._client.get(url)
        except httpx.TransportError as exc:
            raise TransportError(f"Request to {self._base_url} failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            if response.status_code >= 400:
                raise HttpStatusError(
                    f"HTTP {response.status_code}", response.status_code
                ) from exc
            raise MalformedResponseError(
                f"Response from {self._base_url} is not valid JSON: {exc}"
            ) from exc

        raise_for_api_error(data)

        if response.status_code >= 400:
            raise HttpStatusError(f"HTTP {response.status_code}", response.status_code)

        return data

    def _request(
        self,
        operation: str,
        args: tuple[Any, ...],
        params: dict[str, Any],
    ) -> Any:
        """Run *operation*. Subclasses hook in here; *args* identify the call."""
        return self.perform_request(params)

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    def get_branch_list(self) -> Any:
        return self._request("get_branch_list", (), {"scope": scopes.BRANCH_LIST})

    def get_branch_category_list(self) -> Any:
        return self._request(
            "get_branch_category_list", (), {"scope": scopes.BRANCH_CATEGORY_LIST}
        )

    def get_sector_list(self) -> Any:
        return self._request("get_sector_list", (), {"scope": scopes.SECTOR_LIST})

    def get_extent_list(self) -> Any:
        return self._request("get_extent_list", (), {"scope": scopes.EXTENT_LIST})

    def get_location_list(self, field: Union[str, LocationField]) -> Any:
        """Fetch one location list.

        Args:
            field: One of ``city``, ``region``, ``country``,
                ``world-country-list`` or ``nationality-list``.

        Raises:
            ValidationError: If *field* is not one of the above. Raised
                before any request is sent.
        """
        value = field.value if isinstance(field, LocationField) else field
        if value not in scopes.VALID_LOCATION_FIELDS:
            raise ValidationError(value, scopes.VALID_LOCATION_FIELDS)

        return self._request(
            "get_location_list",
            (value,),
            {"scope": scopes.LOCATION, "fields": value},
        )

    def get_job_post_list(self, fields: Optional[Fields] = None) -> Any:
        return self._request(
            "get_job_post_list",
            (fields,),
            {"scope": scopes.JOB_POST, "fields": _or_default(fields, scopes.JOB_POST_FIELDS)},
        )

    def get_department_list(self, fields: Optional[Fields] = None) -> Any:
        return self._request(
            "get_department_list",
            (fields,),
            {"scope": scopes.DEPARTMENT, "fields": _or_default(fields, scopes.DEPARTMENT_FIELDS)},
        )

    def get_corporation(self, fields: Optional[Fields] = None) -> Any:
        return self._request(
            "get_corporation",
            (fields,),
            {"scope": scopes.CORPORATION, "fields": _or_default(fields, scopes.CORPORATION_FIELDS)},
        )

    def get_candidate_list(self, page: int = 1, fields: Optional[Fields] = None) -> Any:
        """Fetch one page of candidates.

        The API pages the list at :data:`~recman.scopes.CANDIDATE_PAGE_SIZE`
        entries. Pages are not aggregated; request ``page=2`` and onwards
        yourself if you need more.
        """
        return self._request(
            "get_candidate_list",
            (page, fields),
            {
                "scope": scopes.CANDIDATE_LIST,
                "page": page,
                "fields": _or_default(fields, scopes.CANDIDATE_FIELDS),
            },
        )

    def get_candidate(self, candidate_id: Union[int, str], fields: Optional[Fields] = None) -> Any:
        return self._request(
            "get_candidate",
            (candidate_id, fields),
            {
                "scope": scopes.CANDIDATE_LIST,
                "c_candidate_id": candidate_id,
                "fields": _or_default(fields, scopes.CANDIDATE_FIELDS),
            },
        )

    def get_candidate_attribute_list(self) -> Any:
        return self._request(
            "get_candidate_attribute_list", (), {"scope": scopes.CANDIDATE_ATTRIBUTE_LIST}
        )

    def get_candidate_attributes(self) -> Any:
        return self._request(
            "get_candidate_attributes", (), {"scope": scopes.CANDIDATE_ATTRIBUTE}
        )

    def get_candidate_language_list(self, fields: Optional[Fields] = None) -> Any:
        return self._request(
            "get_candidate_language_list",
            (fields,),
            {"scope": scopes.LANGUAGE_LIST, "fields": _or_default(fields, scopes.LANGUAGE_FIELDS)},
        )

    def get_user_list(
        self,
        department_ids: Ids = (),
        corporation_ids: Ids = (),
        tag_ids: Ids = (),
        fields: Optional[Fields] = None,
    ) -> Any:
        """Fetch users, optionally filtered.

        Each filter is an iterable of ids sent comma-separated; an empty
        one sends an empty value, which the API reads as "no filter".
        """
        department_ids = list(department_ids)
        corporation_ids = list(corporation_ids)
        tag_ids = list(tag_ids)
        return self._request(
            "get_user_list",
            (department_ids, corporation_ids, tag_ids, fields),
            {
                "scope": scopes.USER,
                "c_department_id": _join_ids(department_ids),
                "c_corporation_id": _join_ids(corporation_ids),
                "c_tag_id": _join_ids(tag_ids),
                "fields": _or_default(fields, scopes.USER_FIELDS),
            },
        )

    def get_user_tag_list(self, fields: Optional[Fields] = None) -> Any:
        return self._request(
            "get_user_tag_list",
            (fields,),
            {"scope": scopes.USER_TAG_LIST, "fields": _or_default(fields, scopes.USER_TAG_FIELDS)},
        )
