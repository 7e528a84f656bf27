"""
PNC REST API client infrastructure for bacon.

Provides a thin abstraction over the PNC REST API (v2):
- One requests.Session per client, optional bearer token
- Paged endpoints exposed as lazily iterated RemoteCollection objects
- Every failure surfaces as a ClientException subclass

Authentication tokens are obtained outside bacon and supplied through
configuration.
"""

import logging
from typing import Optional, Dict, Any, Callable, Iterator, TypeVar, Generic

import requests

from ..domain import (
    Project,
    SCMRepository,
    CreateAndSyncSCMRequest,
    RepositoryCreationResponse,
    BuildConfiguration,
    Build,
)

logger = logging.getLogger(__name__)

# Prefix of every REST endpoint below the server URL
API_PATH = "/pnc-rest/v2"

# Default page size for collection queries
DEFAULT_PAGE_SIZE = 50

T = TypeVar('T')


class ClientException(Exception):
    """Raised when a call to the PNC API fails."""
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class RemoteResourceException(ClientException):
    """Raised when reading a remote resource or collection fails."""


class RemoteResourceNotFoundException(RemoteResourceException):
    """Raised when the requested resource does not exist (HTTP 404)."""


class RemoteCollection(Generic[T]):
    """
    All items of a paged PNC endpoint.

    The first page is fetched on construction so that errors surface at
    the call site; further pages are fetched while iterating.

    Example:
        for project in client.get_all():
            print(project.name)
    """

    def __init__(self, fetch_page: Callable[[int], Dict[str, Any]],
                 item_factory: Callable[[Dict[str, Any]], T]):
        self._fetch_page = fetch_page
        self._item_factory = item_factory
        self._first_page = fetch_page(0)

    def __len__(self) -> int:
        """Total number of items on the server (totalHits)."""
        return self._first_page.get('totalHits', 0)

    def __iter__(self) -> Iterator[T]:
        # Pages are counted locally; the server's pageIndex is not trusted
        page = self._first_page
        page_index = 0
        while True:
            for item in page.get('content') or []:
                yield self._item_factory(item)

            page_index += 1
            if page_index >= page.get('totalPages', 0):
                break
            page = self._fetch_page(page_index)


def _error_message(response) -> str:
    """Best-effort extraction of the server's error message."""
    try:
        data = response.json()
    except ValueError:
        return response.text or ''
    if isinstance(data, dict):
        return data.get('errorMessage') or data.get('message') or str(data)
    return str(data)


class PncClient:
    """
    Base client for the PNC REST API.

    Subclasses add resource-specific methods on top of _request() and
    _collection().
    """

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: int = 30
    ):
        """
        Initialize PncClient.

        Args:
            url: PNC server URL, e.g. https://pnc.example.com
            token: Bearer token for calls that modify data
            page_size: Items requested per page for collections
            timeout: HTTP request timeout in seconds
        """
        self.base_url = url.rstrip('/') + API_PATH
        self.page_size = page_size
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': 'bacon',
        })
        if token:
            self.session.headers['Authorization'] = f'Bearer {token}'

    @property
    def authenticated(self) -> bool:
        return 'Authorization' in self.session.headers

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Optional[Any]:
        """Call the API and return the decoded JSON body (None if empty)."""
        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"{method} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ClientException(f"Request to {url} failed: {e}") from e

        status = response.status_code
        if status == 404:
            raise RemoteResourceNotFoundException(f"Resource {endpoint} not found", status)
        if status >= 400:
            raise ClientException(
                f"PNC API error {status} for {endpoint}: {_error_message(response)}", status
            )

        if status == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ClientException(f"PNC API returned invalid JSON for {endpoint}: {e}") from e

    def _collection(
        self,
        endpoint: str,
        item_factory: Callable[[Dict[str, Any]], T],
        sort: Optional[str] = None,
        query: Optional[str] = None,
        extra_params: Optional[Dict[str, Any]] = None
    ) -> RemoteCollection[T]:
        """Build a RemoteCollection over a paged endpoint.

        Args:
            endpoint: Path below the API prefix
            item_factory: Converts one 'content' entry into a DTO
            sort: RSQL sort expression, e.g. "=asc=name"
            query: RSQL query, e.g. "description=like=%Foo%"
            extra_params: Endpoint-specific filters; None values are dropped
        """
        def fetch_page(page_index: int) -> Dict[str, Any]:
            params = {'pageIndex': page_index, 'pageSize': self.page_size}
            if sort:
                params['sort'] = sort
            if query:
                params['q'] = query
            for key, value in (extra_params or {}).items():
                if value is not None:
                    params[key] = value

            try:
                page = self._request('GET', endpoint, params=params)
            except RemoteResourceException:
                raise
            except ClientException as e:
                raise RemoteResourceException(str(e), e.status) from e
            return page or {}

        return RemoteCollection(fetch_page, item_factory)


class ProjectClient(PncClient):
    """Client for /projects endpoints."""

    def get_specific(self, project_id: str) -> Project:
        return Project.from_api_response(self._request('GET', f"projects/{project_id}") or {})

    def get_all(self, sort: Optional[str] = None,
                query: Optional[str] = None) -> RemoteCollection[Project]:
        return self._collection("projects", Project.from_api_response, sort, query)

    def create_new(self, project: Project) -> Project:
        data = self._request('POST', "projects", body=project.to_dict())
        return Project.from_api_response(data or {})

    def update(self, project_id: str, project: Project) -> None:
        self._request('PUT', f"projects/{project_id}", body=project.to_dict())

    def get_build_configurations(self, project_id: str, sort: Optional[str] = None,
                                 query: Optional[str] = None) -> RemoteCollection[BuildConfiguration]:
        return self._collection(
            f"projects/{project_id}/build-configs",
            BuildConfiguration.from_api_response,
            sort,
            query,
        )

    def get_builds(self, project_id: str, sort: Optional[str] = None,
                   query: Optional[str] = None) -> RemoteCollection[Build]:
        return self._collection(f"projects/{project_id}/builds", Build.from_api_response, sort, query)


class SCMRepositoryClient(PncClient):
    """Client for /scm-repositories endpoints."""

    def get_specific(self, repository_id: str) -> SCMRepository:
        return SCMRepository.from_api_response(self._request('GET', f"scm-repositories/{repository_id}") or {})

    def get_all(
        self,
        match_url: Optional[str] = None,
        search_url: Optional[str] = None,
        sort: Optional[str] = None,
        query: Optional[str] = None
    ) -> RemoteCollection[SCMRepository]:
        """
        List SCM repositories.

        Args:
            match_url: Only the repository with exactly this internal or external URL
            search_url: Repositories whose URL contains this string
        """
        return self._collection(
            "scm-repositories",
            SCMRepository.from_api_response,
            sort,
            query,
            extra_params={'matchUrl': match_url, 'searchUrl': search_url},
        )

    def create_new(self, request: CreateAndSyncSCMRequest) -> RepositoryCreationResponse:
        data = self._request('POST', "scm-repositories/create-and-sync", body=request.to_dict())
        return RepositoryCreationResponse.from_api_response(data or {})

    def get_build_configs(self, repository_id: str, sort: Optional[str] = None,
                          query: Optional[str] = None) -> RemoteCollection[BuildConfiguration]:
        return self._collection(
            f"scm-repositories/{repository_id}/build-configs",
            BuildConfiguration.from_api_response,
            sort,
            query,
        )
