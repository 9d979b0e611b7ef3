# =======================================================================================
# gym_admin/backend.py - Backend REST Client
# =======================================================================================
import logging
from typing import Any, List, Optional, Type, TypeVar
import httpx
from pydantic import BaseModel, ValidationError
from .config import config
from .utils.exceptions import RequestError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_response(model: Type[ModelT], data: Any) -> ModelT:
    """Validate a response body, treating a malformed body as a failed request."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Unexpected {model.__name__} payload: {e}")
        raise RequestError(f"Unexpected {model.__name__} payload", detail=str(e)) from e


def parse_list(model: Type[ModelT], data: Any) -> List[ModelT]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise RequestError(f"Expected a list of {model.__name__}", detail=data)
    return [parse_response(model, item) for item in data]


class BackendClient:
    """Owns the HTTP connection pool to the facility backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = f"{(base_url or config.API_BASE_URL).rstrip('/')}/api"
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
        )

    async def request(self, method: str, path: str, json: Any = None, params: dict = None) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        try:
            response = await self.client.request(method, path, json=json, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"API timeout: {method} {path} after {self.timeout}s")
            raise RequestError(f"{method} {path} timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"API error: {method} {path}: {e}")
            raise RequestError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            detail = self._error_detail(response)
            logger.error(f"API error: {method} {path} -> {response.status_code} {detail}")
            raise RequestError(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise RequestError(
                f"{method} {path} returned an invalid body", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text or None

    async def get(self, path: str, params: dict = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def aclose(self) -> None:
        await self.client.aclose()
