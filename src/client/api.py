import httpx

from src.utils.logger import get_logger

logger = get_logger(__name__)

PROFILE_PATH = "/volunteer/profile"
INVALID_RESPONSE_MESSAGE = "Invalid response from server"


class ProfileApiError(Exception):
    """Raised when the profile API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ProfileApiClient:
    """Thin async client for the volunteer profile endpoints."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "ProfileApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_profile(self) -> dict:
        return await self._request("GET", PROFILE_PATH)

    async def update_profile(self, payload: dict) -> dict:
        return await self._request("PUT", PROFILE_PATH, json=payload)

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"Profile request failed: {e}", method=method, path=path)
            raise ProfileApiError(str(e) or "Network error") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "Profile request rejected",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ProfileApiError(message, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(
                "Profile response is not JSON",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ProfileApiError(
                INVALID_RESPONSE_MESSAGE, status_code=response.status_code
            ) from e
        if not isinstance(body, dict):
            raise ProfileApiError(
                INVALID_RESPONSE_MESSAGE, status_code=response.status_code
            )
        return body


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Request failed with status {response.status_code}"

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status {response.status_code}"
