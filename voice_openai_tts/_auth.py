import abc

from ._exceptions import MissingCredentialError
from ._models import API_KEY_ENV


class AuthBase(abc.ABC):
    """
    Abstract base class for authentication methods.
    """

    @abc.abstractmethod
    async def get_auth_headers(self) -> dict[str, str]:
        """
        Get authentication headers asynchronously.

        Returns:
            Dictionary of headers to include in the request.
        """
        raise NotImplementedError


class StaticKeyAuth(AuthBase):
    """
    Authentication using a static OpenAI API key.

    Args:
        api_key: The OpenAI API key.

    Examples:
        >>> auth = StaticKeyAuth("sk-your-key")
        >>> headers = await auth.get_auth_headers()
        >>> print(headers)
        {'Authorization': 'Bearer sk-your-key'}
    """

    def __init__(self, api_key: str):
        if not api_key:
            raise MissingCredentialError(f"{API_KEY_ENV} required for OpenAI TTS")
        self._api_key = api_key

    def __repr__(self) -> str:
        return "StaticKeyAuth(api_key=***)"

    async def get_auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}
