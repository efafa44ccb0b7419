"""Facebook access token verification.

Uses the app ID and secret stored in AWS Secrets Manager to obtain an app
access token from the Graph API, then inspects the user's token with
``/debug_token``.  A token is accepted only when Facebook reports it valid
and issued to the claimed user.
"""

import asyncio
import json
from dataclasses import dataclass
from typing import Any

import httpx
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

PROVIDER_NAME = "facebook"
DEFAULT_GRAPH_URL = "https://graph.facebook.com"
DEFAULT_TIMEOUT = 10.0


class SocialLoginProviderError(Exception):
    """Raised when token verification cannot reach a verdict.

    Covers secret retrieval failures and Graph API transport or service
    errors.  A token that Facebook reports invalid is not an error.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


@dataclass(frozen=True)
class FacebookAppCredentials:
    """Facebook app ID and secret."""

    app_id: str
    app_secret: str


def fetch_app_credentials(secrets_client: Any, secret_name: str) -> FacebookAppCredentials:
    """Read the Facebook app credentials from Secrets Manager.

    The secret is a JSON string with ``travote_fb_app_id`` and
    ``travote_fb_app_secret`` keys.

    Args:
        secrets_client: boto3 Secrets Manager client.
        secret_name: Secret ID.

    Returns:
        Parsed app credentials.

    Raises:
        SocialLoginProviderError: If the secret cannot be read or parsed.
    """
    try:
        result = secrets_client.get_secret_value(SecretId=secret_name, VersionStage="AWSCURRENT")
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "Unknown")
        logger.warning(f"Secrets Manager error {code} reading {secret_name}")
        raise SocialLoginProviderError(PROVIDER_NAME, f"Could not read app secret ({code})") from e
    except BotoCoreError as e:
        logger.warning(f"Secrets Manager unavailable reading {secret_name}")
        raise SocialLoginProviderError(PROVIDER_NAME, "Could not read app secret") from e

    secret_string = result.get("SecretString")
    if secret_string is None:
        msg = "Expected app secret to be stored as a string"
        raise SocialLoginProviderError(PROVIDER_NAME, msg)

    try:
        data = json.loads(secret_string)
        return FacebookAppCredentials(
            app_id=str(data["travote_fb_app_id"]),
            app_secret=str(data["travote_fb_app_secret"]),
        )
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        logger.warning(f"Malformed app secret {secret_name}: {e}")
        raise SocialLoginProviderError(PROVIDER_NAME, "Malformed app secret") from e


class FacebookTokenVerifier:
    """Verify Facebook user access tokens through the Graph API.

    App credentials are fetched on first use and reused for the lifetime of
    the verifier.
    """

    def __init__(
        self,
        secrets_client: Any,
        secret_name: str,
        graph_url: str = DEFAULT_GRAPH_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._secrets_client = secrets_client
        self._secret_name = secret_name
        self._graph_url = graph_url.rstrip("/")
        self._timeout = timeout
        self._credentials: FacebookAppCredentials | None = None

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    async def _get_credentials(self) -> FacebookAppCredentials:
        if self._credentials is None:
            self._credentials = await asyncio.to_thread(
                fetch_app_credentials, self._secrets_client, self._secret_name
            )
        return self._credentials

    async def verify(self, user_id: str, access_token: str) -> bool:
        """Check that ``access_token`` is a valid token for ``user_id``.

        Args:
            user_id: Facebook user ID claimed by the caller.
            access_token: User access token to inspect.

        Returns:
            True if Facebook reports the token valid and issued to ``user_id``.

        Raises:
            SocialLoginProviderError: On secret retrieval, transport or service errors.
        """
        credentials = await self._get_credentials()

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                app_token = await self._fetch_app_access_token(client, credentials)
                response = await client.get(
                    f"{self._graph_url}/debug_token",
                    params={"input_token": access_token, "access_token": app_token},
                )
                response.raise_for_status()
            data = response.json()
        except SocialLoginProviderError:
            raise
        except httpx.TimeoutException as e:
            logger.warning("Facebook Graph API timeout")
            raise SocialLoginProviderError(PROVIDER_NAME, "Token verification timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Facebook Graph API HTTP error {e.response.status_code}")
            raise SocialLoginProviderError(
                PROVIDER_NAME, f"Provider returned HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Facebook Graph API connection error")
            raise SocialLoginProviderError(PROVIDER_NAME, "Connection to Facebook failed") from e
        except ValueError as e:
            logger.warning(f"Failed to decode Facebook debug_token response: {e}")
            raise SocialLoginProviderError(PROVIDER_NAME, "Malformed debug_token response") from e

        return self._parse_debug_response(data, user_id)

    async def _fetch_app_access_token(self, client: httpx.AsyncClient, credentials: FacebookAppCredentials) -> str:
        response = await client.get(
            f"{self._graph_url}/oauth/access_token",
            params={
                "client_id": credentials.app_id,
                "client_secret": credentials.app_secret,
                "grant_type": "client_credentials",
            },
        )
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise SocialLoginProviderError(PROVIDER_NAME, "Malformed access_token response")
        token = data.get("access_token")
        if not token:
            raise SocialLoginProviderError(PROVIDER_NAME, "App access token missing from response")
        return token

    def _parse_debug_response(self, data: Any, user_id: str) -> bool:
        """Accept the token only if it is valid and belongs to ``user_id``.

        Raises:
            SocialLoginProviderError: If the response is not a JSON object.
        """
        if not isinstance(data, dict):
            raise SocialLoginProviderError(PROVIDER_NAME, "Malformed debug_token response")
        info = data.get("data") or {}
        if not isinstance(info, dict):
            raise SocialLoginProviderError(PROVIDER_NAME, "Malformed debug_token response")
        is_valid = info.get("is_valid") is True
        matches_user = str(info.get("user_id", "")) == user_id
        if is_valid and not matches_user:
            logger.info("Facebook token is valid but issued to a different user")
        return is_valid and matches_user
