"""Social login library for third-party access token verification.

Public API:
    - FacebookTokenVerifier: Verify Facebook user tokens via the Graph API
    - FacebookAppCredentials: App ID/secret pair
    - fetch_app_credentials: Read app credentials from Secrets Manager
    - SocialLoginProviderError: Raised when verification cannot complete
"""

from travote_api.lib.social.facebook import (
    FacebookAppCredentials,
    FacebookTokenVerifier,
    SocialLoginProviderError,
    fetch_app_credentials,
)

__all__ = [
    "FacebookAppCredentials",
    "FacebookTokenVerifier",
    "SocialLoginProviderError",
    "fetch_app_credentials",
]
