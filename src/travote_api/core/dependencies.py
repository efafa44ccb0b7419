"""FastAPI dependency injection for the shared storage handle and token verifier.

Both objects are created during application startup and stored on
``app.state``; these dependencies hand them to request handlers.
"""

from fastapi import Request

from travote_api.lib.social.facebook import FacebookTokenVerifier
from travote_api.lib.storage.dynamodb import Storage


def get_storage(request: Request) -> Storage:
    """Return the process-wide storage handle.

    Raises:
        RuntimeError: If the application has not been started.
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        msg = "Storage not initialized. Start the application through its lifespan."
        raise RuntimeError(msg)
    return storage


def get_token_verifier(request: Request) -> FacebookTokenVerifier:
    """Return the process-wide Facebook token verifier.

    Raises:
        RuntimeError: If the application has not been started.
    """
    verifier = getattr(request.app.state, "token_verifier", None)
    if verifier is None:
        msg = "Token verifier not initialized. Start the application through its lifespan."
        raise RuntimeError(msg)
    return verifier
