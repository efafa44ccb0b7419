"""Vote service: verified votes for places."""

import asyncio

from loguru import logger

from travote_api.lib.social.facebook import FacebookTokenVerifier
from travote_api.lib.storage.dynamodb import Storage, increment_counter
from travote_api.schemas.vote import VoteRequest, VoteResponse

VOTES_ATTRIBUTE = "votes"


async def vote_for_place(storage: Storage, verifier: FacebookTokenVerifier, request: VoteRequest) -> VoteResponse:
    """Record a vote after verifying the voter's Facebook token.

    An unverified token yields ``success=False`` and leaves the place untouched.

    Args:
        storage: Shared storage handle.
        verifier: Facebook token verifier.
        request: Vote request body.

    Returns:
        VoteResponse with the updated vote count on success.

    Raises:
        SocialLoginProviderError: If the token cannot be verified.
        ItemNotFoundError: If the place does not exist.
        StorageError: If the vote cannot be recorded.
    """
    verified = await verifier.verify(request.fb_id, request.fb_access_token)
    if not verified:
        logger.info(f"Rejected vote for place {request.place_id}: token not verified")
        return VoteResponse(success=False)

    votes = await asyncio.to_thread(
        increment_counter,
        storage.places,
        {"abbr": request.place_abbr, "id": request.place_id},
        VOTES_ATTRIBUTE,
    )
    logger.info(f"Recorded vote for place {request.place_id} in {request.place_abbr} (votes={votes})")
    return VoteResponse(success=True, votes=votes)
