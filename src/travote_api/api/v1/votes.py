"""Vote API endpoint for Facebook-authenticated votes for places."""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from travote_api.core.dependencies import get_storage, get_token_verifier
from travote_api.lib.social.facebook import FacebookTokenVerifier, SocialLoginProviderError
from travote_api.lib.storage.dynamodb import Storage
from travote_api.lib.storage.errors import ItemNotFoundError, StorageError
from travote_api.schemas.common import ErrorResponse
from travote_api.schemas.vote import VoteRequest, VoteResponse
from travote_api.services.vote_service import vote_for_place

votes_router = APIRouter(prefix="/places", tags=["votes"])


@votes_router.post(
    "/vote",
    response_model=VoteResponse,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def vote_place(
    request: VoteRequest,
    storage: Storage = Depends(get_storage),  # noqa: B008
    verifier: FacebookTokenVerifier = Depends(get_token_verifier),  # noqa: B008
) -> VoteResponse:
    """Vote for a place.

    The Facebook token must be valid and belong to ``fb_id``; otherwise the
    response reports ``success: false`` and no vote is recorded.
    """
    try:
        return await vote_for_place(storage, verifier, request)
    except SocialLoginProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Login provider is temporarily unavailable. Please retry later.",
        ) from e
    except ItemNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Place {request.place_id} not found in {request.place_abbr}.",
        ) from e
    except StorageError as e:
        logger.error(f"Storage error while recording vote: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Vote could not be recorded.",
        ) from e
