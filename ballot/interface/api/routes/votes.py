"""Vote routes.

Mutating routes check, in order: JSON content type, credential token,
then the target or vote itself.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request, Response, status

from ballot.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    CountVotesRequest,
    CountVotesResponse,
    CountVotesUseCase,
    DeleteVoteRequest,
    DeleteVoteUseCase,
)
from ballot.config import AuthSettings
from ballot.domain.service import CredentialService
from ballot.domain.value import VotableType
from ballot.interface.api.preconditions import authenticate, require_json_content_type

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


async def _cast_vote(
    votable_type: VotableType,
    votable_id: int,
    request: Request,
    auth_settings: AuthSettings,
    credential_service: CredentialService,
    cast_vote_use_case: CastVoteUseCase,
) -> CastVoteResponse:
    user = await authenticate(request, auth_settings, credential_service)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            user_id=user.id,
        )
    )


@router.post(
    "/articles/{article_id}/votes",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_content_type)],
)
async def vote_on_article(
    article_id: int,
    request: Request,
    auth_settings: FromDishka[AuthSettings],
    credential_service: FromDishka[CredentialService],
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote for an article.

    Returns:
        Id of the new vote

    Raises:
        UnsupportedMediaTypeError: 415 when the body isn't declared as JSON
        NotAuthenticatedError: 401 without a valid token
        NotFoundError: 404 when the article doesn't exist
        DuplicateVoteError: 400 when the user already voted for it
    """
    return await _cast_vote(
        VotableType.ARTICLE,
        article_id,
        request,
        auth_settings,
        credential_service,
        cast_vote_use_case,
    )


@router.post(
    "/comments/{comment_id}/votes",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_content_type)],
)
async def vote_on_comment(
    comment_id: int,
    request: Request,
    auth_settings: FromDishka[AuthSettings],
    credential_service: FromDishka[CredentialService],
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote for a comment.

    Same responses as voting for an article.
    """
    return await _cast_vote(
        VotableType.COMMENT,
        comment_id,
        request,
        auth_settings,
        credential_service,
        cast_vote_use_case,
    )


@router.delete(
    "/votes/{vote_id}",
    response_class=Response,
    dependencies=[Depends(require_json_content_type)],
)
async def delete_vote(
    vote_id: int,
    request: Request,
    auth_settings: FromDishka[AuthSettings],
    credential_service: FromDishka[CredentialService],
    delete_vote_use_case: FromDishka[DeleteVoteUseCase],
) -> Response:
    """Retract one's own vote.

    Returns:
        200 with an empty body

    Raises:
        UnsupportedMediaTypeError: 415 when the body isn't declared as JSON
        NotAuthenticatedError: 401 without a valid token
        NotFoundError: 404 when the vote doesn't exist
        VoteOwnershipError: 403 when the vote belongs to someone else
    """
    user = await authenticate(request, auth_settings, credential_service)
    await delete_vote_use_case.execute(
        DeleteVoteRequest(vote_id=vote_id, user_id=user.id)
    )
    return Response(status_code=status.HTTP_200_OK)


@router.get("/articles/{article_id}/votes", response_model=CountVotesResponse)
async def count_article_votes(
    article_id: int,
    count_votes_use_case: FromDishka[CountVotesUseCase],
) -> CountVotesResponse:
    """Number of votes an article has received."""
    return await count_votes_use_case.execute(
        CountVotesRequest(votable_type=VotableType.ARTICLE, votable_id=article_id)
    )


@router.get("/comments/{comment_id}/votes", response_model=CountVotesResponse)
async def count_comment_votes(
    comment_id: int,
    count_votes_use_case: FromDishka[CountVotesUseCase],
) -> CountVotesResponse:
    """Number of votes a comment has received."""
    return await count_votes_use_case.execute(
        CountVotesRequest(votable_type=VotableType.COMMENT, votable_id=comment_id)
    )
