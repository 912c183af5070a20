"""Request checks that run before any target or vote is resolved.

Order matters: the content type is checked first, then the credential.
"""

from fastapi import Request

from ballot.config import AuthSettings
from ballot.domain.model import User
from ballot.domain.service import CredentialService
from ballot.interface.error import UnsupportedMediaTypeError

JSON_MEDIA_TYPE = "application/json"


def require_json_content_type(request: Request) -> None:
    """Reject requests that don't declare a JSON body.

    Raises:
        UnsupportedMediaTypeError: If Content-Type is missing or not JSON
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError()


async def authenticate(
    request: Request,
    auth_settings: AuthSettings,
    credential_service: CredentialService,
) -> User:
    """Resolve the credential header of ``request`` to a user.

    Raises:
        NotAuthenticatedError: If the header is missing or not a valid token
    """
    token = request.headers.get(auth_settings.token_header)
    return await credential_service.resolve(token)
