"""Sign-In-With-Farcaster use case."""

from pydantic import BaseModel, ConfigDict, Field

from homie.domain.service import AuthService


class SignInRequest(BaseModel):
    """SIWF sign-in request."""

    message: str | None = None
    signature: str | None = None
    nonce: str | None = None
    domain: str | None = None
    host: str | None = None  # Request Host header, used when no domain is claimed
    token: str | None = None


class SignInProfile(BaseModel):
    """Profile of the signed-in user."""

    model_config = ConfigDict(populate_by_name=True)

    fid: int | None = None
    username: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    avatar: str | None = None


class SignInResponse(BaseModel):
    """SIWF sign-in response."""

    ok: bool = True
    profile: SignInProfile


class SignInUseCase:
    """Use case for signing in with a SIWF message."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Verify the SIWF payload and return the user's profile.

        Raises:
            AuthError: If verification fails for any reason
        """
        profile = await self.auth_service.sign_in(
            message=request.message,
            signature=request.signature,
            nonce=request.nonce,
            domain=request.domain,
            host=request.host,
            token=request.token,
        )
        return SignInResponse(
            profile=SignInProfile(
                fid=profile.fid,
                username=profile.username,
                display_name=profile.display_name,
                avatar=profile.avatar,
            )
        )
