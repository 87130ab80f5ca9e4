"""Get signer status use case."""

from pydantic import BaseModel

from homie.domain.service import SignerService
from homie.domain.validation import validate_uuid


class GetSignerStatusRequest(BaseModel):
    """Signer status request."""

    signer_uuid: str | None = None


class GetSignerStatusResponse(BaseModel):
    """Signer status response."""

    ok: bool = True
    signer_uuid: str
    status: str
    fid: int | None = None
    public_key: str


class GetSignerStatusUseCase:
    """Use case for polling a signer's approval state."""

    def __init__(self, signer_service: SignerService) -> None:
        self.signer_service = signer_service

    async def execute(self, request: GetSignerStatusRequest) -> GetSignerStatusResponse:
        signer_uuid = validate_uuid(request.signer_uuid, "signer_uuid")
        signer = await self.signer_service.get_signer_status(signer_uuid)
        return GetSignerStatusResponse(
            signer_uuid=signer.signer_uuid,
            status=signer.status.value,
            fid=signer.fid,
            public_key=signer.public_key,
        )
