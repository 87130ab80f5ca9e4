"""Create signer use case."""

import logfire
from pydantic import BaseModel

from homie.domain.service import SignerService
from homie.util.redact import truncate_id


class CreateSignerResponse(BaseModel):
    """Create signer response."""

    ok: bool = True
    signer_uuid: str
    public_key: str
    status: str
    signer_approval_url: str | None = None
    fid: int | None = None


class CreateSignerUseCase:
    """Use case for creating a signer and submitting its key request.

    The signer comes back ``pending_approval``; the user approves it in
    their wallet via ``signer_approval_url`` and the client polls for the
    result.
    """

    def __init__(self, signer_service: SignerService) -> None:
        """Initialize create signer use case.

        Args:
            signer_service: Signer lifecycle domain service
        """
        self.signer_service = signer_service

    async def execute(self) -> CreateSignerResponse:
        """Create and register a signer.

        Raises:
            ConfigurationError: If the API key, app FID or mnemonic is missing
            UpstreamError: If the hosted API rejects a step
        """
        with logfire.span("create_signer"):
            signer = await self.signer_service.create_and_register()
            logfire.info(
                "Signer awaiting approval",
                signer_uuid=truncate_id(signer.signer_uuid),
                status=signer.status.value,
            )
            return CreateSignerResponse(
                signer_uuid=signer.signer_uuid,
                public_key=signer.public_key,
                status=signer.status.value,
                signer_approval_url=signer.signer_approval_url,
                fid=signer.fid,
            )
