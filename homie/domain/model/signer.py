"""Signer entity.

A signer is an app-scoped keypair that authorizes cast publication on
behalf of a user. Its state lives with the hosted API and is only ever
observed here by polling.
"""

from homie.domain.model.common import DomainModel
from homie.domain.value import Fid, SignerStatus, SignerUuid


class Signer(DomainModel):
    """Hosted signer record.

    Business rules:
    - ``fid`` is only known once the user has approved the key request
    - only an ``approved`` signer may publish
    """

    signer_uuid: SignerUuid
    public_key: str
    status: SignerStatus
    fid: Fid | None = None
    signer_approval_url: str | None = None

    @property
    def can_publish(self) -> bool:
        return self.status == SignerStatus.APPROVED
