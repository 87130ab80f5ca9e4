"""Unit tests for HostedComposeUseCase."""

import pytest

from homie.application.usecase.cast import HostedComposeRequest, HostedComposeUseCase
from homie.domain.error import AuthError, ValidationError
from homie.domain.service import CastService, FarcasterApi
from tests.conftest import BOT_SIGNER_UUID
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestHostedComposeUseCase:
    """Tests for HostedComposeUseCase."""

    @pytest.mark.asyncio
    async def test_bot_signer_fallback(self, unit_env):
        """Without a signer the cast goes out under the bot signer."""
        # Arrange
        use_case = HostedComposeUseCase(await unit_env.get(CastService))
        api = await unit_env.get(FarcasterApi)

        # Act
        response = await use_case.execute(HostedComposeRequest(text="gm", fid=123))

        # Assert
        assert response.ok is True
        assert response.cast["text"] == "gm"
        assert api.payloads[-1]["signer_uuid"] == BOT_SIGNER_UUID

    @pytest.mark.asyncio
    async def test_parent_url_kept(self, unit_env):
        use_case = HostedComposeUseCase(await unit_env.get(CastService))
        api = await unit_env.get(FarcasterApi)

        await use_case.execute(
            HostedComposeRequest(
                text="gm", parent_url="https://warpcast.com/~/channel/homie"
            )
        )

        assert api.payloads[-1]["parent"] == "https://warpcast.com/~/channel/homie"

    @pytest.mark.asyncio
    async def test_invalid_fid(self, unit_env):
        use_case = HostedComposeUseCase(await unit_env.get(CastService))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(HostedComposeRequest(text="gm", fid="abc"))

        assert exc_info.value.field == "fid"

    @pytest.mark.asyncio
    async def test_unapproved_signer(self, unit_env):
        """A signer that was never approved cannot publish."""
        use_case = HostedComposeUseCase(await unit_env.get(CastService))
        api = await unit_env.get(FarcasterApi)
        signer = await api.create_signer()

        with pytest.raises(AuthError) as exc_info:
            await use_case.execute(
                HostedComposeRequest(text="gm", signer_uuid=signer.signer_uuid)
            )

        assert exc_info.value.code == "signer_not_approved"
        assert api.payloads == []
