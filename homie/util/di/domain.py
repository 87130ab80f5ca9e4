"""Domain layer DI providers."""

from dishka import Scope, provide

from homie.config import Settings
from homie.domain.repository import CuratedListItemRepository, CuratedListRepository
from homie.domain.service import (
    AuthService,
    CastService,
    CuratedListService,
    CurationService,
    FarcasterApi,
    FeaturedAccountPolicy,
    GatewayService,
    HubSubmitter,
    ImageHost,
    MediaService,
    PreferenceStore,
    SignerService,
    SiwfVerifier,
    TokenVerifier,
    TypedDataSigner,
    UserSearchService,
)
from homie.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self,
        token_verifier: TokenVerifier,
        siwf_verifier: SiwfVerifier,
        farcaster_api: FarcasterApi,
        settings: Settings,
    ) -> AuthService:
        """Provide authentication domain service.

        The mock sign-in bypass is only enabled in development.
        """
        return AuthService(
            token_verifier=token_verifier,
            siwf_verifier=siwf_verifier,
            farcaster_api=farcaster_api,
            allow_dev_bypass=settings.is_development,
        )

    @provide
    def get_signer_service(
        self,
        farcaster_api: FarcasterApi,
        typed_data_signer: TypedDataSigner,
        settings: Settings,
    ) -> SignerService:
        """Provide signer lifecycle domain service."""
        return SignerService(
            farcaster_api=farcaster_api,
            typed_data_signer=typed_data_signer,
            app_fid=settings.farcaster.app_fid,
            app_mnemonic=settings.farcaster.app_mnemonic,
        )

    @provide
    def get_cast_service(
        self,
        farcaster_api: FarcasterApi,
        hub_submitter: HubSubmitter,
        signer_service: SignerService,
        settings: Settings,
    ) -> CastService:
        """Provide cast publishing domain service."""
        return CastService(
            farcaster_api=farcaster_api,
            hub_submitter=hub_submitter,
            signer_service=signer_service,
            bot_signer_uuid=settings.neynar.signer_uuid,
        )

    @provide
    def get_gateway_service(self, farcaster_api: FarcasterApi) -> GatewayService:
        """Provide read proxy domain service."""
        return GatewayService(farcaster_api=farcaster_api)

    @provide
    def get_user_search_service(
        self,
        farcaster_api: FarcasterApi,
        policy: FeaturedAccountPolicy,
        settings: Settings,
    ) -> UserSearchService:
        """Provide user search domain service."""
        return UserSearchService(
            farcaster_api=farcaster_api,
            policy=policy,
            result_cap=settings.search.result_cap,
        )

    @provide
    def get_curated_list_service(
        self,
        list_repository: CuratedListRepository,
        item_repository: CuratedListItemRepository,
    ) -> CuratedListService:
        """Provide curated list domain service."""
        return CuratedListService(
            list_repository=list_repository, item_repository=item_repository
        )

    @provide
    def get_media_service(self, image_host: ImageHost, settings: Settings) -> MediaService:
        """Provide media upload domain service."""
        return MediaService(image_host=image_host, max_bytes=settings.imgbb.max_bytes)

    @provide
    def get_curation_service(self, preference_store: PreferenceStore) -> CurationService:
        """Provide curation preferences domain service."""
        return CurationService(preference_store=preference_store)
