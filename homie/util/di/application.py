"""Application layer DI providers."""

from dishka import Scope, provide

from homie.application.usecase.auth import ResolveSessionUseCase, SignInUseCase
from homie.application.usecase.cast import (
    ComposeUseCase,
    HostedComposeUseCase,
    ReactUseCase,
    ReplyUseCase,
    UnreactUseCase,
)
from homie.application.usecase.curated_list import (
    AddItemUseCase,
    CreateListUseCase,
    DeleteListUseCase,
    GetItemsUseCase,
    GetListsUseCase,
    RemoveItemUseCase,
)
from homie.application.usecase.curation import (
    AddPreferenceUseCase,
    DeletePreferenceUseCase,
    ListPreferencesUseCase,
    UpdatePreferenceUseCase,
)
from homie.application.usecase.feed import (
    GetFeedUseCase,
    GetNotificationsUseCase,
    GetProfileUseCase,
    GetTrendingUseCase,
    ListChannelsUseCase,
    ListFriendsUseCase,
    SearchUsersUseCase,
)
from homie.application.usecase.media import UploadImageUseCase
from homie.application.usecase.signer import (
    CreateSignerUseCase,
    GetSignerStatusUseCase,
)
from homie.domain.service import (
    AuthService,
    CastService,
    CuratedListService,
    CurationService,
    GatewayService,
    MediaService,
    SignerService,
    UserSearchService,
)
from homie.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_session_use_case(
        self, auth_service: AuthService
    ) -> ResolveSessionUseCase:
        """Provide resolve session use case."""
        return ResolveSessionUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_in_use_case(self, auth_service: AuthService) -> SignInUseCase:
        """Provide SIWF sign-in use case."""
        return SignInUseCase(auth_service=auth_service)

    # Signer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_signer_use_case(
        self, signer_service: SignerService
    ) -> CreateSignerUseCase:
        """Provide create signer use case."""
        return CreateSignerUseCase(signer_service=signer_service)

    @provide(scope=Scope.REQUEST)
    def get_signer_status_use_case(
        self, signer_service: SignerService
    ) -> GetSignerStatusUseCase:
        """Provide signer status use case."""
        return GetSignerStatusUseCase(signer_service=signer_service)

    # Cast use cases
    @provide(scope=Scope.REQUEST)
    def get_compose_use_case(self, cast_service: CastService) -> ComposeUseCase:
        """Provide direct hub compose use case."""
        return ComposeUseCase(cast_service=cast_service)

    @provide(scope=Scope.REQUEST)
    def get_hosted_compose_use_case(
        self, cast_service: CastService
    ) -> HostedComposeUseCase:
        """Provide hosted compose use case."""
        return HostedComposeUseCase(cast_service=cast_service)

    @provide(scope=Scope.REQUEST)
    def get_reply_use_case(self, cast_service: CastService) -> ReplyUseCase:
        """Provide reply use case."""
        return ReplyUseCase(cast_service=cast_service)

    @provide(scope=Scope.REQUEST)
    def get_react_use_case(self, cast_service: CastService) -> ReactUseCase:
        """Provide react use case."""
        return ReactUseCase(cast_service=cast_service)

    @provide(scope=Scope.REQUEST)
    def get_unreact_use_case(self, cast_service: CastService) -> UnreactUseCase:
        """Provide unreact use case."""
        return UnreactUseCase(cast_service=cast_service)

    # Read use cases
    @provide(scope=Scope.REQUEST)
    def get_feed_use_case(self, gateway_service: GatewayService) -> GetFeedUseCase:
        """Provide feed use case."""
        return GetFeedUseCase(gateway_service=gateway_service)

    @provide(scope=Scope.REQUEST)
    def get_list_channels_use_case(
        self, gateway_service: GatewayService
    ) -> ListChannelsUseCase:
        """Provide list channels use case."""
        return ListChannelsUseCase(gateway_service=gateway_service)

    @provide(scope=Scope.REQUEST)
    def get_list_friends_use_case(
        self, gateway_service: GatewayService
    ) -> ListFriendsUseCase:
        """Provide list friends use case."""
        return ListFriendsUseCase(gateway_service=gateway_service)

    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(
        self, gateway_service: GatewayService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(gateway_service=gateway_service)

    @provide(scope=Scope.REQUEST)
    def get_trending_use_case(
        self, gateway_service: GatewayService
    ) -> GetTrendingUseCase:
        """Provide trending use case."""
        return GetTrendingUseCase(gateway_service=gateway_service)

    @provide(scope=Scope.REQUEST)
    def get_notifications_use_case(
        self, gateway_service: GatewayService
    ) -> GetNotificationsUseCase:
        """Provide notifications use case."""
        return GetNotificationsUseCase(gateway_service=gateway_service)

    @provide(scope=Scope.REQUEST)
    def get_search_users_use_case(
        self, search_service: UserSearchService
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(search_service=search_service)

    # Media use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_image_use_case(
        self, media_service: MediaService
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(media_service=media_service)

    # Curated list use cases
    @provide(scope=Scope.REQUEST)
    def get_lists_use_case(
        self, curated_list_service: CuratedListService
    ) -> GetListsUseCase:
        """Provide get lists use case."""
        return GetListsUseCase(curated_list_service=curated_list_service)

    @provide(scope=Scope.REQUEST)
    def get_create_list_use_case(
        self, curated_list_service: CuratedListService
    ) -> CreateListUseCase:
        """Provide create list use case."""
        return CreateListUseCase(curated_list_service=curated_list_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_list_use_case(
        self, curated_list_service: CuratedListService
    ) -> DeleteListUseCase:
        """Provide delete list use case."""
        return DeleteListUseCase(curated_list_service=curated_list_service)

    @provide(scope=Scope.REQUEST)
    def get_items_use_case(
        self, curated_list_service: CuratedListService
    ) -> GetItemsUseCase:
        """Provide get items use case."""
        return GetItemsUseCase(curated_list_service=curated_list_service)

    @provide(scope=Scope.REQUEST)
    def get_add_item_use_case(
        self, curated_list_service: CuratedListService
    ) -> AddItemUseCase:
        """Provide add item use case."""
        return AddItemUseCase(curated_list_service=curated_list_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_item_use_case(
        self, curated_list_service: CuratedListService
    ) -> RemoveItemUseCase:
        """Provide remove item use case."""
        return RemoveItemUseCase(curated_list_service=curated_list_service)

    # Curation use cases
    @provide(scope=Scope.REQUEST)
    def get_list_preferences_use_case(
        self, curation_service: CurationService
    ) -> ListPreferencesUseCase:
        """Provide list preferences use case."""
        return ListPreferencesUseCase(curation_service=curation_service)

    @provide(scope=Scope.REQUEST)
    def get_add_preference_use_case(
        self, curation_service: CurationService
    ) -> AddPreferenceUseCase:
        """Provide add preference use case."""
        return AddPreferenceUseCase(curation_service=curation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_preference_use_case(
        self, curation_service: CurationService
    ) -> UpdatePreferenceUseCase:
        """Provide update preference use case."""
        return UpdatePreferenceUseCase(curation_service=curation_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_preference_use_case(
        self, curation_service: CurationService
    ) -> DeletePreferenceUseCase:
        """Provide delete preference use case."""
        return DeletePreferenceUseCase(curation_service=curation_service)
