"""Application layer DI providers."""

from dishka import Scope, provide

from photoshare.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RecoverPasswordUseCase,
    SignupUseCase,
)
from photoshare.application.usecase.photo import (
    DeletePhotoUseCase,
    GetPhotoUseCase,
    ListOwnerPhotosUseCase,
    ListPhotosUseCase,
    SearchPhotosUseCase,
    UpdateTagsUseCase,
    UpdateTitleUseCase,
    UploadPhotoUseCase,
    VotePhotoUseCase,
)
from photoshare.application.usecase.tag import ListTagsUseCase
from photoshare.config import AuthSettings, PaginationSettings
from photoshare.domain.service import (
    ImageProcessor,
    NotificationSender,
    PasswordService,
    PhotoService,
    PhotoValidator,
    RecoveryCodeSender,
    SessionService,
    UserService,
    UserValidator,
)
from photoshare.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Photo use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_photo_use_case(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        photo_validator: PhotoValidator,
        image_processor: ImageProcessor,
        notification_sender: NotificationSender,
    ) -> UploadPhotoUseCase:
        """Provide upload photo use case."""
        return UploadPhotoUseCase(
            photo_service=photo_service,
            user_service=user_service,
            photo_validator=photo_validator,
            image_processor=image_processor,
            notification_sender=notification_sender,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_photo_use_case(
        self, photo_service: PhotoService, user_service: UserService
    ) -> GetPhotoUseCase:
        """Provide get photo use case."""
        return GetPhotoUseCase(photo_service=photo_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_photos_use_case(
        self, photo_service: PhotoService, pagination: PaginationSettings
    ) -> ListPhotosUseCase:
        """Provide list photos use case."""
        return ListPhotosUseCase(photo_service=photo_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_search_photos_use_case(
        self, photo_service: PhotoService, pagination: PaginationSettings
    ) -> SearchPhotosUseCase:
        """Provide search photos use case."""
        return SearchPhotosUseCase(photo_service=photo_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_list_owner_photos_use_case(
        self, photo_service: PhotoService, pagination: PaginationSettings
    ) -> ListOwnerPhotosUseCase:
        """Provide list owner photos use case."""
        return ListOwnerPhotosUseCase(
            photo_service=photo_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_update_title_use_case(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        photo_validator: PhotoValidator,
        notification_sender: NotificationSender,
    ) -> UpdateTitleUseCase:
        """Provide update title use case."""
        return UpdateTitleUseCase(
            photo_service=photo_service,
            user_service=user_service,
            photo_validator=photo_validator,
            notification_sender=notification_sender,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_tags_use_case(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        notification_sender: NotificationSender,
    ) -> UpdateTagsUseCase:
        """Provide update tags use case."""
        return UpdateTagsUseCase(
            photo_service=photo_service,
            user_service=user_service,
            notification_sender=notification_sender,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_photo_use_case(
        self,
        photo_service: PhotoService,
        user_service: UserService,
        image_processor: ImageProcessor,
        notification_sender: NotificationSender,
    ) -> DeletePhotoUseCase:
        """Provide delete photo use case."""
        return DeletePhotoUseCase(
            photo_service=photo_service,
            user_service=user_service,
            image_processor=image_processor,
            notification_sender=notification_sender,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_photo_use_case(
        self, photo_service: PhotoService, user_service: UserService
    ) -> VotePhotoUseCase:
        """Provide vote use case."""
        return VotePhotoUseCase(photo_service=photo_service, user_service=user_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, photo_service: PhotoService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(photo_service=photo_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        user_service: UserService,
        user_validator: UserValidator,
        password_service: PasswordService,
        session_service: SessionService,
        auth_settings: AuthSettings,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            user_validator=user_validator,
            password_service=password_service,
            session_service=session_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        session_service: SessionService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            password_service=password_service,
            session_service=session_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_recover_password_use_case(
        self,
        user_service: UserService,
        session_service: SessionService,
        recovery_code_sender: RecoveryCodeSender,
    ) -> RecoverPasswordUseCase:
        """Provide recover password use case."""
        return RecoverPasswordUseCase(
            user_service=user_service,
            session_service=session_service,
            recovery_code_sender=recovery_code_sender,
        )

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        session_service: SessionService,
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            user_service=user_service,
            password_service=password_service,
            session_service=session_service,
        )
