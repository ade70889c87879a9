"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    PinAnswerUseCase,
)
from qna.application.usecase.comment import CreateCommentUseCase, DeleteCommentUseCase
from qna.application.usecase.notification import (
    CountUnreadNotificationsUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from qna.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from qna.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from qna.application.usecase.vote import CastVoteUseCase
from qna.config import ListingSettings
from qna.domain.repository import UnitOfWork
from qna.domain.service import (
    AcceptanceService,
    AnswerService,
    CommentService,
    DeletionService,
    ListingService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, listing_service: ListingService, listing_settings: ListingSettings
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            listing_service=listing_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, listing_service: ListingService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(listing_service=listing_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, deletion_service: DeletionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(deletion_service=deletion_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(acceptance_service=acceptance_service)

    @provide(scope=Scope.REQUEST)
    def get_pin_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> PinAnswerUseCase:
        """Provide pin answer use case."""
        return PinAnswerUseCase(acceptance_service=acceptance_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, deletion_service: DeletionService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(deletion_service=deletion_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        answer_service: AnswerService,
        comment_service: CommentService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            answer_service=answer_service,
            comment_service=comment_service,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, deletion_service: DeletionService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(deletion_service=deletion_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_count_unread_notifications_use_case(
        self, notification_service: NotificationService
    ) -> CountUnreadNotificationsUseCase:
        """Provide unread notification count use case."""
        return CountUnreadNotificationsUseCase(
            notification_service=notification_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)
