"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import (
    AcceptanceService,
    AnswerService,
    CommentService,
    DeletionService,
    JWTService,
    ListingService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_acceptance_service(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> AcceptanceService:
        """Provide acceptance/pin domain service."""
        return AcceptanceService(
            question_service=question_service, answer_service=answer_service
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_deletion_service(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
    ) -> DeletionService:
        """Provide soft-delete domain service."""
        return DeletionService(
            question_service=question_service,
            answer_service=answer_service,
            comment_service=comment_service,
        )

    @provide
    def get_listing_service(
        self,
        question_repository: QuestionRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> ListingService:
        """Provide listing domain service."""
        return ListingService(
            question_repository=question_repository,
            question_service=question_service,
            answer_service=answer_service,
            comment_service=comment_service,
            vote_service=vote_service,
            user_service=user_service,
        )
