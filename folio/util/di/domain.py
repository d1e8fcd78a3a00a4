"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import PaginationSettings
from folio.domain.repository import (
    CommentRepository,
    NodeRepository,
    PostRepository,
    RatingRepository,
)
from folio.domain.service import (
    CommentService,
    NodeService,
    OwnershipPolicy,
    Paginator,
    PostService,
    RatingService,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request scope gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_paginator(self, pagination_settings: PaginationSettings) -> Paginator:
        """Provide the sort/paginate engine."""
        return Paginator(settings=pagination_settings)

    @provide(scope=Scope.APP)
    def get_ownership_policy(self) -> OwnershipPolicy:
        """Provide the ownership policy."""
        return OwnershipPolicy()

    @provide
    def get_node_service(self, node_repository: NodeRepository) -> NodeService:
        """Provide node composition service."""
        return NodeService(node_repository=node_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        node_service: NodeService,
        ownership_policy: OwnershipPolicy,
        paginator: Paginator,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            node_service=node_service,
            ownership_policy=ownership_policy,
            paginator=paginator,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        node_service: NodeService,
        ownership_policy: OwnershipPolicy,
        paginator: Paginator,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            node_service=node_service,
            ownership_policy=ownership_policy,
            paginator=paginator,
        )

    @provide
    def get_rating_service(
        self,
        rating_repository: RatingRepository,
        post_service: PostService,
        ownership_policy: OwnershipPolicy,
        paginator: Paginator,
    ) -> RatingService:
        """Provide rating domain service."""
        return RatingService(
            rating_repository=rating_repository,
            post_service=post_service,
            ownership_policy=ownership_policy,
            paginator=paginator,
        )
