"""
Dishka DI Container Setup.

- Registers all dependencies (Prisma client, repositories, observer, service)
- Maps abstract ports to concrete implementations
- Manages lifecycle (Scope.APP = singleton, Scope.REQUEST = per request)

Flow:
  Container → provides → PrismaCommentRepository → to → CommentService
                                    ↓
                            uses CommentRepository interface
"""

from typing import AsyncIterable
from dishka import Provider, Scope, make_async_container, provide, AsyncContainer
from prisma import Prisma
from dashcomments.application.services import CommentService
from dashcomments.config.settings import Config
from dashcomments.domain.ports.comment_events import CommentEventObserver
from dashcomments.domain.ports.repositories import (
    CommentRepository,
    DashboardRepository,
    SpaceRepository,
)
from dashcomments.infrastructure.persistence import (
    PrismaCommentRepository,
    PrismaDashboardRepository,
    PrismaSpaceRepository,
)
from dashcomments.infrastructure.telemetry import PrometheusCommentObserver


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== TELEMETRY ====================

    @provide(scope=Scope.APP)
    def get_comment_event_observer(self) -> CommentEventObserver:
        return PrometheusCommentObserver()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_dashboard_repository(self, prisma: Prisma) -> DashboardRepository:
        return PrismaDashboardRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_space_repository(self, prisma: Prisma) -> SpaceRepository:
        return PrismaSpaceRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        """
        - Return type is ABSTRACT (CommentRepository)
        - Implementation is CONCRETE (PrismaCommentRepository)
        """
        return PrismaCommentRepository(prisma)

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_comment_service(
        self,
        dashboard_repository: DashboardRepository,
        space_repository: SpaceRepository,
        comment_repository: CommentRepository,
        event_observer: CommentEventObserver,
    ) -> CommentService:
        return CommentService(
            dashboard_repository=dashboard_repository,
            space_repository=space_repository,
            comment_repository=comment_repository,
            event_observer=event_observer,
            legacy_owner_delete=Config.LEGACY_OWNER_DELETE,
        )


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup, before the FastAPI app is created
    (Dishka adds middleware, which must happen before the app starts).
    """
    return make_async_container(AppProvider())
