import os
import sys
import time
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

os.environ.setdefault(
    "SERVICE_AUTH_SECRET", "test-secret-for-the-dashboard-comments-suite"
)

from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from dashcomments.application.services import CommentService
from dashcomments.config.settings import Config
from dashcomments.domain.authorization.roles import build_ability
from dashcomments.domain.entities import Comment, Dashboard, SessionUser, SpaceSummary
from dashcomments.domain.exceptions import EntityNotFoundError
from dashcomments.domain.ports.comment_events import CommentEventObserver
from dashcomments.domain.ports.repositories import (
    CommentRepository,
    DashboardRepository,
    SpaceRepository,
)
from dashcomments.domain.services.comment_threads import group_comments_by_tile
from dashcomments.domain.value_objects import (
    CommentId,
    DashboardUuid,
    OrganizationUuid,
    UserUuid,
)
from dashcomments.fastapi_app import create_fastapi_app

ORG = "00000000-0000-4000-8000-000000000001"
OTHER_ORG = "00000000-0000-4000-8000-000000000002"
PROJECT = "10000000-0000-4000-8000-000000000001"
OTHER_PROJECT = "10000000-0000-4000-8000-000000000002"
SPACE = "20000000-0000-4000-8000-000000000001"
PRIVATE_SPACE = "20000000-0000-4000-8000-000000000002"
DASHBOARD = "30000000-0000-4000-8000-000000000001"
PRIVATE_DASHBOARD = "30000000-0000-4000-8000-000000000002"
OTHER_DASHBOARD = "30000000-0000-4000-8000-000000000003"
MISSING_DASHBOARD = "30000000-0000-4000-8000-00000000dead"
TILE = "40000000-0000-4000-8000-000000000001"
OTHER_TILE = "40000000-0000-4000-8000-000000000002"

VIEWER = "50000000-0000-4000-8000-000000000001"
COMMENTER = "50000000-0000-4000-8000-000000000002"
EDITOR = "50000000-0000-4000-8000-000000000003"
ADMIN = "50000000-0000-4000-8000-000000000004"
OUTSIDER = "50000000-0000-4000-8000-000000000005"
SPACE_MEMBER = "50000000-0000-4000-8000-000000000006"


# ==================== IN-MEMORY PORTS ====================


class InMemoryDashboardRepository(DashboardRepository):
    def __init__(self):
        self.dashboards: dict[str, Dashboard] = {}

    def add(self, dashboard: Dashboard) -> None:
        self.dashboards[dashboard.dashboard_uuid.value] = dashboard

    async def get_by_id(self, dashboard_uuid):
        return self.dashboards.get(dashboard_uuid.value)


class InMemorySpaceRepository(SpaceRepository):
    def __init__(self):
        self.spaces: dict[str, SpaceSummary] = {}
        self.error: Exception | None = None
        self.lookups = 0

    def add(self, space: SpaceSummary) -> None:
        self.spaces[space.space_uuid] = space

    async def get_space_summary(self, space_uuid):
        self.lookups += 1
        if self.error is not None:
            raise self.error
        return self.spaces.get(space_uuid)


class InMemoryCommentRepository(CommentRepository):
    def __init__(self):
        self.comments: dict[str, Comment] = {}
        self.calls: list[str] = []

    @property
    def mutations(self) -> list[str]:
        return [c for c in self.calls if c in ("create", "resolve", "delete")]

    async def create(self, comment):
        self.calls.append("create")
        self.comments[comment.comment_id.value] = comment
        return comment.comment_id

    async def find_for_dashboard(self, dashboard_uuid, user_uuid, can_remove_any):
        self.calls.append("find")
        comments = [
            replace(c)
            for c in self.comments.values()
            if c.dashboard_uuid == dashboard_uuid
        ]
        return group_comments_by_tile(comments, user_uuid, can_remove_any)

    async def get_by_id(self, comment_id):
        self.calls.append("get")
        return self.comments.get(comment_id.value)

    async def resolve(self, comment_id):
        self.calls.append("resolve")
        comment = self.comments.get(comment_id.value)
        if comment is None:
            raise EntityNotFoundError(f"Comment {comment_id.value} not found")
        comment.resolve()

    async def delete(self, comment_id):
        self.calls.append("delete")
        if self.comments.pop(comment_id.value, None) is None:
            return False
        # Mirror the reply_to cascade of the database
        children = [
            c.comment_id
            for c in list(self.comments.values())
            if c.reply_to is not None and c.reply_to.value == comment_id.value
        ]
        for child_id in children:
            await self.delete(child_id)
        return True


class RecordingObserver(CommentEventObserver):
    def __init__(self):
        self.events = []
        self.decisions = []

    def track(self, event):
        self.events.append(event)

    def track_access_decision(self, decision):
        self.decisions.append(decision)


class InMemoryProvider(Provider):
    """Wires the CommentService to the in-memory ports for API tests."""

    def __init__(self, dashboards, spaces, comments, observer, legacy_owner_delete):
        super().__init__()
        self._dashboards = dashboards
        self._spaces = spaces
        self._comments = comments
        self._observer = observer
        self._legacy_owner_delete = legacy_owner_delete

    @provide(scope=Scope.APP)
    def get_dashboard_repository(self) -> DashboardRepository:
        return self._dashboards

    @provide(scope=Scope.APP)
    def get_space_repository(self) -> SpaceRepository:
        return self._spaces

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self._comments

    @provide(scope=Scope.APP)
    def get_comment_event_observer(self) -> CommentEventObserver:
        return self._observer

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
            legacy_owner_delete=self._legacy_owner_delete,
        )


# ==================== WORLD ====================


@pytest.fixture()
def ids():
    return SimpleNamespace(**{k: v for k, v in globals().items() if k.isupper()})


@pytest.fixture()
def dashboard_repository():
    repo = InMemoryDashboardRepository()
    for dashboard_uuid, space_uuid in [
        (DASHBOARD, SPACE),
        (PRIVATE_DASHBOARD, PRIVATE_SPACE),
        (OTHER_DASHBOARD, SPACE),
    ]:
        repo.add(
            Dashboard(
                dashboard_uuid=DashboardUuid(dashboard_uuid),
                space_uuid=space_uuid,
                project_uuid=PROJECT,
                organization_uuid=ORG,
            )
        )
    return repo


@pytest.fixture()
def space_repository():
    repo = InMemorySpaceRepository()
    repo.add(SpaceSummary(space_uuid=SPACE, project_uuid=PROJECT, organization_uuid=ORG))
    repo.add(
        SpaceSummary(
            space_uuid=PRIVATE_SPACE,
            project_uuid=PROJECT,
            organization_uuid=ORG,
            is_private=True,
            access=frozenset({SPACE_MEMBER}),
        )
    )
    return repo


@pytest.fixture()
def comment_repository():
    return InMemoryCommentRepository()


@pytest.fixture()
def observer():
    return RecordingObserver()


@pytest.fixture()
def make_service(dashboard_repository, space_repository, comment_repository, observer):
    def _make(legacy_owner_delete: bool = False) -> CommentService:
        return CommentService(
            dashboard_repository=dashboard_repository,
            space_repository=space_repository,
            comment_repository=comment_repository,
            event_observer=observer,
            legacy_owner_delete=legacy_owner_delete,
        )

    return _make


@pytest.fixture()
def service(make_service):
    return make_service()


def _session_user(user_uuid, organization_uuid=ORG, org_role=None, project_roles=None):
    return SessionUser(
        user_uuid=UserUuid(user_uuid),
        organization_uuid=OrganizationUuid(organization_uuid),
        ability=build_ability(organization_uuid, org_role, project_roles),
    )


@pytest.fixture()
def users():
    return SimpleNamespace(
        viewer=_session_user(VIEWER, project_roles={PROJECT: "viewer"}),
        commenter=_session_user(COMMENTER, project_roles={PROJECT: "interactive_viewer"}),
        other_commenter=_session_user(
            SPACE_MEMBER, project_roles={PROJECT: "interactive_viewer"}
        ),
        editor=_session_user(EDITOR, project_roles={PROJECT: "editor"}),
        admin=_session_user(ADMIN, org_role="admin"),
        outsider=_session_user(OUTSIDER, OTHER_ORG, org_role="admin"),
        member=_session_user(SPACE_MEMBER, org_role="member"),
    )


@pytest.fixture()
def seed_comment(comment_repository):
    """Store a comment directly, bypassing the service."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _seed(
        author=COMMENTER,
        dashboard=DASHBOARD,
        tile=TILE,
        reply_to=None,
        resolved=False,
        mentions=(),
        text="Revenue dipped here",
    ) -> Comment:
        counter["n"] += 1
        comment = Comment(
            comment_id=CommentId.generate(),
            dashboard_uuid=DashboardUuid(dashboard),
            dashboard_tile_uuid=tile,
            user_uuid=UserUuid(author),
            text=text,
            text_html=f"<p>{text}</p>",
            created_at=base + timedelta(minutes=counter["n"]),
            reply_to=reply_to.comment_id if reply_to is not None else None,
            mentions=list(mentions),
            resolved=resolved,
        )
        comment_repository.comments[comment.comment_id.value] = comment
        return comment

    return _seed


# ==================== HTTP ====================


def _service_token(user_uuid, org=ORG, org_role=None, project_roles=None, name=None):
    now = int(time.time())
    claims = {
        "sub": user_uuid,
        "org": org,
        "iat": now,
        "exp": now + 300,
        "iss": Config.SERVICE_AUTH_ISSUER,
        "aud": Config.SERVICE_AUTH_AUDIENCE,
    }
    if org_role:
        claims["org_role"] = org_role
    if project_roles:
        claims["project_roles"] = project_roles
    if name:
        claims["name"] = name
    return jwt.encode(claims, Config.SERVICE_AUTH_SECRET, algorithm="HS256")


@pytest.fixture()
def auth_headers_for():
    def _headers(user_uuid, **kwargs):
        return {"Authorization": f"Bearer {_service_token(user_uuid, **kwargs)}"}

    return _headers


@pytest.fixture()
def legacy_owner_delete():
    return False


@pytest.fixture()
def app(
    dashboard_repository, space_repository, comment_repository, observer, legacy_owner_delete
):
    """Create a FastAPI app wired to the in-memory ports for each test."""
    container = make_async_container(
        InMemoryProvider(
            dashboard_repository,
            space_repository,
            comment_repository,
            observer,
            legacy_owner_delete,
        )
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)
