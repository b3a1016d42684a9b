from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_session_repository import AdminSessionRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.download_log_repository import DownloadLogRepository
from src.adapter.repositories.file_repository import FileRepository
from src.adapter.repositories.login_attempt_repository import LoginAttemptRepository
from src.adapter.repositories.project_repository import ProjectRepository
from src.adapter.repositories.share_password_repository import SharePasswordRepository
from src.adapter.repositories.share_settings_repository import ShareSettingsRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.sessions = AdminSessionRepository(self.session)
        self.login_attempts = LoginAttemptRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.files = FileRepository(self.session)
        self.share_settings = ShareSettingsRepository(self.session)
        self.share_passwords = SharePasswordRepository(self.session)
        self.download_logs = DownloadLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
