from abc import ABC, abstractmethod

from src.app.repositories.admin_session_repository import IAdminSessionRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.download_log_repository import IDownloadLogRepository
from src.app.repositories.file_repository import IFileRepository
from src.app.repositories.login_attempt_repository import ILoginAttemptRepository
from src.app.repositories.project_repository import IProjectRepository
from src.app.repositories.share_password_repository import ISharePasswordRepository
from src.app.repositories.share_settings_repository import IShareSettingsRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    sessions: IAdminSessionRepository
    login_attempts: ILoginAttemptRepository
    audit_events: IAuditEventRepository
    projects: IProjectRepository
    files: IFileRepository
    share_settings: IShareSettingsRepository
    share_passwords: ISharePasswordRepository
    download_logs: IDownloadLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
