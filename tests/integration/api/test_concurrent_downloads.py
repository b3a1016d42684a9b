import asyncio

import pytest
from sqlmodel import select

from src.adapter.repositories.download_log_repository import DownloadLogRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.download_log_repository import DuplicateDownloadRequest
from src.app.use_cases.share import ResolveShareAccessUseCase
from src.domain.entities import DownloadLog, File, GlobalShareSettings

IP = "203.0.113.50"


async def resolve_concurrently(session_factory, public_id, requests):
    """Run each (ip, request_id) pair through the gate on its own session"""

    async def one(ip, request_id):
        async with session_factory() as session:
            use_case = ResolveShareAccessUseCase(SqlAlchemyUnitOfWork(session))
            return await use_case.execute(public_id, None, ip, "pytest", request_id)

    return await asyncio.gather(*(one(ip, request_id) for ip, request_id in requests))


async def download_state(session_factory, file_id):
    async with session_factory() as session:
        count = await session.execute(select(File.download_count).where(File.id == file_id))
        logs = await DownloadLogRepository(session).count_for_file(file_id)
        return count.scalar_one(), logs


async def set_global_limit(session_factory, limit):
    async with session_factory() as session:
        session.add(GlobalShareSettings(download_limit_per_ip=limit, download_limit_window_minutes=60))
        await session.commit()


@pytest.mark.asyncio
async def test_concurrent_grants_are_all_counted(seed, session_factory):
    file = await seed.file()

    results = await resolve_concurrently(
        session_factory, file.public_id, [(f"198.51.100.{i + 1}", None) for i in range(10)]
    )

    assert all(result.is_ok() for result in results)
    assert await download_state(session_factory, file.id) == (10, 10)


@pytest.mark.asyncio
async def test_concurrent_same_ip_stays_within_window(seed, session_factory):
    file = await seed.file()
    await set_global_limit(session_factory, 1)

    results = await resolve_concurrently(session_factory, file.public_id, [(IP, None)] * 5)

    assert sum(result.is_ok() for result in results) == 1
    assert sorted(result.error.code for result in results if not result.is_ok()) == [
        "RATE_LIMITED"
    ] * 4
    assert await download_state(session_factory, file.id) == (1, 1)


@pytest.mark.asyncio
async def test_concurrent_same_ip_limit_above_one(seed, session_factory):
    file = await seed.file()
    await set_global_limit(session_factory, 3)

    results = await resolve_concurrently(session_factory, file.public_id, [(IP, None)] * 8)

    assert sum(result.is_ok() for result in results) == 3
    assert await download_state(session_factory, file.id) == (3, 3)


@pytest.mark.asyncio
async def test_concurrent_retries_with_one_request_id_count_once(seed, session_factory):
    file = await seed.file()

    results = await resolve_concurrently(session_factory, file.public_id, [(IP, "retry-1")] * 5)

    assert all(result.is_ok() for result in results)
    assert sorted(result.value.replayed for result in results) == [False, True, True, True, True]
    assert await download_state(session_factory, file.id) == (1, 1)


@pytest.mark.asyncio
async def test_duplicate_request_id_insert_is_reported(seed, db_session):
    file = await seed.file()
    repo = DownloadLogRepository(db_session)
    await repo.create(DownloadLog(file_id=file.id, ip_address=IP, request_id="dup"))

    with pytest.raises(DuplicateDownloadRequest):
        await repo.create(DownloadLog(file_id=file.id, ip_address=IP, request_id="dup"))

    await db_session.rollback()
