"""Integration tests for AttendanceRepository against PostgreSQL.

Covers the partial unique index (one active row per event/user pair),
compare-and-set transitions, the pair lookups and pagination.
"""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.enums.attendance_status import AttendanceStatus
from src.infrastructure.persistence.repositories import AttendanceRepository
from tests.conftest import create_attendance

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(db_session):
    return AttendanceRepository(session=db_session)


class TestAdd:
    async def test_add_and_find_by_id(self, repo):
        attendance = create_attendance(notes="aisle seat")

        assert await repo.add(attendance) is True

        found = await repo.find_by_id(attendance.id)
        assert found is not None
        assert found.status == AttendanceStatus.REGISTERED
        assert found.notes == "aisle seat"
        assert found.created_at.tzinfo is not None

    async def test_second_active_row_for_pair_is_rejected(self, repo):
        first = create_attendance()
        duplicate = create_attendance(event_id=first.event_id, user_id=first.user_id)
        await repo.add(first)

        assert await repo.add(duplicate) is False
        assert await repo.find_by_id(duplicate.id) is None

    async def test_new_row_allowed_next_to_cancelled_one(self, repo):
        cancelled = create_attendance(status=AttendanceStatus.CANCELLED)
        fresh = create_attendance(event_id=cancelled.event_id, user_id=cancelled.user_id)
        await repo.add(cancelled)

        assert await repo.add(fresh) is True


class TestSaveTransition:
    async def test_transition_applies_when_status_matches(self, repo):
        attendance = create_attendance()
        await repo.add(attendance)

        attendance.check_in()
        assert await repo.save_transition(attendance, AttendanceStatus.REGISTERED)

        stored = await repo.find_by_id(attendance.id)
        assert stored.status == AttendanceStatus.CHECKED_IN
        assert stored.check_in_time is not None

    async def test_stale_expected_status_is_refused(self, repo):
        attendance = create_attendance()
        await repo.add(attendance)
        attendance.check_in()
        await repo.save_transition(attendance, AttendanceStatus.REGISTERED)

        stale = await repo.find_by_id(attendance.id)
        stale.cancel()

        assert await repo.save_transition(stale, AttendanceStatus.REGISTERED) is False
        assert (await repo.find_by_id(attendance.id)).status == AttendanceStatus.CHECKED_IN

    async def test_reactivation_next_to_active_row_is_refused(self, repo):
        old = create_attendance(status=AttendanceStatus.CANCELLED)
        active = create_attendance(event_id=old.event_id, user_id=old.user_id)
        await repo.add(old)
        await repo.add(active)

        old.force_status(AttendanceStatus.REGISTERED)

        assert await repo.save_transition(old, AttendanceStatus.CANCELLED) is False


class TestPairLookups:
    async def test_active_row_wins_over_cancelled_history(self, repo):
        cancelled = create_attendance(status=AttendanceStatus.CANCELLED)
        active = create_attendance(event_id=cancelled.event_id, user_id=cancelled.user_id)
        await repo.add(cancelled)
        await repo.add(active)

        found = await repo.find_by_event_and_user(active.event_id, active.user_id)

        assert found.id == active.id
        assert await repo.is_registered(active.event_id, active.user_id)

    async def test_latest_cancelled_row_without_active_one(self, repo):
        now = datetime.now(UTC)
        older = create_attendance(
            status=AttendanceStatus.CANCELLED, created_at=now - timedelta(days=2)
        )
        newer = create_attendance(
            event_id=older.event_id,
            user_id=older.user_id,
            status=AttendanceStatus.CANCELLED,
            created_at=now,
        )
        await repo.add(older)
        await repo.add(newer)

        found = await repo.find_by_event_and_user(older.event_id, older.user_id)

        assert found.id == newer.id
        assert await repo.is_registered(older.event_id, older.user_id) is False
        status = await repo.get_attendance_status(older.event_id, older.user_id)
        assert status == AttendanceStatus.CANCELLED

    async def test_unknown_pair(self, repo):
        assert await repo.find_by_event_and_user(uuid7(), uuid7()) is None
        assert await repo.get_attendance_status(uuid7(), uuid7()) is None


class TestListings:
    async def test_pagination_newest_first(self, repo):
        event_id = uuid7()
        now = datetime.now(UTC)
        rows = [
            create_attendance(event_id=event_id, created_at=now - timedelta(hours=i))
            for i in range(3)
        ]
        for row in rows:
            await repo.add(row)
        await repo.add(create_attendance())

        first = await repo.find_with_pagination(page=1, limit=2, event_id=event_id)
        second = await repo.find_with_pagination(page=2, limit=2, event_id=event_id)

        assert first.total == 3
        assert [a.id for a in first.attendances] == [rows[0].id, rows[1].id]
        assert [a.id for a in second.attendances] == [rows[2].id]

    async def test_by_event_and_by_user_oldest_first(self, repo):
        user_id = uuid7()
        now = datetime.now(UTC)
        later = create_attendance(user_id=user_id, created_at=now)
        earlier = create_attendance(user_id=user_id, created_at=now - timedelta(days=1))
        await repo.add(later)
        await repo.add(earlier)

        by_user = await repo.find_by_user_id(user_id)
        by_event = await repo.find_by_event_id(later.event_id)

        assert [a.id for a in by_user] == [earlier.id, later.id]
        assert [a.id for a in by_event] == [later.id]
