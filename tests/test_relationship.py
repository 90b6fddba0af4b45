from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError

from src.core.exceptions import StoreError
from src.core.models import FriendRequest, FriendRequestStatus
from src.core.services.relationship import RelationshipAccessor


class TestRelationshipAccessor:
    """好友请求表访问"""

    @pytest.mark.asyncio
    async def test_list_filters_by_requester_and_status(self, db, users, make_request):
        a, b, c = users["A"], users["B"], users["C"]
        await make_request(a, b, FriendRequestStatus.PENDING)
        await make_request(a, c, FriendRequestStatus.ACCEPTED)
        await make_request(b, a, FriendRequestStatus.PENDING)

        accessor = RelationshipAccessor(db)
        pending = await accessor.list_by_requester_and_status(a.id, FriendRequestStatus.PENDING)
        accepted = await accessor.list_by_requester_and_status(a.id, "accepted")

        assert [r.to_user_id for r in pending] == [b.id]
        assert [r.to_user_id for r in accepted] == [c.id]

    @pytest.mark.asyncio
    async def test_list_empty(self, db, users):
        rows = await RelationshipAccessor(db).list_by_requester_and_status(
            users["A"].id, FriendRequestStatus.PENDING
        )
        assert rows == []

    @pytest.mark.asyncio
    async def test_delete_by_id(self, db, users, make_request):
        request_id = await make_request(users["A"], users["B"])
        accessor = RelationshipAccessor(db)

        assert await accessor.delete_by_id(request_id) is True
        assert await accessor.delete_by_id(request_id) is False
        assert await accessor.get_by_id(request_id) is None

    @pytest.mark.asyncio
    async def test_update_status_by_id(self, db, users, make_request):
        request_id = await make_request(users["A"], users["B"])
        accessor = RelationshipAccessor(db)

        assert await accessor.update_status_by_id(request_id, FriendRequestStatus.ACCEPTED) is True

        result = await db.execute(
            select(FriendRequest.status).where(FriendRequest.id == request_id)
        )
        assert result.scalar_one() == "accepted"

    @pytest.mark.asyncio
    async def test_update_missing_row(self, db, users):
        assert await RelationshipAccessor(db).update_status_by_id(999, FriendRequestStatus.ACCEPTED) is False

    @pytest.mark.asyncio
    async def test_update_rejects_unknown_status(self, db, users, make_request):
        request_id = await make_request(users["A"], users["B"])
        with pytest.raises(ValueError):
            await RelationshipAccessor(db).update_status_by_id(request_id, "cancelled")

    @pytest.mark.asyncio
    async def test_store_failure_on_delete_rolls_back(self):
        db = AsyncMock()
        db.execute.side_effect = OperationalError("DELETE", {}, Exception("connection lost"))
        with pytest.raises(StoreError):
            await RelationshipAccessor(db).delete_by_id(1)
        db.rollback.assert_awaited_once()
        db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_on_list(self):
        db = AsyncMock()
        db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
        with pytest.raises(StoreError):
            await RelationshipAccessor(db).list_by_requester_and_status(1, FriendRequestStatus.PENDING)


class TestFriendRequestConstraints:
    """表约束"""

    @pytest.mark.asyncio
    async def test_request_to_self_rejected(self, db, users):
        a = users["A"]
        db.add(FriendRequest(from_user_id=a.id, to_user_id=a.id, status="pending"))
        with pytest.raises(IntegrityError):
            await db.commit()
        await db.rollback()

    @pytest.mark.asyncio
    async def test_unknown_status_rejected(self, db, users):
        db.add(FriendRequest(from_user_id=users["A"].id, to_user_id=users["B"].id, status="cancelled"))
        with pytest.raises(IntegrityError):
            await db.commit()
        await db.rollback()
