"""Tests for the in-memory and MongoDB feedback stores."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from datetime import datetime, timezone
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from services.exceptions import FeedbackNotFound, StorageUnavailable
from services.feedback_store import (
    InMemoryFeedbackStore,
    MongoFeedbackStore,
    build_feedback_store,
)


class TestInMemoryFeedbackStore:

    @pytest.mark.asyncio
    async def test_list_all_on_empty_store(self):
        assert await InMemoryFeedbackStore().list_all() == []

    @pytest.mark.asyncio
    async def test_submit_then_list(self):
        store = InMemoryFeedbackStore()
        record = await store.submit("alice", "Great service")

        records = await store.list_all()
        assert len(records) == 1
        assert records[0].id == record.id
        assert records[0].user_name == "alice"
        assert records[0].feedback == "Great service"
        assert records[0].timestamp.tzinfo is not None

    @pytest.mark.asyncio
    async def test_ids_are_unique_and_order_is_insertion_order(self):
        store = InMemoryFeedbackStore()
        first = await store.submit("a", "one")
        second = await store.submit("b", "two")
        third = await store.submit(None, "three")

        assert len({first.id, second.id, third.id}) == 3
        assert [r.feedback for r in await store.list_all()] == ["one", "two", "three"]

    @pytest.mark.asyncio
    async def test_delete_removes_only_that_record(self):
        store = InMemoryFeedbackStore()
        keep = await store.submit("a", "keep me")
        drop = await store.submit("b", "drop me")

        await store.delete_by_id(drop.id)

        assert [r.id for r in await store.list_all()] == [keep.id]

    @pytest.mark.asyncio
    async def test_second_delete_is_not_found(self):
        store = InMemoryFeedbackStore()
        record = await store.submit("a", "text")
        await store.delete_by_id(record.id)

        with pytest.raises(FeedbackNotFound):
            await store.delete_by_id(record.id)

    @pytest.mark.asyncio
    async def test_list_all_returns_a_copy(self):
        store = InMemoryFeedbackStore()
        await store.submit("a", "text")
        (await store.list_all()).clear()
        assert len(await store.list_all()) == 1


@pytest.fixture
def feedback_document():
    """Patch the Beanie document and its initialisation so no MongoDB connection is needed."""
    with patch("services.feedback_store.init_database", new=AsyncMock(return_value=True)), \
            patch("services.feedback_store.Feedback") as mock:
        yield mock


def make_document(text="hello", user_name="bob"):
    document = MagicMock()
    document.id = ObjectId()
    document.user_name = user_name
    document.feedback = text
    document.timestamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    document.insert = AsyncMock()
    document.delete = AsyncMock()
    return document


class TestMongoFeedbackStore:

    @pytest.mark.asyncio
    async def test_submit_inserts_document(self, feedback_document):
        document = make_document("nice", "carol")
        feedback_document.return_value = document

        record = await MongoFeedbackStore().submit("carol", "nice")

        feedback_document.assert_called_once_with(user_name="carol", feedback="nice")
        document.insert.assert_awaited_once()
        assert record.id == str(document.id)
        assert record.feedback == "nice"

    @pytest.mark.asyncio
    async def test_submit_storage_failure(self, feedback_document):
        document = make_document()
        document.insert.side_effect = ServerSelectionTimeoutError("no servers")
        feedback_document.return_value = document

        with pytest.raises(StorageUnavailable):
            await MongoFeedbackStore().submit("bob", "hello")

    @pytest.mark.asyncio
    async def test_list_all_maps_documents(self, feedback_document):
        documents = [make_document("one"), make_document("two")]
        feedback_document.find_all.return_value.to_list = AsyncMock(return_value=documents)

        records = await MongoFeedbackStore().list_all()

        assert [r.feedback for r in records] == ["one", "two"]
        assert records[0].id == str(documents[0].id)

    @pytest.mark.asyncio
    async def test_list_all_empty(self, feedback_document):
        feedback_document.find_all.return_value.to_list = AsyncMock(return_value=[])
        assert await MongoFeedbackStore().list_all() == []

    @pytest.mark.asyncio
    async def test_list_all_storage_failure(self, feedback_document):
        feedback_document.find_all.return_value.to_list = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )
        with pytest.raises(StorageUnavailable):
            await MongoFeedbackStore().list_all()

    @pytest.mark.asyncio
    async def test_delete_existing(self, feedback_document):
        document = make_document()
        feedback_document.get = AsyncMock(return_value=document)

        await MongoFeedbackStore().delete_by_id(str(document.id))

        document.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing(self, feedback_document):
        feedback_document.get = AsyncMock(return_value=None)

        with pytest.raises(FeedbackNotFound):
            await MongoFeedbackStore().delete_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_delete_malformed_id_is_not_found(self, feedback_document):
        feedback_document.get = AsyncMock()

        with pytest.raises(FeedbackNotFound):
            await MongoFeedbackStore().delete_by_id("not-an-object-id")
        feedback_document.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_storage_failure(self, feedback_document):
        feedback_document.get = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

        with pytest.raises(StorageUnavailable):
            await MongoFeedbackStore().delete_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_naive_timestamps_are_read_as_utc(self, feedback_document):
        document = make_document()
        document.timestamp = datetime(2024, 1, 1, 12, 30)
        feedback_document.find_all.return_value.to_list = AsyncMock(return_value=[document])

        records = await MongoFeedbackStore().list_all()

        assert records[0].timestamp == datetime(2024, 1, 1, 12, 30, tzinfo=timezone.utc)


class TestMongoFeedbackStoreConnection:

    @pytest.mark.asyncio
    async def test_recovers_after_failed_startup_connection(self):
        init = AsyncMock(side_effect=[False, True])
        with patch("services.feedback_store.init_database", new=init), \
                patch("services.feedback_store.Feedback") as feedback_document:
            feedback_document.find_all.return_value.to_list = AsyncMock(return_value=[])
            store = MongoFeedbackStore()

            assert await store.connect() is False
            assert await store.list_all() == []
            assert init.await_count == 2

    @pytest.mark.asyncio
    async def test_unreachable_database_is_storage_unavailable(self):
        init = AsyncMock(return_value=False)
        with patch("services.feedback_store.init_database", new=init), \
                patch("services.feedback_store.Feedback") as feedback_document:
            store = MongoFeedbackStore()

            with pytest.raises(StorageUnavailable):
                await store.submit("bob", "hello")
            with pytest.raises(StorageUnavailable):
                await store.list_all()
            with pytest.raises(StorageUnavailable):
                await store.delete_by_id(str(ObjectId()))

            feedback_document.assert_not_called()
            assert init.await_count == 3

    @pytest.mark.asyncio
    async def test_initialises_only_once(self):
        init = AsyncMock(return_value=True)
        with patch("services.feedback_store.init_database", new=init), \
                patch("services.feedback_store.Feedback") as feedback_document:
            feedback_document.find_all.return_value.to_list = AsyncMock(return_value=[])
            store = MongoFeedbackStore()

            await store.list_all()
            await store.list_all()

            init.assert_awaited_once()


def test_build_feedback_store():
    assert isinstance(build_feedback_store("memory"), InMemoryFeedbackStore)
    assert isinstance(build_feedback_store("mongo"), MongoFeedbackStore)
    with pytest.raises(ValueError):
        build_feedback_store("redis")
