"""Tests for the pet handler against an in-memory database."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.api.handlers import PetHandler, ResultStatus
from pets_api.api.schemas.pets import PetCreateRequest, PetResponse, PetUpdateRequest
from pets_api.models import Pet
from pets_api.repositories import PetRepository, UserRepository


@pytest.fixture
def handler(db_session: AsyncSession) -> PetHandler:
    return PetHandler(PetRepository(db_session), UserRepository(db_session))


@pytest_asyncio.fixture
async def seed_pets(db_session: AsyncSession):
    db_session.add_all(
        [
            Pet(id=1, name="Rex", animal="dog", user_id=1),
            Pet(id=2, name="Tom", animal="cat", user_id=2),
        ]
    )
    await db_session.commit()


class TestGetAll:
    async def test_empty_store(self, handler: PetHandler):
        result = await handler.get_all()

        assert result.status == ResultStatus.OK
        assert result.data == []

    async def test_returns_seeded_pets(self, handler: PetHandler, seed_pets):
        result = await handler.get_all()

        assert result.data == [
            PetResponse(id=1, name="Rex", animal="dog"),
            PetResponse(id=2, name="Tom", animal="cat"),
        ]


class TestGetById:
    async def test_returns_pet_without_owner(self, handler: PetHandler, seed_pets):
        result = await handler.get_by_id(1)

        assert result.status == ResultStatus.OK
        assert result.data.model_dump() == {"id": 1, "name": "Rex", "animal": "dog"}

    async def test_missing_pet_is_not_found(self, handler: PetHandler):
        result = await handler.get_by_id(42)

        assert result.status == ResultStatus.NOT_FOUND


class TestCreate:
    async def test_creates_owned_pet(self, handler: PetHandler, db_session: AsyncSession):
        result = await handler.create(
            PetCreateRequest(name="Nemo", animal="fish", user_id=2)
        )

        assert result.status == ResultStatus.CREATED
        assert result.data.name == "Nemo"
        assert result.data.animal == "fish"

        pet_in_db = await db_session.get(Pet, result.data.id)
        assert pet_in_db.user_id == 2

    async def test_creates_pet_without_owner(
        self, handler: PetHandler, db_session: AsyncSession
    ):
        result = await handler.create(PetCreateRequest(name="Stray"))

        assert result.status == ResultStatus.CREATED
        pet_in_db = await db_session.get(Pet, result.data.id)
        assert pet_in_db.user_id is None
        assert pet_in_db.animal == ""

    async def test_unknown_owner_is_rejected(self, handler: PetHandler):
        result = await handler.create(PetCreateRequest(name="Nemo", user_id=99))

        assert result.status == ResultStatus.VALIDATION_ERROR
        assert "user_id" in result.errors
        assert (await handler.get_all()).data == []

    async def test_blank_name_is_rejected_before_store_access(self):
        pets, users = AsyncMock(), AsyncMock()
        handler = PetHandler(pets, users)

        result = await handler.create(PetCreateRequest(name="  ", user_id=1))

        assert result.status == ResultStatus.VALIDATION_ERROR
        assert "name" in result.errors
        users.find.assert_not_called()
        pets.add.assert_not_called()
        pets.commit.assert_not_called()


class TestCreateForUser:
    async def test_owner_comes_from_route(
        self, handler: PetHandler, db_session: AsyncSession
    ):
        result = await handler.create_for_user(
            1, PetCreateRequest(name="Rex", animal="dog", user_id=2)
        )

        assert result.status == ResultStatus.CREATED
        pet_in_db = await db_session.get(Pet, result.data.id)
        assert pet_in_db.user_id == 1

    async def test_missing_user_is_not_found(self, handler: PetHandler):
        result = await handler.create_for_user(99, PetCreateRequest(name="Rex"))

        assert result.status == ResultStatus.NOT_FOUND


class TestUpdate:
    async def test_updates_allow_listed_fields_only(
        self, handler: PetHandler, db_session: AsyncSession, seed_pets
    ):
        result = await handler.update(1, PetUpdateRequest(name="Max", animal="wolf"))

        assert result.data == PetResponse(id=1, name="Max", animal="wolf")
        db_session.expire_all()
        pet_in_db = await db_session.get(Pet, 1)
        assert pet_in_db.name == "Max"
        assert pet_in_db.user_id == 1

    async def test_missing_pet_is_not_found(self, handler: PetHandler):
        result = await handler.update(42, PetUpdateRequest(name="Max"))

        assert result.status == ResultStatus.NOT_FOUND


class TestDelete:
    async def test_deletes_pet(self, handler: PetHandler, seed_pets):
        result = await handler.delete(2)

        assert result.status == ResultStatus.NO_CONTENT
        assert (await handler.get_by_id(2)).status == ResultStatus.NOT_FOUND
        assert [p.id for p in (await handler.get_all()).data] == [1]

    async def test_missing_pet_is_not_found(self, handler: PetHandler, seed_pets):
        result = await handler.delete(42)

        assert result.status == ResultStatus.NOT_FOUND
        assert len((await handler.get_all()).data) == 2
