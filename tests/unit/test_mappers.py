"""Tests for DTO <-> entity mapping."""

from pets_api.api.mappers import (
    apply_pet_update_request,
    apply_user_update_request,
    pet_create_request_to_entity,
    pet_to_response,
    user_create_request_to_entity,
    user_to_response,
)
from pets_api.api.schemas import (
    PetCreateRequest,
    PetUpdateRequest,
    UserCreateRequest,
    UserUpdateRequest,
)
from pets_api.models import Pet, User


class TestUserMapper:
    def test_to_response(self):
        user = User(id=4, first_name="Ann", last_name="Lee", age=41)

        response = user_to_response(user)

        assert response.model_dump() == {
            "id": 4,
            "first_name": "Ann",
            "last_name": "Lee",
            "age": 41,
        }

    def test_create_request_leaves_id_unassigned(self):
        user = user_create_request_to_entity(
            UserCreateRequest(first_name="Ann", last_name="Lee")
        )

        assert user.id is None
        assert user.age == 0

    def test_update_touches_only_provided_fields(self):
        user = User(id=4, first_name="Ann", last_name="Lee", age=41)

        apply_user_update_request(user, UserUpdateRequest(first_name="Anna", age=None))

        assert (user.id, user.first_name, user.last_name, user.age) == (4, "Anna", "Lee", 41)


class TestPetMapper:
    def test_response_hides_owner(self):
        pet = Pet(id=9, name="Rex", animal="dog", user_id=4)

        dumped = pet_to_response(pet).model_dump()

        assert dumped == {"id": 9, "name": "Rex", "animal": "dog"}
        assert "user_id" not in dumped

    def test_create_request_carries_owner(self):
        pet = pet_create_request_to_entity(
            PetCreateRequest(name="Rex", animal="dog", user_id=4)
        )

        assert pet.id is None
        assert pet.user_id == 4

    def test_update_never_changes_owner(self):
        pet = Pet(id=9, name="Rex", animal="dog", user_id=4)

        apply_pet_update_request(pet, PetUpdateRequest(animal="wolf"))

        assert (pet.name, pet.animal, pet.user_id) == ("Rex", "wolf", 4)
