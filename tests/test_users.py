import pytest

from printqueue.users import User, UserRegistry, UserType


def test_add_and_find_by_cpf_returns_same_user():
    registry = UserRegistry()
    user = registry.add("Ana", 123, UserType.STUDENT)
    assert registry.find_by_cpf(123) is user
    assert user.name == "Ana"
    assert user.user_type is UserType.STUDENT


def test_iteration_is_most_recent_first():
    registry = UserRegistry()
    registry.add("Ana", 1, UserType.STUDENT)
    registry.add("Bia", 2, UserType.TEACHER)
    assert [user.name for user in registry] == ["Bia", "Ana"]
    assert len(registry) == 2


def test_find_by_name_prefers_latest():
    registry = UserRegistry()
    registry.add("Ana", 1, UserType.STUDENT)
    latest = registry.add("Ana", 2, UserType.TEACHER)
    assert registry.find_by_name("Ana") is latest


def test_missing_lookups_return_none():
    registry = UserRegistry()
    registry.add("Ana", 1, UserType.STUDENT)
    assert registry.find_by_name("Carla") is None
    assert registry.find_by_cpf(99) is None


def test_remove_user():
    registry = UserRegistry()
    ana = registry.add("Ana", 1, UserType.STUDENT)
    bia = registry.add("Bia", 2, UserType.TEACHER)
    registry.remove(ana)
    assert list(registry) == [bia]
    assert registry.find_by_cpf(1) is None


def test_remove_unknown_user_raises():
    registry = UserRegistry()
    with pytest.raises(KeyError):
        registry.remove(User("Ghost", 7, UserType.STUDENT))


def test_invalid_type_rejected():
    registry = UserRegistry()
    with pytest.raises(ValueError):
        registry.add("Ana", 1, 5)
    assert len(registry) == 0


def test_integer_type_is_converted():
    user = User("Bia", 2, 2)
    assert user.user_type is UserType.TEACHER


def test_direction_is_alias_of_administration():
    assert UserType.DIRECTION is UserType.ADMINISTRATION
    assert UserType(3) is UserType.ADMINISTRATION
    assert UserType.STUDENT < UserType.TEACHER < UserType.ADMINISTRATION