"""Tests for the in-memory user store."""

import logging
import threading

import pytest
from user_common.errors import DuplicateEmailError, InvalidInputError, UserNotFoundError
from user_common.models.user import User
from user_common.services.user_store import InMemoryUserStore


@pytest.mark.unit
def test_add_user_assigns_sequential_ids(store: InMemoryUserStore) -> None:
    first = store.add_user("Alice", "alice@example.com")
    second = store.add_user("Bob", "bob@example.com")

    assert first.id == 1
    assert second.id == 2


@pytest.mark.unit
def test_get_user_after_add_returns_same_fields(seeded_store: InMemoryUserStore) -> None:
    created = seeded_store.add_user("Alice", "a@x.com")

    fetched = seeded_store.get_user(created.id)

    assert fetched == User(id=3, name="Alice", email="a@x.com")


@pytest.mark.unit
@pytest.mark.parametrize(("name", "email"), [("", "a@x.com"), ("Alice", ""), ("", "")])
def test_add_user_rejects_empty_fields(store: InMemoryUserStore, name: str, email: str) -> None:
    with pytest.raises(InvalidInputError):
        store.add_user(name, email)

    assert store.list_users() == []


@pytest.mark.unit
def test_add_user_rejects_email_differing_only_in_case(store: InMemoryUserStore) -> None:
    store.add_user("Alice", "Alice@Example.com")

    with pytest.raises(DuplicateEmailError):
        store.add_user("Other", "alice@example.COM")

    assert store.count() == 1


@pytest.mark.unit
def test_deleted_user_is_hidden_but_keeps_email_taken(seeded_store: InMemoryUserStore) -> None:
    created = seeded_store.add_user("Alice", "a@x.com")

    seeded_store.delete_user(created.id)

    with pytest.raises(UserNotFoundError):
        seeded_store.get_user(created.id)
    assert created.id not in [user.id for user in seeded_store.list_users()]
    with pytest.raises(DuplicateEmailError):
        seeded_store.add_user("Bob", "A@X.COM")


@pytest.mark.unit
def test_ids_are_not_reused_after_delete(store: InMemoryUserStore) -> None:
    first = store.add_user("Alice", "alice@example.com")
    store.delete_user(first.id)

    second = store.add_user("Bob", "bob@example.com")

    assert second.id == 2


@pytest.mark.unit
def test_delete_user_twice_raises_not_found(seeded_store: InMemoryUserStore) -> None:
    seeded_store.delete_user(1)

    with pytest.raises(UserNotFoundError):
        seeded_store.delete_user(1)


@pytest.mark.unit
def test_get_unknown_user_raises_not_found(seeded_store: InMemoryUserStore) -> None:
    with pytest.raises(UserNotFoundError):
        seeded_store.get_user(99)


@pytest.mark.unit
def test_update_user_changes_name_only(seeded_store: InMemoryUserStore) -> None:
    seeded_store.update_user(1, "Johnny")

    assert seeded_store.get_user(1) == User(id=1, name="Johnny", email="jhondoe@gmail.com")


@pytest.mark.unit
def test_update_user_with_empty_name_leaves_record_unchanged(seeded_store: InMemoryUserStore) -> None:
    with pytest.raises(InvalidInputError):
        seeded_store.update_user(1, "")

    assert seeded_store.get_user(1).name == "John Doe"


@pytest.mark.unit
def test_update_missing_or_deleted_user_raises_not_found(seeded_store: InMemoryUserStore) -> None:
    seeded_store.delete_user(2)

    with pytest.raises(UserNotFoundError):
        seeded_store.update_user(2, "Janet")
    with pytest.raises(UserNotFoundError):
        seeded_store.update_user(42, "Nobody")


@pytest.mark.unit
def test_update_checks_existence_before_name(seeded_store: InMemoryUserStore) -> None:
    with pytest.raises(UserNotFoundError):
        seeded_store.update_user(42, "")


@pytest.mark.unit
def test_returned_users_are_copies(seeded_store: InMemoryUserStore) -> None:
    user = seeded_store.get_user(1)
    user.name = "Mutated"

    assert seeded_store.get_user(1).name == "John Doe"


@pytest.mark.unit
def test_count_and_list_exclude_deleted(seeded_store: InMemoryUserStore) -> None:
    seeded_store.delete_user(1)

    assert seeded_store.count() == 1
    assert [user.id for user in seeded_store.list_users()] == [2]


@pytest.mark.unit
def test_serialized_user_never_contains_deleted_flag(seeded_store: InMemoryUserStore) -> None:
    dumped = seeded_store.get_user(1).model_dump()

    assert dumped == {"id": 1, "name": "John Doe", "email": "jhondoe@gmail.com"}


@pytest.mark.unit
def test_concurrent_adds_get_unique_sequential_ids(store: InMemoryUserStore) -> None:
    workers = 50
    barrier = threading.Barrier(workers)
    ids: list[int] = []
    ids_lock = threading.Lock()

    def create(index: int) -> None:
        barrier.wait()
        user = store.add_user(f"User {index}", f"user{index}@example.com")
        with ids_lock:
            ids.append(user.id)

    threads = [threading.Thread(target=create, args=(index,)) for index in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(ids) == list(range(1, workers + 1))
    assert store.count() == workers


@pytest.mark.unit
def test_email_comparison_uses_simple_case_folding(store: InMemoryUserStore) -> None:
    store.add_user("Strasse", "straße@example.com")

    created = store.add_user("Strasse Two", "strasse@example.com")

    assert created.id == 2
    with pytest.raises(DuplicateEmailError):
        store.add_user("Upper", "STRAßE@EXAMPLE.COM")


@pytest.mark.unit
def test_mutations_are_logged(store: InMemoryUserStore, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="user_common.services.user_store")

    user = store.add_user("Alice", "alice@example.com")
    store.update_user(user.id, "Alicia")
    store.delete_user(user.id)

    messages = [record.getMessage() for record in caplog.records if record.levelno == logging.INFO]
    assert messages == ["Created user 1", "Updated user 1", "Deleted user 1"]
