from concurrent.futures import ThreadPoolExecutor

import pytest

from video_catalog_system.auth.directory import ClientDirectory
from video_catalog_system.auth.tokens import TokenGenerator
from video_catalog_system.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    TokenGenerationError,
    UnauthorizedError,
    UsernameTakenError,
)


class ScriptedGenerator(TokenGenerator):
    """Hands out a fixed sequence of tokens, raising once it runs out"""

    def __init__(self, *issued):
        super().__init__()
        self.issued = list(issued)

    def generate(self, length=None):
        if not self.issued:
            raise TokenGenerationError("scripted generator exhausted")
        return self.issued.pop(0)


def test_register_assigns_sequential_ids(directory):
    assert directory.register("alice", "pw") == "client1"
    assert directory.register("bob", "pw") == "client2"
    assert len(directory) == 2


def test_duplicate_username_conflicts(directory):
    directory.register("alice", "pw")

    with pytest.raises(UsernameTakenError) as exc_info:
        directory.register("alice", "other")

    assert isinstance(exc_info.value, ConflictError)
    assert exc_info.value.status_code == 409
    assert directory.count() == 1


def test_usernames_are_case_sensitive(directory):
    directory.register("alice", "pw")
    directory.register("Alice", "pw")

    assert directory.count() == 2


def test_new_client_starts_without_token(directory):
    client_id = directory.register("alice", "pw")
    client = directory.get_client(client_id)

    assert client.token == ""
    assert not client.is_logged_in
    assert directory.get_client("client99") is None


@pytest.mark.parametrize("username,password", [("alice", "wrong"), ("nobody", "pw"), ("", "")])
def test_login_rejects_bad_credentials(directory, username, password):
    directory.register("alice", "pw")

    with pytest.raises(InvalidCredentialsError) as exc_info:
        directory.login(username, password)

    assert isinstance(exc_info.value, UnauthorizedError)
    assert exc_info.value.status_code == 401


def test_login_issues_resolvable_token(directory):
    client_id = directory.register("alice", "pw")

    token = directory.login("alice", "pw")
    client = directory.resolve_token(token)

    assert token
    assert client.id == client_id
    assert client.username == "alice"
    assert client.token == token


def test_second_login_replaces_previous_token(directory):
    directory.register("alice", "pw")

    first = directory.login("alice", "pw")
    second = directory.login("alice", "pw")

    assert first != second
    assert directory.resolve_token(first) is None
    assert directory.resolve_token(second).username == "alice"


@pytest.mark.parametrize("token", ["", None])
def test_empty_token_never_resolves(directory, token):
    # Registered but never logged in, so the stored token is empty
    directory.register("alice", "pw")

    assert directory.resolve_token(token) is None


def test_unknown_token_does_not_resolve(directory):
    directory.register("alice", "pw")
    directory.login("alice", "pw")

    assert directory.resolve_token("deadbeef") is None


def test_resolved_client_is_a_snapshot(directory):
    directory.register("alice", "pw")
    token = directory.login("alice", "pw")

    snapshot = directory.resolve_token(token)
    snapshot.token = "tampered"
    snapshot.password = "tampered"

    assert directory.resolve_token(token).password == "pw"
    assert directory.resolve_token("tampered") is None


def test_failed_token_generation_keeps_previous_token():
    directory = ClientDirectory(ScriptedGenerator("aaaa"))
    directory.register("alice", "pw")
    token = directory.login("alice", "pw")

    with pytest.raises(TokenGenerationError):
        directory.login("alice", "pw")

    assert directory.resolve_token(token).username == "alice"


def test_empty_generated_token_is_a_hard_failure():
    directory = ClientDirectory(ScriptedGenerator(""))
    directory.register("alice", "pw")

    with pytest.raises(TokenGenerationError):
        directory.login("alice", "pw")

    assert directory.resolve_token("") is None
    assert directory.get_client("client1").token == ""


def test_colliding_token_is_regenerated():
    directory = ClientDirectory(ScriptedGenerator("aaaa", "aaaa", "bbbb"))
    directory.register("alice", "pw")
    directory.register("bob", "pw")

    assert directory.login("alice", "pw") == "aaaa"
    assert directory.login("bob", "pw") == "bbbb"
    assert directory.resolve_token("aaaa").username == "alice"


def test_concurrent_registrations_are_not_lost(directory):
    usernames = [f"user{i}" for i in range(64)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(lambda name: directory.register(name, "pw"), usernames))

    assert directory.count() == 64
    assert len(set(ids)) == 64
    assert set(ids) == {f"client{i}" for i in range(1, 65)}


def test_concurrent_duplicate_registration_admits_one(directory):
    def attempt(_):
        try:
            directory.register("alice", "pw")
            return True
        except UsernameTakenError:
            return False

    with ThreadPoolExecutor(max_workers=16) as pool:
        outcomes = list(pool.map(attempt, range(32)))

    assert outcomes.count(True) == 1
    assert directory.count() == 1


def test_concurrent_logins_leave_one_live_token(directory):
    directory.register("alice", "pw")

    with ThreadPoolExecutor(max_workers=8) as pool:
        issued = list(pool.map(lambda _: directory.login("alice", "pw"), range(32)))

    live = [token for token in issued if directory.resolve_token(token) is not None]
    assert len(live) == 1
