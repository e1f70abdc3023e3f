import pytest
from wordhint.auth import (
    AuthGate, TokenSigner, UserStore, bearer_token, hash_password, verify_password,
)
from wordhint.errors import InvalidToken, Unauthorized, UserExists, UserNotFound


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


# --- passwords ---

def test_hash_and_verify_password():
    stored = hash_password("hunter2", iterations=1000)
    assert stored.startswith("pbkdf2_sha256$1000$")
    assert verify_password("hunter2", stored) is True
    assert verify_password("hunter3", stored) is False


def test_hash_password_salts():
    assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)


def test_verify_password_malformed_hash_is_mismatch():
    assert verify_password("x", "not-a-hash") is False
    assert verify_password("x", "md5$1$00$00") is False


def test_empty_password_refused():
    with pytest.raises(ValueError):
        hash_password("")


# --- tokens ---

def test_token_roundtrip_and_expiry():
    clock = FakeClock()
    signer = TokenSigner("s3cret", ttl_seconds=60, clock=clock)
    token = signer.issue(7)
    assert signer.decode(token)["sub"] == 7

    clock.now += 61
    with pytest.raises(InvalidToken):
        signer.decode(token)


@pytest.mark.parametrize("token", ["", "abc", "a.b.c", "a.b", "ü.ü"])
def test_malformed_tokens(token):
    with pytest.raises(InvalidToken):
        TokenSigner("s3cret").decode(token)


def test_token_from_other_secret_rejected():
    token = TokenSigner("one").issue(1)
    with pytest.raises(InvalidToken):
        TokenSigner("two").decode(token)


# --- users ---

def test_user_store_crud():
    users = UserStore()
    u = users.create("alice", "a@example.com", "pw")
    assert u.id == 1 and users.get(1).username == "alice"
    assert "password_hash" not in u.public()

    with pytest.raises(UserExists):
        users.create("alice", "other@example.com", "pw")

    users.update(1, email="new@example.com", password="pw2")
    assert users.get(1).email == "new@example.com"
    assert users.authenticate("alice", "pw") is None
    assert users.authenticate("alice", "pw2") == 1

    users.delete(1)
    with pytest.raises(UserNotFound):
        users.get(1)
    with pytest.raises(UserNotFound):
        users.delete(1)


def test_user_store_rename_collision():
    users = UserStore()
    users.create("alice", "a@example.com", "pw")
    bob = users.create("bob", "b@example.com", "pw")
    with pytest.raises(UserExists):
        users.update(bob.id, username="alice")


# --- gate ---

def test_bearer_token():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("Basic abc") is None
    assert bearer_token("Bearer ") is None
    assert bearer_token(None) is None


def test_gate_authorize():
    users = UserStore()
    user = users.create("alice", "a@example.com", "pw")
    signer = TokenSigner("s3cret")
    gate = AuthGate(signer, users)
    token = signer.issue(user.id)

    assert gate.authorize(token) is True
    assert gate.authorize(None) is False
    assert gate.authorize("garbage") is False
    assert gate.authorize(signer.issue(999)) is False  # no such user

    users.revoke(token, signer.decode(token)["exp"])
    assert gate.authorize(token) is False
    with pytest.raises(Unauthorized):
        gate.require(token)


def test_gate_denies_deleted_user():
    users = UserStore()
    user = users.create("alice", "a@example.com", "pw")
    signer = TokenSigner("s3cret")
    token = signer.issue(user.id)
    users.delete(user.id)
    assert AuthGate(signer, users).authorize(token) is False


def test_revoked_tokens_forgotten_after_expiry():
    clock = FakeClock()
    users = UserStore(clock=clock)
    signer = TokenSigner("s3cret", ttl_seconds=60, clock=clock)
    token = signer.issue(1)

    users.revoke(token, signer.decode(token)["exp"])
    assert users.is_revoked(token) and users.revoked_count() == 1

    clock.now += 61
    assert users.revoked_count() == 0
    assert not users.is_revoked(token)


def test_revoke_already_expired_is_not_stored():
    clock = FakeClock()
    users = UserStore(clock=clock)
    users.revoke("whatever", clock.now - 1)
    assert users.revoked_count() == 0
