from types import SimpleNamespace

from studio.core.security import TOKEN_ALPHABET, generate_access_token, verify_passphrase


def test_generate_access_token_shape():
    token = generate_access_token()

    assert len(token) == 8
    assert all(char in TOKEN_ALPHABET for char in token)
    assert len(generate_access_token(12)) == 12


def test_public_album_always_passes():
    album = SimpleNamespace(id=1, is_private=False, passphrase=None)

    assert verify_passphrase(album, "anything")
    assert verify_passphrase(album, None)


def test_private_album_passphrase_must_match():
    album = SimpleNamespace(id=1, is_private=True, passphrase="marigold")

    assert verify_passphrase(album, "marigold")
    assert not verify_passphrase(album, "Marigold")
    assert not verify_passphrase(album, "")
    assert not verify_passphrase(album, None)


def test_private_album_without_passphrase_never_passes():
    album = SimpleNamespace(id=1, is_private=True, passphrase=None)

    assert not verify_passphrase(album, "")
    assert not verify_passphrase(album, "anything")
