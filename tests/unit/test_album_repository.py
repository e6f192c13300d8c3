import pytest

from studio.app.exceptions import StudioValidationError
from studio.core.security import TOKEN_ALPHABET
from studio.repositories.album_repo import AlbumRepository
from studio.repositories.image_repo import ImageRepository
from studio.schemas.album import AlbumCreate, AlbumUpdate


@pytest.fixture
def albums(db_session):
    return AlbumRepository(db_session)


@pytest.fixture
def images(db_session):
    return ImageRepository(db_session)


def test_private_album_gets_access_token(albums):
    album = albums.create_album(AlbumCreate(
        name="Verma Wedding", category="wedding", is_private=True, passphrase="marigold"
    ))

    assert album.passphrase == "marigold"
    assert len(album.access_token) == 8
    assert set(album.access_token) <= set(TOKEN_ALPHABET)


def test_public_album_has_no_credentials(albums):
    album = albums.create_album(AlbumCreate(name="Street", category="street", passphrase="ignored"))

    assert album.is_private is False
    assert album.passphrase is None
    assert album.access_token is None


def test_new_access_token_skips_tokens_in_use(albums, mocker):
    existing = albums.create_album(AlbumCreate(
        name="Taken", category="wedding", is_private=True, passphrase="pw"
    ))
    mocker.patch(
        "studio.repositories.album_repo.generate_access_token",
        side_effect=[existing.access_token, "fresh123"],
    )

    assert albums.new_access_token() == "fresh123"


def test_images_sorted_by_order_index_then_id(albums, images):
    album = albums.create_album(AlbumCreate(name="Portraits", category="portrait"))
    third = images.add_image(album.id, "/uploads/c.jpg", order_index=2)
    first = images.add_image(album.id, "/uploads/a.jpg", order_index=0)
    tie = images.add_image(album.id, "/uploads/b.jpg", order_index=0)

    _, album_images = albums.get_with_images(album.id)

    assert [image.id for image in album_images] == [first.id, tie.id, third.id]


def test_list_with_images_pairs_every_album(albums, images):
    empty = albums.create_album(AlbumCreate(name="Empty", category="misc"))
    full = albums.create_album(AlbumCreate(name="Full", category="misc"))
    images.add_image(full.id, "/uploads/a.jpg", order_index=0)
    images.add_image(full.id, "/uploads/b.jpg", order_index=1)

    listing = {album.id: album_images for album, album_images in albums.list_with_images()}

    assert listing[empty.id] == []
    assert [image.url for image in listing[full.id]] == ["/uploads/a.jpg", "/uploads/b.jpg"]


def test_list_newest_first(albums):
    older = albums.create_album(AlbumCreate(name="Older", category="misc"))
    newer = albums.create_album(AlbumCreate(name="Newer", category="misc"))

    ids = [album.id for album, _ in albums.list_with_images()]

    assert ids.index(newer.id) < ids.index(older.id)


def test_public_listing_excludes_private_albums(albums):
    public = albums.create_album(AlbumCreate(name="Public", category="misc"))
    private = albums.create_album(AlbumCreate(
        name="Private", category="misc", is_private=True, passphrase="pw"
    ))

    ids = [album.id for album, _ in albums.list_with_images(include_private=False)]

    assert public.id in ids
    assert private.id not in ids


def test_get_with_images_missing_album(albums):
    assert albums.get_with_images(999) is None


def test_next_order_index_follows_max_after_deletion(albums, images):
    album = albums.create_album(AlbumCreate(name="Portraits", category="portrait"))
    assert images.next_order_index(album.id) == 0

    images.add_image(album.id, "/uploads/a.jpg", order_index=0)
    middle = images.add_image(album.id, "/uploads/b.jpg", order_index=1)
    images.add_image(album.id, "/uploads/c.jpg", order_index=2)
    images.delete(middle.id)

    # two images remain, but the next slot is after the highest index
    assert images.next_order_index(album.id) == 3


def test_get_by_token(albums):
    album = albums.create_album(AlbumCreate(
        name="Private", category="misc", is_private=True, passphrase="pw"
    ))

    assert albums.get_by_token(album.access_token).id == album.id
    assert albums.get_by_token("nope0000") is None
    assert albums.get_by_token("") is None


def test_update_to_private_requires_passphrase(albums):
    album = albums.create_album(AlbumCreate(name="Soon private", category="misc"))

    with pytest.raises(StudioValidationError):
        albums.update_album(album.id, AlbumUpdate(is_private=True))


def test_update_to_private_issues_token(albums):
    album = albums.create_album(AlbumCreate(name="Soon private", category="misc"))

    updated = albums.update_album(album.id, AlbumUpdate(is_private=True, passphrase="pw"))

    assert updated.is_private is True
    assert updated.passphrase == "pw"
    assert updated.access_token


def test_update_private_album_keeps_token_and_passphrase(albums):
    album = albums.create_album(AlbumCreate(
        name="Private", category="misc", is_private=True, passphrase="pw"
    ))
    token = album.access_token

    updated = albums.update_album(album.id, AlbumUpdate(name="Renamed"))

    assert updated.name == "Renamed"
    assert updated.access_token == token
    assert updated.passphrase == "pw"


def test_update_to_public_clears_credentials(albums):
    album = albums.create_album(AlbumCreate(
        name="Private", category="misc", is_private=True, passphrase="pw"
    ))

    updated = albums.update_album(album.id, AlbumUpdate(is_private=False))

    assert updated.is_private is False
    assert updated.passphrase is None
    assert updated.access_token is None


def test_update_missing_album(albums):
    assert albums.update_album(999, AlbumUpdate(name="x")) is None


def test_regenerate_access_token(albums):
    album = albums.create_album(AlbumCreate(
        name="Private", category="misc", is_private=True, passphrase="pw"
    ))
    old_token = album.access_token

    new_token = albums.regenerate_access_token(album.id)

    assert new_token and new_token != old_token
    assert albums.get_by_token(old_token) is None


def test_regenerate_access_token_public_album(albums):
    album = albums.create_album(AlbumCreate(name="Public", category="misc"))

    assert albums.regenerate_access_token(album.id) is None
