"""Album repository extending base repository."""
from collections import defaultdict
from sqlalchemy.orm import Session
from sqlalchemy import desc, asc
from typing import Optional, List, Tuple, Dict

from studio.repositories.base import BaseRepository
from studio.models.album import Album
from studio.models.image import Image
from studio.schemas.album import AlbumCreate, AlbumUpdate
from studio.core.security import generate_access_token
from studio.app.exceptions import StudioValidationError
import logging

logger = logging.getLogger(__name__)

AlbumWithImages = Tuple[Album, List[Image]]


class AlbumRepository(BaseRepository[Album]):
    """Repository for album database operations."""

    def __init__(self, db: Session, token_length: int = 8):
        super().__init__(Album, db)
        self.token_length = token_length

    def new_access_token(self) -> str:
        """
        Generate an access token not used by any other album.

        Uniqueness is only checked here; the column carries no unique
        constraint, so two concurrent creations could still collide.
        """
        token = generate_access_token(self.token_length)
        while self.get_by_token(token):
            token = generate_access_token(self.token_length)
        return token

    def create_album(self, album_data: AlbumCreate) -> Album:
        """
        Create new album; private albums get a fresh access token.

        Args:
            album_data: Validated album creation data

        Returns:
            Created Album instance
        """
        album_dict = album_data.model_dump()
        if album_data.is_private:
            album_dict['access_token'] = self.new_access_token()
        else:
            album_dict['passphrase'] = None
            album_dict['access_token'] = None

        album = self.create(album_dict)
        logger.info(f"Created album {album.id} ({album.name!r}, private={album.is_private})")
        return album

    def get_by_token(self, token: str) -> Optional[Album]:
        """
        Get album by access token. Images are not loaded.

        Args:
            token: Access token from the delivery link

        Returns:
            Album instance or None if not found
        """
        if not token:
            return None
        return self.db.query(Album).filter(
            Album.access_token == token
        ).order_by(asc(Album.id)).first()

    def images_by_album(self, album_ids: List[int]) -> Dict[int, List[Image]]:
        """
        Load the images of several albums in one query, grouped by album id.

        Each group is sorted by order_index, ties by id.
        """
        grouped: Dict[int, List[Image]] = defaultdict(list)
        if not album_ids:
            return grouped

        images = self.db.query(Image).filter(
            Image.album_id.in_(album_ids)
        ).order_by(asc(Image.album_id), asc(Image.order_index), asc(Image.id)).all()

        for image in images:
            grouped[image.album_id].append(image)

        # the query already orders rows, but grouping must not depend on it
        for album_images in grouped.values():
            album_images.sort(key=lambda img: (img.order_index, img.id))
        return grouped

    def list_with_images(self, include_private: bool = True) -> List[AlbumWithImages]:
        """
        List albums newest first, each paired with its sorted images.

        Albums without images are paired with an empty list.

        Args:
            include_private: Whether private albums are part of the listing

        Returns:
            List of (album, images) tuples
        """
        query = self.db.query(Album)
        if not include_private:
            query = query.filter(Album.is_private.is_(False))
        albums = query.order_by(desc(Album.created_at), desc(Album.id)).all()

        grouped = self.images_by_album([album.id for album in albums])
        return [(album, grouped.get(album.id, [])) for album in albums]

    def get_with_images(self, album_id: int) -> Optional[AlbumWithImages]:
        """
        Get album with its images sorted by order_index.

        Args:
            album_id: Album ID

        Returns:
            (album, images) tuple or None if not found
        """
        album = self.get(album_id)
        if not album:
            return None
        return album, self.images_by_album([album.id]).get(album.id, [])

    def update_album(self, album_id: int, album_data: AlbumUpdate) -> Optional[Album]:
        """
        Partially update an album.

        Switching to private keeps an existing token or issues one, and
        needs a passphrase either supplied now or already stored. Switching
        to public clears both passphrase and token.

        Args:
            album_id: Album ID
            album_data: Update data (unset fields are left untouched)

        Returns:
            Updated Album instance or None if not found

        Raises:
            StudioValidationError: album would end up private without a passphrase
        """
        album = self.get(album_id)
        if not album:
            return None

        update_dict = album_data.model_dump(exclude_unset=True)
        # columns that cannot be NULL are left alone when sent as null
        for field in ('name', 'category', 'is_private'):
            if update_dict.get(field) is None:
                update_dict.pop(field, None)
        is_private = update_dict.get('is_private', album.is_private)

        if is_private:
            passphrase = update_dict.get('passphrase') or album.passphrase
            if not passphrase or not passphrase.strip():
                raise StudioValidationError('passphrase is required for private albums')
            update_dict['passphrase'] = passphrase
            if not album.access_token:
                update_dict['access_token'] = self.new_access_token()
        else:
            update_dict['passphrase'] = None
            update_dict['access_token'] = None

        return self.update(album_id, update_dict)

    def regenerate_access_token(self, album_id: int) -> Optional[str]:
        """
        Issue a new access token for a private album (invalidates old links).

        Args:
            album_id: Album ID

        Returns:
            New token, or None if the album is missing or public
        """
        album = self.get(album_id)
        if not album or not album.is_private:
            return None

        updated = self.update(album_id, {'access_token': self.new_access_token()})
        return updated.access_token if updated else None
