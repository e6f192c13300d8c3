"""Album workflows that span the database and the upload directory."""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import os
import logging

from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile

from studio.app.exceptions import AccessDeniedError, StudioValidationError
from studio.core.security import verify_passphrase
from studio.models.album import Album
from studio.models.image import Image
from studio.repositories.album_repo import AlbumRepository, AlbumWithImages
from studio.repositories.customer_repo import CustomerRepository
from studio.repositories.image_repo import ImageRepository
from studio.schemas.album import AlbumCreate, AlbumUpdate
from studio.services.storage.local import LocalStorage, LocalStorageError
from studio.utils.validators import MAX_FILE_SIZE_BYTES, validate_image_upload

logger = logging.getLogger(__name__)


@dataclass
class AlbumDeletion:
    """Result of deleting an album together with its files."""
    album_id: int
    deleted_images: int
    failed_files: List[str] = field(default_factory=list)


def upload_size(upload: UploadFile) -> int:
    """Size of an upload in bytes, leaving the stream at its start."""
    upload.file.seek(0, os.SEEK_END)
    size = upload.file.tell()
    upload.file.seek(0)
    return size


class AlbumService:
    """
    Multi-step album actions.

    None of these run in a single transaction: an album is committed before
    its uploads are attached, and files are removed before rows. A failure
    part-way leaves the earlier steps in place.
    """

    def __init__(
        self,
        db: Session,
        storage: LocalStorage,
        max_upload_size: int = MAX_FILE_SIZE_BYTES,
        max_upload_files: int = 50,
        token_length: int = 8,
    ):
        self.db = db
        self.storage = storage
        self.max_upload_size = max_upload_size
        self.max_upload_files = max_upload_files
        self.albums = AlbumRepository(db, token_length=token_length)
        self.images = ImageRepository(db)
        self.customers = CustomerRepository(db)

    def check_customer(self, customer_id: Optional[int]) -> None:
        if customer_id is not None and not self.customers.exists(customer_id):
            raise StudioValidationError(f"Customer {customer_id} does not exist")

    def validate_uploads(self, uploads: Sequence[UploadFile]) -> None:
        """
        Reject the whole batch if any file is not an allowed image.

        Raises:
            StudioValidationError: too many files, or one file is invalid
        """
        if len(uploads) > self.max_upload_files:
            raise StudioValidationError(
                f"Too many files (max {self.max_upload_files} per request)"
            )
        for upload in uploads:
            validate_image_upload(
                upload.filename,
                upload.content_type,
                upload_size(upload),
                max_size=self.max_upload_size,
            )

    def attach_uploads(
        self,
        album_id: int,
        uploads: Sequence[UploadFile],
        start_index: int = 0
    ) -> List[Image]:
        """
        Store uploads and add them to an album in the given order.

        Args:
            album_id: Album ID
            uploads: Validated uploads
            start_index: order_index of the first upload

        Returns:
            Created images
        """
        created = []
        for offset, upload in enumerate(uploads):
            url = self.storage.save(upload.file, upload.filename or "", field="images")
            created.append(
                self.images.add_image(album_id, url, caption=None, order_index=start_index + offset)
            )
        if created:
            logger.info(f"Attached {len(created)} image(s) to album {album_id} from index {start_index}")
        return created

    def create_album(
        self,
        album_data: AlbumCreate,
        uploads: Sequence[UploadFile] = ()
    ) -> AlbumWithImages:
        """
        Create an album, then attach uploads as images 0..N-1.

        Returns:
            (album, images) as stored
        """
        self.check_customer(album_data.customer_id)
        self.validate_uploads(uploads)
        album = self.albums.create_album(album_data)
        self.attach_uploads(album.id, uploads, start_index=0)
        return self.albums.get_with_images(album.id)

    def update_album(
        self,
        album_id: int,
        album_data: AlbumUpdate,
        uploads: Sequence[UploadFile] = ()
    ) -> Optional[AlbumWithImages]:
        """
        Update album fields and append uploads after the current last image.

        Returns:
            (album, images) or None if the album does not exist
        """
        self.check_customer(album_data.customer_id)
        self.validate_uploads(uploads)
        album = self.albums.update_album(album_id, album_data)
        if not album:
            return None

        if uploads:
            start_index = self.images.next_order_index(album_id)
            self.attach_uploads(album_id, uploads, start_index=start_index)
        return self.albums.get_with_images(album_id)

    def delete_album(self, album_id: int) -> Optional[AlbumDeletion]:
        """
        Delete every image file of an album, then the album row.

        Image rows go with the album through the foreign-key cascade. Files
        that cannot be removed do not stop the row deletion; they are
        logged and returned in the result.

        Returns:
            AlbumDeletion or None if the album does not exist
        """
        found = self.albums.get_with_images(album_id)
        if not found:
            return None
        album, images = found

        _, failed = self.storage.delete_files_bulk([image.url for image in images])
        if failed:
            logger.warning(
                f"Album {album_id}: {len(failed)} file(s) could not be deleted: {failed}"
            )

        self.albums.delete(album.id)
        logger.info(f"Deleted album {album_id} with {len(images)} image(s)")
        return AlbumDeletion(album_id=album_id, deleted_images=len(images), failed_files=failed)

    def delete_image(self, image_id: int) -> Optional[bool]:
        """
        Delete one image and its file.

        Returns:
            Whether the file was removed, or None if the image does not exist
        """
        image = self.images.get(image_id)
        if not image:
            return None

        try:
            file_removed = self.storage.delete_file(image.url)
        except LocalStorageError:
            logger.warning(f"Image {image_id}: file {image.url} could not be deleted")
            file_removed = False

        self.images.delete(image_id)
        return file_removed

    def unlock(self, album: Album, passphrase: str) -> List[Image]:
        """
        Release the images of an album once its passphrase is verified.

        Raises:
            AccessDeniedError: passphrase does not match
        """
        if not verify_passphrase(album, passphrase):
            logger.info(f"Rejected passphrase for album {album.id}")
            raise AccessDeniedError("Invalid passphrase")
        return self.images.list_for_album(album.id)

    def unlock_by_id(self, album_id: int, passphrase: str) -> Optional[AlbumWithImages]:
        album = self.albums.get(album_id)
        if not album:
            return None
        return album, self.unlock(album, passphrase)

    def unlock_by_token(self, token: str, passphrase: str) -> Optional[AlbumWithImages]:
        album = self.albums.get_by_token(token)
        if not album:
            return None
        return album, self.unlock(album, passphrase)
