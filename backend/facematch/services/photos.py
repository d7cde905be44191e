from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from facematch import db
from facematch.errors import StorageError, PhotoNotFoundError
from facematch.models import Photo


def list_photos_for_user(user_id: int) -> List[Photo]:
    try:
        return Photo.query.filter_by(user_id=user_id).order_by(Photo.id).all()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError(f"Error retrieving photos: {exc}") from exc


def get_photo_by_id(photo_id, user_id: Optional[int] = None) -> Photo:
    """Fetch one photo, optionally restricted to its owner.

    Raises PhotoNotFoundError when the id is malformed, missing, or owned
    by someone other than ``user_id``.
    """
    try:
        pid = int(photo_id)
    except (TypeError, ValueError):
        raise PhotoNotFoundError('Photo not found.')
    try:
        photo = db.session.get(Photo, pid)
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError(f"Error retrieving photo: {exc}") from exc
    if photo is None or (user_id is not None and photo.user_id != user_id):
        raise PhotoNotFoundError('Photo not found.')
    return photo


def add_photo(user_id: int, url: str, label: str) -> Photo:
    photo = Photo(url=url, label=label, user_id=user_id)
    try:
        db.session.add(photo)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError(f"Error saving photo: {exc}") from exc
    return photo


def delete_photo(photo_id, user_id: int) -> None:
    photo = get_photo_by_id(photo_id, user_id=user_id)
    try:
        db.session.delete(photo)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError(f"Error deleting photo: {exc}") from exc
