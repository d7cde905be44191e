from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from facematch.errors import StorageError, PhotoNotFoundError
from facematch.services import photos as photo_store

photos = Blueprint('photos', __name__)


@photos.route('', methods=['GET'])
@login_required
def list_photos():
    try:
        items = photo_store.list_photos_for_user(current_user.id)
    except StorageError as exc:
        return jsonify({'error': exc.message}), exc.status_code
    return jsonify([p.to_dict() for p in items])


@photos.route('', methods=['POST'])
@login_required
def upload_photo():
    data = request.get_json(silent=True) or {}
    url = (data.get('url') or '').strip()
    label = (data.get('label') or '').strip()
    if not all([url, label]):
        return jsonify({'error': 'Photo url and label are required'}), 400
    try:
        photo = photo_store.add_photo(current_user.id, url, label)
    except StorageError as exc:
        return jsonify({'error': exc.message}), exc.status_code
    return jsonify(photo.to_dict()), 201


@photos.route('/<int:photo_id>', methods=['DELETE'])
@login_required
def delete_photo(photo_id):
    try:
        photo_store.delete_photo(photo_id, current_user.id)
    except (PhotoNotFoundError, StorageError) as exc:
        return jsonify({'error': exc.message}), exc.status_code
    return jsonify({'message': 'Photo deleted'})
