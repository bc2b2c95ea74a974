"""JSON API endpoints for the contact form."""

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from contactdesk.errors import StoreError, ValidationError
from contactdesk.forms import validate_submission

api_bp = Blueprint('api', __name__)

# Signed 64-bit range accepted by the database drivers
MIN_ID = -2 ** 63
MAX_ID = 2 ** 63 - 1


def get_store():
    return current_app.extensions['contact_store']


@api_bp.route('/health')
def health():
    """Liveness check."""
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat()
    })


@api_bp.route('/contacts')
def list_contacts():
    """List all contacts, newest first."""
    try:
        contacts = get_store().list_all()
    except StoreError as e:
        return jsonify({'success': False, 'error': str(e)}), 500

    return jsonify({
        'success': True,
        'data': [c.to_dict() for c in contacts]
    })


@api_bp.route('/contacts', methods=['POST'])
def create_contact():
    """Validate and store a contact submission."""
    data = request.get_json(silent=True)

    try:
        submission = validate_submission(
            data, current_app.config['MESSAGE_MIN_LENGTH'])
    except ValidationError as e:
        return jsonify({'success': False, 'errors': e.violations}), 400

    try:
        contact_id = get_store().create(submission)
    except StoreError as e:
        return jsonify({'success': False, 'error': str(e)}), 500

    return jsonify({
        'success': True,
        'message': 'Contact submitted successfully!',
        'id': contact_id
    }), 201


@api_bp.route('/contacts/<contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    """Delete a contact. Missing or malformed ids are not an error."""
    try:
        contact_id = int(contact_id)
    except ValueError:
        contact_id = None
    if contact_id is None or not MIN_ID <= contact_id <= MAX_ID:
        # No row can have this id, so it is already absent
        return jsonify({'success': True, 'message': 'Contact deleted'})

    try:
        get_store().delete_by_id(contact_id)
    except StoreError as e:
        return jsonify({'success': False, 'error': str(e)}), 500

    return jsonify({'success': True, 'message': 'Contact deleted'})
