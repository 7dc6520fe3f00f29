from flask import Blueprint, request, jsonify, session
import logging
import uuid
from models.user import User

logger = logging.getLogger(__name__)

user_bp = Blueprint('user', __name__)


@user_bp.route('/create', methods=['POST'])
def create_user():
    try:
        user_data = request.get_json(silent=True) or {}

        # Validate required fields
        required_fields = ['name', 'email']
        for field in required_fields:
            if field not in user_data or not user_data[field]:
                return jsonify({"success": False, "message": f"Missing required field: {field}"}), 400

        existing = User.find_by_email(user_data['email'])
        if existing:
            user = existing
        else:
            # Generate unique user ID
            user_data['user_id'] = str(uuid.uuid4())
            user = User.create_user({
                'user_id': user_data['user_id'],
                'name': user_data['name'],
                'email': user_data['email'],
            })
            logger.info(f"👤 Created user {user.user_id}")

        # Store user ID in session
        session['user_id'] = user.user_id

        return jsonify({
            "success": True,
            "data": {"userId": user.user_id},
            "message": "User created successfully"
        })

    except Exception as e:
        logger.error(f"❌ Error creating user: {e}")
        return jsonify({"success": False, "message": "Failed to create user"}), 500


@user_bp.route('/me')
def get_profile():
    if 'user_id' not in session:
        return jsonify({"success": False, "message": "Authentication required. Please log in again."}), 401

    try:
        user = User.get_user(session['user_id'])
        if not user:
            return jsonify({"success": False, "message": "User not found"}), 404

        return jsonify({"success": True, "data": user.to_public_dict()})

    except Exception as e:
        logger.error(f"❌ Error loading profile: {e}")
        return jsonify({"success": False, "message": "Failed to load profile"}), 500
