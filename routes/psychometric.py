# routes/psychometric.py
import logging
from functools import wraps
from flask import Blueprint, request, jsonify, session, current_app
from models.question import UnknownSectionError
from questions.sections import SECTION_ORDER, SECTION_SLUGS, get_section
from services.psychometric_service import PsychometricService, SectionValidationError, TestNotFoundError
from services.validation_service import validate_section

logger = logging.getLogger(__name__)

psychometric_bp = Blueprint('psychometric_bp', __name__)

SERVICE_KEY = 'psychometric_service'


def get_service():
    service = current_app.extensions.get(SERVICE_KEY)
    if service is None:
        service = PsychometricService()
        current_app.extensions[SERVICE_KEY] = service
    return service


def _error(message, status, errors=None):
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if 'user_id' not in session:
            return _error("Authentication required. Please log in again.", 401)
        return view(*args, **kwargs)
    return wrapped


def _time_spent(data):
    value = data.get('timeSpent')
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SectionValidationError("Time spent must be a number", ["Time spent must be a number"])
    return value


@psychometric_bp.route('/test', methods=['GET'])
@login_required
def get_test():
    """Get or create the psychometric test for the session user"""
    try:
        test = get_service().get_or_create_test(session['user_id'])
        return jsonify({"success": True, "data": test.to_api_dict()})
    except Exception as e:
        logger.error(f"❌ Error getting psychometric test: {e}")
        return _error("Failed to get psychometric test", 500)


def _submit(section_name, responses, data):
    try:
        time_spent = _time_spent(data)
        test = get_service().submit_section(session['user_id'], section_name, responses, time_spent)
        payload = test.to_api_dict(include_progress=False)
        return jsonify({
            "success": True,
            "message": f"{get_section(section_name).title} results saved successfully",
            "data": payload,
        })
    except SectionValidationError as e:
        return _error("Validation failed", 400, e.errors)
    except Exception as e:
        logger.error(f"❌ Error saving {section_name} results: {e}")
        return _error(f"Failed to save {section_name} results", 500)


def _make_submit_view(section_name):
    def view():
        data = request.get_json(silent=True) or {}
        return _submit(section_name, data.get('responses'), data)
    view.__name__ = f"submit_{section_name}"
    return login_required(view)


for _section in SECTION_ORDER:
    if _section == 'personalInsights':
        continue
    psychometric_bp.add_url_rule(
        f"/{SECTION_SLUGS[_section]}", view_func=_make_submit_view(_section), methods=['POST']
    )


@psychometric_bp.route('/personal-insights', methods=['POST'])
@login_required
def submit_personal_insights():
    """Personal insights arrive as top-level fields rather than a responses map"""
    data = request.get_json(silent=True) or {}
    responses = data.get('responses')
    if responses is None:
        responses = {k: v for k, v in data.items() if k != 'timeSpent'}
    return _submit('personalInsights', responses, data)


@psychometric_bp.route('/save-progress', methods=['POST'])
@login_required
def save_progress():
    data = request.get_json(silent=True) or {}
    try:
        section_name = data.get('sectionType')
        responses = data.get('responses')
        index = data.get('currentQuestionIndex', 0)
        test = get_service().save_progress(session['user_id'], section_name, responses, index)
        return jsonify({
            "success": True,
            "message": "Progress saved successfully",
            "data": {
                "testId": test.test_id,
                "sectionType": section_name,
                "savedResponses": len(responses),
                "currentQuestionIndex": test.progress[section_name]['currentQuestionIndex'],
            }
        })
    except UnknownSectionError:
        return _error("Invalid section type", 400, ["Invalid section type"])
    except SectionValidationError as e:
        return _error("Validation failed", 400, e.errors)
    except Exception as e:
        logger.error(f"❌ Error saving progress: {e}")
        return _error("Failed to save progress", 500)


@psychometric_bp.route('/progress/<section_name>', methods=['GET'])
@login_required
def get_progress(section_name):
    try:
        saved = get_service().get_progress(session['user_id'], section_name)
        if not saved:
            return jsonify({"success": True, "data": None})
        return jsonify({
            "success": True,
            "data": {
                "sectionType": section_name,
                "responses": saved.get('responses') or {},
                "currentQuestionIndex": saved.get('currentQuestionIndex', 0),
            }
        })
    except UnknownSectionError:
        return _error("Invalid section type", 400, ["Invalid section type"])
    except Exception as e:
        logger.error(f"❌ Error loading progress: {e}")
        return _error("Failed to load progress", 500)


@psychometric_bp.route('/validate-section', methods=['POST'])
@login_required
def validate_section_route():
    data = request.get_json(silent=True) or {}
    section_name = data.get('sectionType')
    responses = data.get('responses')
    if not isinstance(responses, dict):
        return _error("Validation failed", 400, ["Responses must be an object"])
    try:
        result = validate_section(section_name, responses)
        return jsonify({"success": True, "data": result.to_dict()})
    except UnknownSectionError:
        return _error("Invalid section type", 400, ["Invalid section type"])


@psychometric_bp.route('/results', methods=['GET'])
@psychometric_bp.route('/results/<test_id>', methods=['GET'])
@login_required
def get_results(test_id=None):
    try:
        test = get_service().get_test_results(session['user_id'], test_id)
        if not test:
            return _error("Test not found", 404)
        return jsonify({"success": True, "data": test.to_api_dict(include_progress=False)})
    except TestNotFoundError:
        return _error("Test not found", 404)
    except Exception as e:
        logger.error(f"❌ Error getting test results: {e}")
        return _error("Failed to get test results", 500)


@psychometric_bp.route('/history', methods=['GET'])
@login_required
def get_history():
    limit = request.args.get('limit', type=int) or current_app.config.get('HISTORY_DEFAULT_LIMIT', 10)
    try:
        tests = get_service().get_test_history(session['user_id'], limit)
        return jsonify({
            "success": True,
            "data": {"tests": [t.to_history_dict() for t in tests], "total": len(tests)}
        })
    except Exception as e:
        logger.error(f"❌ Error getting test history: {e}")
        return _error("Failed to get test history", 500)


@psychometric_bp.route('/test/<test_id>', methods=['DELETE'])
@login_required
def delete_test(test_id):
    try:
        if not get_service().delete_test(session['user_id'], test_id):
            return _error("Test not found or cannot be deleted", 404)
        return jsonify({"success": True, "message": "Test deleted successfully"})
    except Exception as e:
        logger.error(f"❌ Error deleting test: {e}")
        return _error("Failed to delete test", 500)


@psychometric_bp.route('/section-access/<section_name>', methods=['GET'])
@login_required
def section_access(section_name):
    try:
        return jsonify({
            "success": True,
            "data": get_service().check_section_access(session['user_id'], section_name)
        })
    except UnknownSectionError:
        return _error("Invalid section type", 400, ["Invalid section type"])
    except Exception as e:
        logger.error(f"❌ Error checking section access: {e}")
        return _error("Failed to check section access", 500)


@psychometric_bp.route('/career-recommendations/<holland_code>', methods=['GET'])
def career_recommendations(holland_code):
    if not 1 <= len(holland_code) <= 6:
        return _error("Validation failed", 400, ["Holland Code must be 1-6 characters"])
    data = get_service().interpretation.career_recommendations(holland_code)
    return jsonify({"success": True, "data": data})


@psychometric_bp.route('/stats', methods=['GET'])
@login_required
def platform_stats():
    if session['user_id'] not in current_app.config.get('ADMIN_USER_IDS', []):
        return _error("Access denied. Admin privileges required.", 403)
    try:
        return jsonify({"success": True, "data": get_service().get_platform_stats()})
    except Exception as e:
        logger.error(f"❌ Error getting platform stats: {e}")
        return _error("Failed to get platform statistics", 500)


@psychometric_bp.route('/questions/<section_name>', methods=['GET'])
def get_questions(section_name):
    """Question bank for a section (safe to send to client)"""
    try:
        return jsonify({"success": True, "data": get_section(section_name).to_dict()})
    except UnknownSectionError:
        return _error("Invalid section type", 404)
