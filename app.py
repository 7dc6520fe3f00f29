from flask import Flask, jsonify
import logging
import os
from config import get_config
from database.mongodb import mongo_db
from routes.psychometric import psychometric_bp, SERVICE_KEY
from routes.user import user_bp

logger = logging.getLogger(__name__)


def create_app(config_class=None, psychometric_service=None):
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    if psychometric_service is not None:
        app.extensions[SERVICE_KEY] = psychometric_service

    # Register blueprints
    app.register_blueprint(psychometric_bp, url_prefix='/api/psychometric')
    app.register_blueprint(user_bp, url_prefix='/api/user')

    @app.route('/api/health')
    def health():
        return jsonify({"success": True, "message": "ok"})

    @app.errorhandler(404)
    def not_found(_error):
        return jsonify({"success": False, "message": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return jsonify({"success": False, "message": "Method not allowed"}), 405

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()

    # Initialize database
    try:
        mongo_db.init_database()
        logger.info("✅ Database initialized successfully")
    except Exception as e:
        logger.error(f"❌ Database initialization failed: {e}")

    port = int(os.environ.get('PORT', 5000))
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=port)
