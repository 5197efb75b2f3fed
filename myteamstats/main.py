"""
MyTeamStats - Flask Application

Stateless JSON API over the analytics engine. Clients post their match
history with every request; nothing is stored server-side.
"""

from flask import Flask, request, jsonify
import logging
import os

from .routes import bp
from . import config


def create_app(test_config=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)

    # Configuration
    app.json.ensure_ascii = False
    app.config['MAX_CONTENT_LENGTH'] = config.MAX_CONTENT_LENGTH
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    # Register blueprints
    app.register_blueprint(bp)
    app.logger.info("Analytics API registered at %s", bp.url_prefix)

    # Production: Health check endpoint
    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint for load balancers and monitoring"""
        return jsonify({
            'status': 'healthy',
            'service': 'MyTeamStats'
        }), 200

    @app.errorhandler(404)
    def handle_404_error(e):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'errors': ['Not found']}), 404
        return e

    @app.errorhandler(405)
    def handle_405_error(e):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'errors': ['Method not allowed']}), 405
        return e

    @app.errorhandler(413)
    def handle_413_error(e):
        return jsonify({
            'success': False,
            'errors': ['Match history too large for a single request']
        }), 413

    # Add error handler for API routes to return JSON instead of HTML
    @app.errorhandler(500)
    def handle_500_error(e):
        """Return JSON for API errors - sanitized to prevent information leakage"""
        if request.path.startswith('/api/'):
            # Log full error details server-side for debugging
            app.logger.error(f"500 error on {request.path}: {e}", exc_info=True)
            return jsonify({
                'success': False,
                'errors': ['An internal error occurred. Please try again later.']
            }), 500
        return e

    return app


def main():
    """Main entry point for the development server"""
    if os.environ.get('FLASK_ENV') == 'production':
        print("ERROR: Flask development server cannot run in production mode.")
        print("Use gunicorn instead:")
        print("  gunicorn -c gunicorn.conf.py wsgi:app")
        raise SystemExit(1)

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))
    app = create_app()

    print("MyTeamStats starting in DEVELOPMENT mode...")
    print(f"Serving at http://{config.HOST}:{config.PORT}")
    print("Press Ctrl+C to stop the application")
    app.run(host=config.HOST, port=config.PORT, debug=False)


if __name__ == '__main__':
    main()
