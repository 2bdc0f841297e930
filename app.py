"""
Groupie Tracker Web Application
Artist pages rendered from the remote Groupie Trackers API
"""
from http import HTTPStatus

from flask import Flask
from werkzeug.exceptions import HTTPException, NotFound

from config import CONFIG
from utils.errors import SiteError
from utils.logger import configure_logging, logger

# Import route blueprints
from api.routes.main_routes import main_bp, not_found_response
from api.routes.artist_routes import artists_bp
from api.services.remote_client import RemoteClient
from api.services.view_renderer import ViewRenderer


def create_app(config=None, remote_client=None):
    """Application factory pattern"""
    settings = dict(CONFIG)
    settings.update(config or {})

    app = Flask(__name__,
                template_folder=settings['TEMPLATE_FOLDER'],
                static_folder=settings['STATIC_FOLDER'],
                static_url_path='/static')
    app.config.update(settings)

    # Collaborators shared by every request, built once
    app.extensions['remote_client'] = remote_client or RemoteClient(settings['ENDPOINTS'])
    app.extensions['view_renderer'] = ViewRenderer(settings['VIEWS'])

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(artists_bp)

    app.register_error_handler(SiteError, handle_site_error)
    app.register_error_handler(NotFound, handle_not_found)
    app.register_error_handler(HTTPException, handle_http_error)

    return app


def handle_site_error(error):
    """Turn any pipeline error into a plain-text response"""
    status = HTTPStatus(error.status_code)
    severity = 'ERROR' if status >= HTTPStatus.INTERNAL_SERVER_ERROR else 'WARNING'
    logger(f"{status.value} {type(error).__name__}: {error.message}", severity)
    return error.message, status, {'Content-Type': 'text/plain; charset=utf-8'}


def handle_not_found(error):
    return not_found_response()


def handle_http_error(error):
    """Plain-text body for the remaining HTTP errors, keeping their headers (e.g. Allow)"""
    response = error.get_response()
    response.set_data(f"{error.code} {error.name}")
    response.content_type = 'text/plain; charset=utf-8'
    return response


if __name__ == '__main__':
    configure_logging(CONFIG['VERBOSE'])
    app = create_app()
    logger(f"Server is running on http://{CONFIG['HOST']}:{CONFIG['PORT']}", "INFO")
    app.run(host=CONFIG['HOST'], port=CONFIG['PORT'], debug=CONFIG['DEBUG'])
