"""
Main routes for the application
"""
from http import HTTPStatus

from flask import Blueprint, current_app, redirect, url_for
from ..services.artist_service import ArtistService

main_bp = Blueprint('main', __name__)

NOT_FOUND_MESSAGE = 'Page not found'

ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def not_found_response():
    return NOT_FOUND_MESSAGE, HTTPStatus.NOT_FOUND, {'Content-Type': 'text/plain; charset=utf-8'}


@main_bp.route('/')
def index():
    """Main page listing every artist"""
    artists = ArtistService.get_artists()
    return current_app.extensions['view_renderer'].render('index', artists)


@main_bp.route('/artists')
def artists():
    """Legacy alias for the listing page"""
    return redirect(url_for('main.index'), code=HTTPStatus.TEMPORARY_REDIRECT)


@main_bp.route('/404', methods=ALL_METHODS)
def not_found():
    return not_found_response()
