"""
Artist routes for the detail pages selected by the ``id`` query parameter
"""
from flask import Blueprint, current_app, request
from ..services.artist_service import ArtistService
from ..services.record_selector import parse_id

artists_bp = Blueprint('artists', __name__)


def render_view(view_name, data):
    return current_app.extensions['view_renderer'].render(view_name, data)


@artists_bp.route('/artists.html')
def artist_detail():
    """Display detailed information for a specific artist"""
    artist_id = parse_id(request.args.get('id'))
    return render_view('artist', ArtistService.get_artist(artist_id))


@artists_bp.route('/locations.html')
def locations():
    """Display the tour locations of a specific artist"""
    artist_id = parse_id(request.args.get('id'))
    return render_view('locations', ArtistService.get_locations(artist_id))


@artists_bp.route('/dates.html')
def dates():
    """Display the concert dates of a specific artist"""
    artist_id = parse_id(request.args.get('id'))
    return render_view('dates', ArtistService.get_dates(artist_id))


@artists_bp.route('/relations.html')
def relations():
    """Display the dates played at each location by a specific artist"""
    artist_id = parse_id(request.args.get('id'))
    return render_view('relations', ArtistService.get_relations(artist_id))
