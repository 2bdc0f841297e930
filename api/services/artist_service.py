"""
Artist service module composing the fetch-decode-select pipeline
"""
from flask import current_app

from utils.errors import NotFoundError
from utils.logger import logger
from . import record_decoder
from .record_selector import select


class ArtistService:
    """Service class for artist, location, date and relation lookups"""

    @staticmethod
    def get_remote_client():
        """Remote client configured on the running application"""
        return current_app.extensions['remote_client']

    @staticmethod
    def fetch_collection(endpoint):
        """Fetch one remote endpoint and decode it with its fixed shape"""
        payload = ArtistService.get_remote_client().fetch(endpoint)
        collection = record_decoder.decode(
            payload, record_decoder.ENDPOINT_SHAPES[endpoint])
        logger(f"Decoded {len(collection)} {endpoint} records", "DEBUG")
        return collection

    @staticmethod
    def find_record(endpoint, record_id, label):
        collection = ArtistService.fetch_collection(endpoint)
        record, found = select(collection, record_id)
        if not found:
            raise NotFoundError(f"{label} {record_id} not found")
        return record

    @staticmethod
    def get_artists():
        """Get the full artist collection for the listing page"""
        return ArtistService.fetch_collection('artists')

    @staticmethod
    def get_artist(artist_id):
        return ArtistService.find_record('artists', artist_id, 'Artist')

    @staticmethod
    def get_locations(artist_id):
        """Get the ordered place names an artist toured"""
        return ArtistService.find_record('locations', artist_id, 'Locations for artist').locations

    @staticmethod
    def get_dates(artist_id):
        """Get the ordered concert dates of an artist"""
        return ArtistService.find_record('dates', artist_id, 'Dates for artist').dates

    @staticmethod
    def get_relations(artist_id):
        """Get the location -> dates mapping of an artist"""
        return ArtistService.find_record(
            'relations', artist_id, 'Relations for artist').dates_locations
