"""
Application configuration for the Groupie Tracker site
"""
import os

API_BASE_URL = 'https://groupietrackers.herokuapp.com/api'

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

CONFIG = {
    'HOST': 'localhost',
    'PORT': 8080,
    'DEBUG': False,
    'VERBOSE': False,
    'TEMPLATE_FOLDER': os.path.join(BASE_DIR, 'templates'),
    'STATIC_FOLDER': os.path.join(BASE_DIR, 'static'),
    # Remote endpoints, one per record kind
    'ENDPOINTS': {
        'artists': f'{API_BASE_URL}/artists',
        'locations': f'{API_BASE_URL}/locations',
        'dates': f'{API_BASE_URL}/dates',
        'relations': f'{API_BASE_URL}/relation',
    },
    # View name -> template file
    'VIEWS': {
        'index': 'index.html',
        'artist': 'artists.html',
        'locations': 'locations.html',
        'dates': 'dates.html',
        'relations': 'relations.html',
    },
}
