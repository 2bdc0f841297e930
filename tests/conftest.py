"""Shared pytest fixtures for the Groupie Tracker test suite."""

import json

import pytest

from app import create_app


class FakeRemoteClient:
    """Stands in for RemoteClient, serving canned payloads per endpoint."""

    def __init__(self, payloads=None):
        self.payloads = dict(payloads or {})
        self.calls = []

    def fetch(self, endpoint):
        self.calls.append(endpoint)
        payload = self.payloads[endpoint]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, (bytes, str)):
            return payload
        return json.dumps(payload).encode('utf-8')


ARTISTS_PAYLOAD = [
    {
        "id": 1,
        "image": "https://groupietrackers.herokuapp.com/api/images/queen.jpeg",
        "name": "Queen",
        "members": ["Freddie Mercury", "Brian May", "John Daecon", "Roger Meddows-Taylor"],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
        "locations": "https://groupietrackers.herokuapp.com/api/locations/1",
        "concertDates": "https://groupietrackers.herokuapp.com/api/dates/1",
        "relations": "https://groupietrackers.herokuapp.com/api/relation/1",
    },
    {
        "id": 2,
        "image": "https://groupietrackers.herokuapp.com/api/images/soja.jpeg",
        "name": "SOJA",
        "members": ["Jacob Hemphill", "Bob Jefferson"],
        "creationDate": 1997,
        "firstAlbum": "05-06-2002",
        "locations": "https://groupietrackers.herokuapp.com/api/locations/2",
        "concertDates": "https://groupietrackers.herokuapp.com/api/dates/2",
        "relations": "https://groupietrackers.herokuapp.com/api/relation/2",
    },
]

LOCATIONS_PAYLOAD = {
    "index": [
        {"id": 1, "locations": ["north_carolina-usa", "georgia-usa", "los_angeles-usa"],
         "dates": "https://groupietrackers.herokuapp.com/api/dates/1"},
        {"id": 2, "locations": ["playa_del_carmen-mexico", "papeete-french_polynesia"],
         "dates": "https://groupietrackers.herokuapp.com/api/dates/2"},
    ]
}

DATES_PAYLOAD = {
    "index": [
        {"id": 1, "dates": ["*23-08-2019", "*22-08-2019", "*20-08-2019"]},
        {"id": 2, "dates": ["*05-12-2019", "06-11-2019"]},
    ]
}

RELATIONS_PAYLOAD = {
    "index": [
        {"id": 1, "datesLocations": {
            "georgia-usa": ["22-08-2019"],
            "north_carolina-usa": ["23-08-2019"],
        }},
        {"id": 2, "datesLocations": {
            "playa_del_carmen-mexico": ["05-12-2019"],
        }},
    ]
}


@pytest.fixture
def remote_client():
    return FakeRemoteClient({
        'artists': ARTISTS_PAYLOAD,
        'locations': LOCATIONS_PAYLOAD,
        'dates': DATES_PAYLOAD,
        'relations': RELATIONS_PAYLOAD,
    })


@pytest.fixture
def app(remote_client):
    return create_app({'TESTING': True}, remote_client=remote_client)


@pytest.fixture
def client(app):
    return app.test_client()
