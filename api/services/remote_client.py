"""
Remote client for the read-only artist API
"""
import requests
from requests import RequestException

from utils.errors import TransportError
from utils.logger import logger


class RemoteClient:
    """Fetches raw response bodies from the fixed remote endpoints"""

    def __init__(self, endpoints):
        self.endpoints = dict(endpoints)

    def url_for(self, endpoint):
        try:
            return self.endpoints[endpoint]
        except KeyError:
            raise ValueError(f"Unknown remote endpoint: {endpoint}") from None

    def fetch(self, endpoint):
        """GET the endpoint and return its body; the status code is not inspected"""
        url = self.url_for(endpoint)
        logger(f"Fetching {url}", "DEBUG")
        # No timeout: a hanging remote blocks only the calling request
        try:
            with requests.get(url) as response:
                return response.content
        except RequestException as e:
            raise TransportError(str(e)) from e
