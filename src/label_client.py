import os
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import requests

DEFAULT_BASE_URL = "https://api.fda.gov/drug/label.json"
DEFAULT_TIMEOUT_SECONDS = 10


class UpstreamRequestError(Exception):
    """Raised when a single label search cannot be completed."""


# Blueprint every label source follows
class BaseLabelClient(ABC):
    @abstractmethod
    def search(self, query: str, limit: int = 1) -> List[dict]:
        pass

    def close(self) -> None:
        pass


class OpenFDAClient(BaseLabelClient):
    def __init__(self, base_url: str = DEFAULT_BASE_URL,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 api_key: Optional[str] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.api_key = api_key
        self.session = requests.Session()
        logging.info(f"OpenFDAClient initialized for {self.base_url} (timeout={self.timeout}s).")

    def search(self, query: str, limit: int = 1) -> List[dict]:
        params = {"search": query, "limit": limit}
        if self.api_key:
            params["api_key"] = self.api_key
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            # requests' JSONDecodeError is a RequestException too
            raise UpstreamRequestError(f"openFDA request failed for {query!r}: {e}") from e
        return data.get("results") or []

    def close(self) -> None:
        self.session.close()


def create_label_client(config: Optional[dict] = None) -> OpenFDAClient:
    """Builds the openFDA client from the `openfda` section of params.yaml."""
    config = config or {}
    api_key = os.getenv("OPENFDA_API_KEY") or config.get("api_key")
    return OpenFDAClient(
        base_url=config.get("base_url", DEFAULT_BASE_URL),
        timeout=float(config.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
        api_key=api_key,
    )
