from abc import ABC, abstractmethod
from typing import List, Optional

import httpx

from mixmaster.config import config
from mixmaster.exceptions import LookupFailure, NetworkError, RateLimitError, ResponseParseError
from mixmaster.models import RecipeRecord
from mixmaster.parsers.drinks_parser import DrinksParser
from mixmaster.utils import logger, RetryConfig

class RecipeSource(ABC):
    """Where recipe records come from.

    Both lookups return an empty list when nothing matches and raise
    LookupFailure when the lookup itself fails.
    """
    
    @abstractmethod
    async def fetch_all(self) -> List[RecipeRecord]:
        pass
    
    @abstractmethod
    async def search_by_term(self, term: str) -> List[RecipeRecord]:
        pass
    
    async def close(self):
        pass
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

class CocktailDBSource(RecipeSource):
    """TheCocktailDB search endpoint over httpx"""
    
    def __init__(
        self,
        base_url: str = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = None,
        retry_config: RetryConfig = None
    ):
        self.base_url = (base_url or config.COCKTAILDB_BASE_URL).rstrip('/')
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self.retry_config = retry_config or RetryConfig()
        self.parser = DrinksParser()
        self._client = client
        self._owns_client = client is None
    
    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client
    
    async def fetch_all(self) -> List[RecipeRecord]:
        # The search endpoint with an empty term lists the default catalog
        return await self._search('')
    
    async def search_by_term(self, term: str) -> List[RecipeRecord]:
        return await self._search(term)
    
    async def _search(self, term: str) -> List[RecipeRecord]:
        recipes = await self.retry_config.run(self._request_drinks, term)
        logger.info(f"Lookup for {term!r} returned {len(recipes)} recipes")
        return recipes
    
    async def _request_drinks(self, term: str) -> List[RecipeRecord]:
        url = f"{self.base_url}/search.php"
        logger.debug(f"Requesting {url}?s={term}")
        
        try:
            response = await self.client.get(url, params={'s': term})
        except httpx.TimeoutException as e:
            raise NetworkError(f"Timed out searching for {term!r}: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Could not reach {self.base_url}: {e}") from e
        except httpx.DecodingError as e:
            raise ResponseParseError(f"Could not decode the response for {term!r}: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LookupFailure(f"Request for {term!r} failed: {e}") from e
        
        if response.status_code == 429:
            raise RateLimitError(f"Rate limited by {self.base_url}")
        if response.status_code >= 500:
            raise NetworkError(f"Server error {response.status_code} from {self.base_url}")
        if response.status_code >= 400:
            raise LookupFailure(f"Request for {term!r} failed with status {response.status_code}")
        
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Response for {term!r} is not valid JSON") from e
        
        return self.parser.parse_response(data)
    
    async def close(self):
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
