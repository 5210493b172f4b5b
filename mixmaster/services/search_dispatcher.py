import asyncio
from typing import Set
from mixmaster.exceptions import LookupFailure
from mixmaster.models import BrowserState
from mixmaster.services.browser_store import (
    ChangeSearchTerm,
    LookupFailed,
    LookupSucceeded,
    Store,
)
from mixmaster.services.recipe_source import RecipeSource
from mixmaster.utils import logger

class SearchDispatcher:
    """Turns search term changes into recipe source lookups.

    Lookups run as tasks and are never cancelled. Each one carries the
    request id issued when its term was recorded, and only the response to
    the latest id is applied to the store.
    """
    
    def __init__(self, store: Store, source: RecipeSource):
        self.store = store
        self.source = source
        self._pending: Set[asyncio.Task] = set()
    
    def change_search_term(self, term: str) -> asyncio.Task:
        """Record the term and start its lookup; must be called inside a running loop"""
        state = self.store.dispatch(ChangeSearchTerm(term))
        request_id = state.latest_request_id
        
        task = asyncio.get_running_loop().create_task(self._lookup(term, request_id))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
    
    async def search(self, term: str) -> BrowserState:
        """Start a lookup and wait for it"""
        await self.change_search_term(term)
        return self.store.state
    
    async def load_initial(self) -> BrowserState:
        return await self.search('')
    
    async def drain(self):
        """Wait for every in-flight lookup to settle"""
        while self._pending:
            await asyncio.gather(*list(self._pending))
    
    async def _lookup(self, term: str, request_id: int):
        try:
            if term:
                recipes = await self.source.search_by_term(term)
            else:
                recipes = await self.source.fetch_all()
        except LookupFailure as e:
            if self._is_stale(request_id):
                logger.debug(f"Dropping failure of superseded request {request_id} ({term!r}): {e}")
                return
            logger.error(f"Error searching cocktails for {term!r}: {e}")
            self.store.dispatch(LookupFailed(request_id, str(e)))
            return
        except Exception as e:
            if self._is_stale(request_id):
                logger.debug(f"Dropping error of superseded request {request_id} ({term!r}): {e!r}")
                return
            logger.exception(f"Unexpected error searching cocktails for {term!r}: {e!r}")
            self.store.dispatch(LookupFailed(request_id, f"Unexpected error: {e}"))
            return
        
        if self._is_stale(request_id):
            logger.debug(f"Dropping response to superseded request {request_id} ({term!r})")
            return
        
        self.store.dispatch(LookupSucceeded(request_id, tuple(recipes)))
    
    def _is_stale(self, request_id: int) -> bool:
        return request_id != self.store.state.latest_request_id
