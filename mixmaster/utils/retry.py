import asyncio
import random
from typing import Awaitable, Callable, Tuple, Type, TypeVar
from mixmaster.exceptions import NetworkError, RateLimitError
from mixmaster.utils.logger import logger
from mixmaster.config import config

T = TypeVar("T")

class RetryConfig:
    """How many times a recipe lookup is attempted and how long to back off between tries"""
    
    def __init__(
        self,
        max_attempts: int = None,
        base_delay: float = None,
        max_delay: float = 10.0,
        backoff_factor: float = 2.0,
        jitter: bool = True,
        retry_on: Tuple[Type[Exception], ...] = (NetworkError, RateLimitError)
    ):
        attempts = config.MAX_RETRIES if max_attempts is None else max_attempts
        # A lookup always gets at least one try, even with MAX_RETRIES=0
        self.max_attempts = max(1, attempts)
        self.base_delay = config.RETRY_BASE_DELAY if base_delay is None else base_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.jitter = jitter
        self.retry_on = retry_on
    
    def delay_for(self, failed_attempts: int) -> float:
        """Seconds to wait after `failed_attempts` consecutive failures"""
        delay = min(self.base_delay * self.backoff_factor ** (failed_attempts - 1), self.max_delay)
        if self.jitter:
            delay *= random.uniform(0.5, 1.0)
        return delay
    
    async def run(self, lookup: Callable[..., Awaitable[T]], *args) -> T:
        """Await `lookup(*args)`, retrying transient failures; anything else propagates at once"""
        failed_attempts = 0
        while True:
            try:
                return await lookup(*args)
            except self.retry_on as e:
                failed_attempts += 1
                if failed_attempts >= self.max_attempts:
                    raise
                
                delay = self.delay_for(failed_attempts)
                logger.warning(
                    f"Lookup attempt {failed_attempts}/{self.max_attempts} failed: {e}. "
                    f"Trying again in {delay:.2f}s"
                )
                await asyncio.sleep(delay)
