import httpx
from typing import List, Optional
from urllib.parse import quote
from tenacity import Retrying, stop_after_attempt, wait_exponential, retry_if_exception
import logging

from src.core.data_models import TaxonomyRecord
from src.core.taxonomy import parse_records
from config.settings import settings

logger = logging.getLogger(__name__)


def _is_transient(error: BaseException) -> bool:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500 or error.response.status_code == 429
    return isinstance(error, httpx.TransportError)


class SkillLibraryClient:
    """Reads the skill library table from a Supabase (PostgREST) endpoint"""

    def __init__(self,
                 base_url: str,
                 api_key: str,
                 table: str = None,
                 timeout: float = None,
                 max_retries: int = None,
                 min_wait: float = None,
                 max_wait: float = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        self.table = table or settings.SKILL_LIBRARY_TABLE
        self.headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }
        self.timeout = timeout or settings.SKILL_LIBRARY_TIMEOUT
        self.max_retries = max_retries or settings.SKILL_LIBRARY_RETRIES
        self.min_wait = min_wait if min_wait is not None else settings.SKILL_LIBRARY_RETRY_MIN_WAIT
        self.max_wait = max_wait if max_wait is not None else settings.SKILL_LIBRARY_RETRY_MAX_WAIT
        self.transport = transport

    @classmethod
    def from_settings(cls) -> Optional['SkillLibraryClient']:
        """Client for the configured store, or None when no store is configured"""
        if not settings.SKILL_LIBRARY_URL or not settings.SKILL_LIBRARY_KEY:
            return None
        return cls(settings.SKILL_LIBRARY_URL, settings.SKILL_LIBRARY_KEY)

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{quote(self.table)}"

    def _fetch_rows(self, client: httpx.Client) -> list:
        response = client.get(self.table_url, params={"select": "*"}, headers=self.headers)
        response.raise_for_status()
        rows = response.json()
        if not isinstance(rows, list):
            raise ValueError(f"Unexpected skill library payload: {type(rows).__name__}")
        return rows

    def fetch_records(self) -> List[TaxonomyRecord]:
        """Fetch all skill library rows, retrying transient failures"""
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.min_wait, min=self.min_wait, max=self.max_wait),
            retry=retry_if_exception(_is_transient),
            reraise=True,
        )
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            rows = retrying(self._fetch_rows, client)

        records = parse_records(rows)
        logger.info(f"Successfully loaded {len(records)} skills from the skill library")
        return records
