import httpx
import logging
from typing import Optional

from string_analyzer.config import Settings

logger = logging.getLogger(__name__)

FALLBACK_FACT = "Cats spend 70% of their lives sleeping, which is about 13-16 hours a day."


async def fetch_cat_fact(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Fetch a random cat fact from the Cat Facts API.
    Returns a fallback message if the API fails.
    """
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.api_timeout) as owned:
                response = await owned.get(settings.cat_facts_api)
        else:
            response = await client.get(settings.cat_facts_api)
        response.raise_for_status()
        data = response.json()
        fact = data.get("fact") if isinstance(data, dict) else None
        return fact if isinstance(fact, str) and fact else FALLBACK_FACT
    except httpx.TimeoutException:
        logger.error("Cat Facts API request timed out")
    except httpx.HTTPError as e:
        logger.error(f"HTTP error fetching cat fact: {e}")
    except ValueError as e:
        logger.error(f"Malformed cat fact response: {e}")
    return FALLBACK_FACT
