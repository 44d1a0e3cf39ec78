from fastapi import APIRouter, Depends
from datetime import datetime, timezone
import logging

from string_analyzer.config import Settings, get_settings
from string_analyzer.schemas.string_record import ProfileResponse, UserProfile
from string_analyzer.services import cat_facts

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/me", response_model=ProfileResponse)
async def get_profile(settings: Settings = Depends(get_settings)):
    """
    Profile information with a dynamic cat fact.
    """
    timestamp = datetime.now(timezone.utc)
    fact = await cat_facts.fetch_cat_fact(settings)

    logger.info(f"Profile request successful at {timestamp.isoformat()}")
    return ProfileResponse(
        user=UserProfile(
            email=settings.user_email,
            name=settings.user_name,
            stack=settings.user_stack,
        ),
        timestamp=timestamp,
        fact=fact,
    )
