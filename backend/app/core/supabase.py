import logging
from supabase import Client, create_client

from .config import Settings

logger = logging.getLogger(__name__)


def create_identity_client(settings: Settings) -> Client:
    """Build the Supabase client once per process from the loaded settings."""
    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    logger.debug("Supabase client created for %s", settings.SUPABASE_URL)
    return client
