import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def log_event(
    action: str,
    details: Optional[Dict[str, Any]] = None,
    user_id: Optional[str] = None
):
    """
    Log an application event with the acting user and extra details
    """
    log_message = f"Action: {action}"
    if user_id:
        log_message += f" | User: {user_id}"
    if details:
        log_message += f" | Details: {details}"

    logger.info(log_message)

def log_error(message: str, error: Exception, user_id: Optional[str] = None):
    """
    Log an error with context
    """
    error_message = f"Error: {message} | Exception: {str(error)}"
    if user_id:
        error_message += f" | User: {user_id}"

    logger.error(error_message)

def log_debug(message: str, details: Optional[Dict[str, Any]] = None):
    debug_message = f"Debug: {message}"
    if details:
        debug_message += f" | Details: {details}"

    logger.debug(debug_message)

# Event type constants for consistency
class EventTypes:
    TEAM_POKEMON_ADDED = "team_pokemon_added"
    TEAM_POKEMON_REMOVED = "team_pokemon_removed"
    TEAM_FULL_REJECTED = "team_full_rejected"
    TEAM_CLEARED = "team_cleared"

    CATALOG_FETCHED = "catalog_fetched"
