import logging

logger = logging.getLogger(__name__)


def schedule_weekly_email(user_id, email, name):
    """Queue the weekly insights email. Delivery is not wired up yet, so this only logs."""
    if not user_id or not email:
        logger.warning(f"Weekly email request is missing userId or email (userId={user_id}, email={email})")
    logger.info(f"Weekly email would be sent to {email} ({name}) for user {user_id}")
    return {"success": True, "message": "Weekly email scheduled successfully"}
