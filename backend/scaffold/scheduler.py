"""
Scheduled Task Module

Uses APScheduler to renew this instance's lease with the service registry.
"""

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from scaffold.config import get_settings
from scaffold.registry import ServiceRegistryClient

logger = logging.getLogger(__name__)

# Global Scheduler Instance
_scheduler: Optional[AsyncIOScheduler] = None


async def renew_lease_task(registry: ServiceRegistryClient):
    """
    Scheduled Lease Renewal Task

    A failed heartbeat is retried on the next interval.
    """
    try:
        await registry.renew()
    except Exception as e:
        logger.error(f"Lease renewal task failed: {str(e)}", exc_info=True)


def start_scheduler(registry: ServiceRegistryClient):
    """
    Start Scheduled Task Scheduler

    Initializes the scheduler and adds the heartbeat task.
    """
    global _scheduler

    if _scheduler is not None:
        logger.warning("Scheduler already started")
        return

    settings = get_settings()

    # Create scheduler
    _scheduler = AsyncIOScheduler()

    _scheduler.add_job(
        renew_lease_task,
        trigger=IntervalTrigger(seconds=settings.REGISTRY_HEARTBEAT_SECONDS),
        args=[registry],
        id="renew_registry_lease",
        name="Renew service registry lease",
        replace_existing=True,
    )

    # Start scheduler
    _scheduler.start()

    logger.info(
        "Scheduler started: registry lease renewal every "
        f"{settings.REGISTRY_HEARTBEAT_SECONDS} seconds"
    )


def shutdown_scheduler():
    """
    Shutdown Scheduled Task Scheduler

    Gracefully stops all scheduled tasks.
    """
    global _scheduler

    if _scheduler is None:
        return

    _scheduler.shutdown(wait=True)
    _scheduler = None
    logger.info("Scheduler shutdown completed")


def get_scheduler() -> Optional[AsyncIOScheduler]:
    """
    Get Scheduler Instance

    Returns:
        Optional[AsyncIOScheduler]: Scheduler instance or None
    """
    return _scheduler
