from typing import Iterable, List, Optional
import datetime
import logging

from django.db import transaction
from django.utils import timezone

from .models import DailyIntakeLog

logger = logging.getLogger(__name__)


def intake_entry(meal_id: str, meal_name: str, quantity: int) -> dict:
    """The simplified consumption record stored in the intake log."""
    return {"meal_id": meal_id, "meal_name": meal_name, "quantity": quantity}


class IntakeLogService:

    @staticmethod
    @transaction.atomic
    def append_entries(client_id: str, entries: Iterable[dict], day: Optional[datetime.date] = None) -> DailyIntakeLog:
        """
        Adds ``entries`` to the client's log for ``day`` (today by default).

        Union semantics: an entry equal to one already in the log is not
        added again, so replaying the same append leaves the log unchanged.
        Joins the caller's transaction when there is one.
        """
        day = day or timezone.localdate()
        log, _ = DailyIntakeLog.objects.select_for_update().get_or_create(client_id=client_id, date=day)

        current = list(log.entries or [])
        added = 0
        for entry in entries:
            if entry not in current:
                current.append(entry)
                added += 1

        if added:
            log.entries = current
            log.save(update_fields=["entries", "updated_at"])

        logger.debug(f"Appended {added} intake entries for {client_id} on {day}")
        return log

    @staticmethod
    def entries_for(client_id: str, day: Optional[datetime.date] = None) -> List[dict]:
        day = day or timezone.localdate()
        log = DailyIntakeLog.objects.filter(client_id=client_id, date=day).first()
        return list(log.entries) if log else []
