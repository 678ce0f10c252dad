import logging
from typing import Dict

from use_cases.errors import WaitlistWriteError

log = logging.getLogger(__name__)

WAITLIST_TABLE = "early_signups"


class SupabaseWaitlistRepository:
    def __init__(self, client, table: str = WAITLIST_TABLE):
        self.client = client
        self.table = table

    def insert_entry(self, full_name: str, email: str, field: str) -> None:
        """Stores one waitlist row. Duplicate handling is left to the table's constraints."""
        row: Dict[str, str] = {"full_name": full_name, "email": email, "field": field}
        try:
            self.client.table(self.table).insert([row]).execute()
        except Exception as e:
            log.error(f"Waitlist insert into {self.table} failed: {e}")
            raise WaitlistWriteError(str(e)) from e
        log.info(f"Waitlist entry stored in {self.table}")
