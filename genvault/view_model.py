"""
View model for the vault page.

Holds the user's entries, the in-progress draft, the generator options and
the search term, and keeps the entries in sync with the remote service.

LEGAL NOTICE:
Entries and generated passwords are held in memory as plaintext for the
lifetime of the view model. Nothing is written to disk.
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, List, Optional

from .api_client import RemoteVaultAPI, VaultAPIError
from .models import VaultEntry, Draft, GeneratorOptions
from . import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """Outcome of a remote operation.

    stale is set when the response arrived after a newer one of the same
    kind had already been applied, so it was dropped.
    """
    ok: bool
    value: Any = None
    error: Optional[VaultAPIError] = None
    stale: bool = False

    @classmethod
    def success(cls, value: Any = None, stale: bool = False) -> 'Result':
        return cls(ok=True, value=value, stale=stale)

    @classmethod
    def failure(cls, error: VaultAPIError) -> 'Result':
        return cls(ok=False, error=error)


class VaultViewModel:
    """State and operations behind the vault page.

    Remote operations block on the network and may be called from worker
    threads. State is guarded by a lock that is never held across a request.
    """

    def __init__(self, api: RemoteVaultAPI):
        self.api = api
        self._lock = threading.Lock()
        self._entries: List[VaultEntry] = []
        self._draft = Draft()
        self._options = GeneratorOptions()
        self._search_term = ""
        self._status_message = ""
        # Sequence numbers: last issued / last applied, per operation
        self._refresh_issued = 0
        self._refresh_applied = 0
        self._generate_issued = 0
        self._generate_applied = 0

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def entries(self) -> List[VaultEntry]:
        with self._lock:
            return list(self._entries)

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def status_message(self) -> str:
        return self._status_message

    # ------------------------------------------------------------------
    # Local updates
    # ------------------------------------------------------------------

    def update_draft_field(self, field: str, value: str) -> None:
        """
        Set one draft field. No validation is performed on the value.
        Args:
            field: 'siteName', 'link' or 'password' (or the attribute names
                'site_name', 'link', 'password')
            value: New field value
        """
        attr = Draft.FIELDS.get(field, field)
        if attr not in Draft.FIELDS.values():
            raise ValueError(f"Unknown draft field: {field!r}")
        with self._lock:
            self._draft = replace(self._draft, **{attr: value})

    def reset_draft(self) -> None:
        with self._lock:
            self._draft = Draft()

    def set_option(self, name: str, value: int) -> None:
        """Set one generator option. The value is passed to the service as-is."""
        if name not in GeneratorOptions.NAMES:
            raise ValueError(f"Unknown generator option: {name!r}")
        with self._lock:
            self._options = replace(self._options, **{name: value})

    def set_search_term(self, term: str) -> None:
        with self._lock:
            self._search_term = term

    def clear_status(self) -> None:
        with self._lock:
            self._status_message = ""

    def filtered_entries(self) -> List[VaultEntry]:
        """Entries whose site name contains the search term, ignoring case."""
        needle = self._search_term.lower()
        return [e for e in self.entries if needle in e.site_name.lower()]

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    def refresh(self, user_id: str) -> Result:
        """
        Replace the entry list with the remote snapshot for user_id.
        Returns:
            Result whose value is the new entry list. On failure the local
            list is left untouched.
        """
        self._require_user_id(user_id)
        with self._lock:
            self._refresh_issued += 1
            seq = self._refresh_issued

        try:
            entries = self.api.fetch_entries(user_id)
        except VaultAPIError as e:
            logger.error(f"Error fetching entries for user {user_id}: {e}")
            return Result.failure(e)

        with self._lock:
            if seq < self._refresh_applied:
                logger.debug(f"Discarding stale refresh #{seq} (already applied #{self._refresh_applied})")
                return Result.success(entries, stale=True)
            self._refresh_applied = seq
            self._entries = list(entries)
        logger.info(f"Loaded {len(entries)} entries for user {user_id}")
        return Result.success(entries)

    def save(self, user_id: str) -> Result:
        """
        Send the current draft as a new entry, then refresh.

        Concurrent saves are not deduplicated: each call sends its own
        request.
        Returns:
            Result whose value is the Result of the follow-up refresh.
        """
        self._require_user_id(user_id)
        with self._lock:
            draft = self._draft

        try:
            self.api.save_entry(user_id, draft)
        except VaultAPIError as e:
            logger.error(f"Error saving entry for user {user_id}: {e}")
            with self._lock:
                self._status_message = config.STATUS_SAVE_FAILURE
            return Result.failure(e)

        with self._lock:
            self._status_message = config.STATUS_SAVE_SUCCESS
            self._draft = Draft()
        logger.info(f"Saved entry for site {draft.site_name!r}")
        return Result.success(self.refresh(user_id))

    def generate_password(self) -> Result:
        """
        Ask the service for a password and put it in the draft. Other draft
        fields are left as they are.
        Returns:
            Result whose value is the generated password.
        """
        with self._lock:
            self._generate_issued += 1
            seq = self._generate_issued
            options = self._options

        try:
            password = self.api.generate_password(options)
        except VaultAPIError as e:
            logger.warning(f"Error generating password: {e}")
            return Result.failure(e)

        with self._lock:
            if seq < self._generate_applied:
                logger.debug(f"Discarding stale generated password #{seq}")
                return Result.success(password, stale=True)
            self._generate_applied = seq
            self._draft = replace(self._draft, password=password)
        return Result.success(password)

    @staticmethod
    def _require_user_id(user_id: str) -> None:
        if not user_id:
            raise ValueError("user_id must be a non-empty string")
