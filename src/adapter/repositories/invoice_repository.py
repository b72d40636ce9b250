"""JSON File Invoice Repository Implementation

Keeps invoices in memory and mirrors the whole collection to a single JSON
file on every append.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.exceptions import InvoiceNotFoundError, PersistenceError
from src.domain.invoice import Invoice

logger = logging.getLogger(__name__)

_invoice_list = TypeAdapter(List[Invoice])


class JsonFileInvoiceRepository(InvoiceRepository):
    """
    JSON file implementation of InvoiceRepository

    Persistence policy:
    - Missing file on load: start empty
    - Corrupt file on load: log and start empty
    - Failed write on append: log; the in-memory collection stays authoritative
    Appends are serialized through an asyncio.Lock so concurrent requests
    cannot interleave their append/save cycles.
    """

    def __init__(self, storage_path: Union[str, Path]):
        self.storage_path = Path(storage_path)
        self._invoices: List[Invoice] = []
        self._lock = asyncio.Lock()

    async def load(self) -> None:
        async with self._lock:
            try:
                self._invoices = self._read()
            except PersistenceError as e:
                logger.exception(f"Error loading invoices from {self.storage_path}: {e}")
                self._invoices = []
                return

        logger.info(f"Loaded {len(self._invoices)} invoices from {self.storage_path}")

    async def append(self, invoice: Invoice) -> None:
        async with self._lock:
            self._invoices.append(invoice)
            try:
                self._write(self._invoices)
            except PersistenceError as e:
                logger.error(f"Error saving invoices to {self.storage_path}: {e}")

    async def find_all(self) -> List[Invoice]:
        return list(self._invoices)

    async def find_by_id(self, invoice_id: str) -> Invoice:
        for invoice in self._invoices:
            if invoice.id == invoice_id:
                return invoice
        raise InvoiceNotFoundError(invoice_id)

    def _read(self) -> List[Invoice]:
        """Read stored invoices verbatim; derived fields are never recomputed."""
        if not self.storage_path.exists():
            return []

        try:
            raw = json.loads(self.storage_path.read_text(encoding="utf-8"))
            return _invoice_list.validate_python(raw)
        except (OSError, ValueError, ValidationError) as e:
            raise PersistenceError(f"Unreadable invoice store: {e}") from e

    def _write(self, invoices: List[Invoice]) -> None:
        """Rewrite the whole store through a temp file so a failed write keeps the old file."""
        payload = json.dumps(
            [invoice.model_dump(mode="json") for invoice in invoices],
            indent=2,
        )
        tmp_path = self.storage_path.with_name(self.storage_path.name + ".tmp")

        try:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.storage_path)
        except OSError as e:
            raise PersistenceError(f"Failed to write invoice store: {e}") from e
