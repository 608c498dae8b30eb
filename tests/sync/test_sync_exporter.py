import tempfile
import unittest
from pathlib import Path

from gdocbackup.errors import ExportError, NetworkError
from gdocbackup.models import RemoteDocument
from gdocbackup.sync.exporter import DocumentExporter

SHEET_MIME = "application/vnd.google-apps.spreadsheet"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class FakeExportStore:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list = []

    def export(self, file_id: str, mime_type: str) -> bytes:
        self.calls.append((file_id, mime_type))
        if self.fail:
            raise NetworkError("timed out")
        return b"sheet-bytes"


def _sheet(mime_type: str = SHEET_MIME) -> RemoteDocument:
    return RemoteDocument(id="S1", name="Budget", version=1, owner="me", mime_type=mime_type)


class TestDocumentExporter(unittest.TestCase):
    def test_writes_exported_bytes_under_destination(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = FakeExportStore()
            exporter = DocumentExporter(store, tmp)

            rel = exporter.export(_sheet(), "Drive/Finance/Budget.xlsx")

            self.assertEqual(rel, "Drive/Finance/Budget.xlsx")
            self.assertEqual(store.calls, [("S1", XLSX_MIME)])
            written = Path(tmp, "Drive", "Finance", "Budget.xlsx")
            self.assertEqual(written.read_bytes(), b"sheet-bytes")

    def test_overwrites_existing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp, "Budget.xlsx")
            target.write_bytes(b"old")

            DocumentExporter(FakeExportStore(), tmp).export(_sheet(), "Budget.xlsx")

            self.assertEqual(target.read_bytes(), b"sheet-bytes")

    def test_remote_failure_is_export_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            exporter = DocumentExporter(FakeExportStore(fail=True), tmp)
            with self.assertRaises(ExportError) as ctx:
                exporter.export(_sheet(), "Drive/Budget.xlsx")
            self.assertIsInstance(ctx.exception.cause, NetworkError)
            self.assertFalse(Path(tmp, "Drive", "Budget.xlsx").exists())

    def test_unmapped_mime_type_is_export_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = FakeExportStore()
            with self.assertRaises(ExportError):
                DocumentExporter(store, tmp).export(_sheet("application/pdf"), "x.pdf")
            self.assertEqual(store.calls, [])


if __name__ == "__main__":
    unittest.main()
