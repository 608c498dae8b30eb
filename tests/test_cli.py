import io
import logging
import unittest
from contextlib import redirect_stderr
from unittest.mock import patch

from gdocbackup import cli
from gdocbackup.errors import RemoteListError


class TestCli(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger("gdocbackup").handlers.clear()

    def test_destination_is_required(self) -> None:
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.build_parser().parse_args([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_parses_flags(self) -> None:
        args = cli.build_parser().parse_args(["-d", "/backups", "-v"])
        self.assertEqual(args.destination, "/backups")
        self.assertTrue(args.verbose)

    def test_extra_arguments_are_rejected(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            code = cli.main(["-d", "/backups", "stray"])
        self.assertEqual(code, 1)
        self.assertIn("--destination", err.getvalue())

    def test_successful_backup_exits_zero(self) -> None:
        with patch.object(cli, "GoogleDriveController") as controller_cls, \
                patch.object(cli, "backup") as backup:
            code = cli.main(["--destination", "/backups"])

        self.assertEqual(code, 0)
        backup.assert_called_once_with("/backups", controller_cls.return_value)

    def test_backup_error_is_reported_on_stderr(self) -> None:
        err = io.StringIO()
        with patch.object(cli, "GoogleDriveController"), \
                patch.object(cli, "backup", side_effect=RemoteListError("listing failed")), \
                redirect_stderr(err):
            code = cli.main(["-d", "/backups"])

        self.assertEqual(code, 1)
        self.assertIn("listing failed", err.getvalue())

    def test_setup_logging_levels(self) -> None:
        self.assertEqual(cli.setup_logging(verbose=True).level, logging.DEBUG)
        self.assertEqual(cli.setup_logging(verbose=False).level, logging.INFO)
        self.assertEqual(len(logging.getLogger("gdocbackup").handlers), 1)


if __name__ == "__main__":
    unittest.main()
