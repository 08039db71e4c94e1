from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from tg_catalog.run_log import RunLogger


def _read_records(path: Path) -> list[dict]:
    return [
        json.loads(ln)
        for ln in path.read_text(encoding="utf-8").splitlines()
        if ln.strip()
    ]


class TestRunLogger(unittest.TestCase):
    def test_writes_jsonl_records(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "logs" / "run.log"
            with RunLogger.open(path, session_id="s1") as log:
                log.info("posts_built", posts=3)
                log.warning("odd_message", post_id=12, reason="empty_text")

            records = _read_records(path)
            self.assertEqual([r["event"] for r in records], ["posts_built", "odd_message"])
            self.assertEqual(records[0]["session_id"], "s1")
            self.assertEqual(records[0]["data"], {"posts": 3})
            self.assertEqual(records[1]["level"], "WARN")
            self.assertEqual(records[1]["post_id"], 12)

    def test_debug_requires_verbose(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            quiet = Path(td) / "quiet.log"
            with RunLogger.open(quiet) as log:
                log.debug("message_skipped", post_id=1)

            loud = Path(td) / "loud.log"
            with RunLogger.open(loud, verbose=True) as log:
                log.debug("message_skipped", post_id=1)

            self.assertEqual(_read_records(quiet), [])
            self.assertEqual(_read_records(loud)[0]["level"], "DEBUG")

    def test_exception_records_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "run.log"
            with RunLogger.open(path) as log:
                try:
                    raise ValueError("boom")
                except ValueError as e:
                    log.exception("command_failed", exc=e)

            record = _read_records(path)[0]
            self.assertEqual(record["level"], "ERROR")
            self.assertEqual(record["data"]["error"]["type"], "ValueError")
            self.assertIn("boom", record["data"]["error"]["traceback"])


if __name__ == "__main__":
    unittest.main()
