"""Tests for log setup and retention."""

import os
from datetime import datetime, timedelta

from cube_api.core.logging_config import cleanup_old_logs, setup_logging


def test_setup_logging_creates_files(tmp_path):
    generic, errors = setup_logging(tmp_path / "logs")

    assert generic.name == "cube_api.generic"
    assert errors.name == "cube_api.errors"
    assert (tmp_path / "logs").is_dir()


def test_cleanup_old_logs_removes_only_expired_rotations(tmp_path):
    old = (datetime.now() - timedelta(days=40)).strftime("%Y-%m-%d")
    recent = (datetime.now() - timedelta(days=2)).strftime("%Y-%m-%d")
    for name in (f"generic.log.{old}", f"errors.log.{recent}", "generic.log"):
        (tmp_path / name).write_text("x")

    removed = cleanup_old_logs(tmp_path, retention_days=30)

    assert [os.path.basename(p) for p in removed] == [f"generic.log.{old}"]
    assert (tmp_path / f"errors.log.{recent}").exists()
    assert (tmp_path / "generic.log").exists()
