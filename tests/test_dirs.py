import os
import tempfile
import unittest
from pathlib import Path

import pytest

from petcli.util import dirs


class TestLoadEnv(unittest.TestCase):
    def setUp(self) -> None:
        self.original = {k: os.environ.get(k) for k in ("PC_DATA_PATH", "PC_TICK_MS")}
        for k in self.original:
            os.environ.pop(k, None)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env_path = Path(self.temp_dir.name) / "config.env"

    def tearDown(self) -> None:
        self.temp_dir.cleanup()
        for k, v in self.original.items():
            if v is not None:
                os.environ[k] = v
            elif k in os.environ:
                del os.environ[k]

    def test_defaults_without_file(self) -> None:
        env = dirs.load_env(self.env_path.as_posix())
        assert env["DATA_PATH"] == dirs.DEFAULT_DATA_PATH
        assert env["TICK_MS"] == str(dirs.DEFAULT_TICK_MS)

    def test_reads_file(self) -> None:
        self.env_path.write_text("# comment\n\nDATA_PATH = /tmp/pets.yaml\nTICK_MS=50\n", encoding="utf-8")
        env = dirs.load_env(self.env_path.as_posix())
        assert env["DATA_PATH"] == "/tmp/pets.yaml"
        assert env["TICK_MS"] == "50"

    def test_os_env_wins_over_file(self) -> None:
        self.env_path.write_text("DATA_PATH=/tmp/file.json\nTICK_MS=50\n", encoding="utf-8")
        os.environ["PC_DATA_PATH"] = "/tmp/env.json"
        os.environ["PC_TICK_MS"] = "75"
        env = dirs.load_env(self.env_path.as_posix())
        assert env["DATA_PATH"] == "/tmp/env.json"
        assert env["TICK_MS"] == "75"

    def test_invalid_tick(self) -> None:
        os.environ["PC_TICK_MS"] = "fast"
        with pytest.raises(ValueError, match="integer"):
            dirs.load_env(self.env_path.as_posix())

    def test_non_positive_tick(self) -> None:
        os.environ["PC_TICK_MS"] = "0"
        with pytest.raises(ValueError, match="positive"):
            dirs.load_env(self.env_path.as_posix())


if __name__ == "__main__":
    unittest.main()
