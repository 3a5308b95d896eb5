"""Test cases for CLI functionality."""

import json
import os
from unittest import TestCase
from unittest.mock import MagicMock, patch

from src.playlistexport import cli


class TestCLI(TestCase):
    """Test cases for CLI functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_logger = MagicMock()
        patcher = patch("src.playlistexport.cli.logger", self.mock_logger)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_no_command(self):
        """Test that a missing command prints help and fails."""
        with patch("sys.stdout"):
            self.assertEqual(cli.main(["--debug"]), 1)

    def test_invalid_arguments(self):
        with patch("sys.stderr"):
            self.assertEqual(cli.main(["save-playlists", "--format", "xml"]), 1)

    def test_save_playlists_auth_failure(self):
        """Test handling of authentication failure."""
        with patch("src.playlistexport.auth.get_youtube_service", return_value=None):
            result = cli.main(["save-playlists"])

        self.assertEqual(result, 1)
        self.mock_logger.error.assert_called_with(
            "Command failed: %s", "Failed to get YouTube service"
        )

    def test_save_playlists_passes_secrets(self):
        with patch(
            "src.playlistexport.auth.get_youtube_service", return_value=None
        ) as mock_service:
            cli.main(["--secrets", "client_secret.json", "save-playlists"])

        mock_service.assert_called_once_with("client_secret.json")

    def test_save_playlists_to_stdout(self):
        youtube = MagicMock()
        youtube.playlists.return_value.list.return_value.execute.return_value = {
            "items": [{"id": "PL1", "snippet": {"title": "Mine"}}]
        }
        youtube.playlistItems.return_value.list.return_value.execute.return_value = {"items": []}

        with patch("src.playlistexport.auth.get_youtube_service", return_value=youtube):
            with patch("sys.stdout") as mock_stdout:
                result = cli.main(["save-playlists", "--no-progress"])

        self.assertEqual(result, 0)
        written = "".join(c.args[0] for c in mock_stdout.write.call_args_list)
        data = json.loads(written)
        self.assertEqual(data[0]["title"], "Mine")
        self.assertEqual(data[0]["items"], [])
        self.mock_logger.info.assert_called_with("Wrote %d items", 1)

    def test_save_playlists_fetch_failure(self):
        youtube = MagicMock()
        youtube.playlists.return_value.list.return_value.execute.side_effect = Exception(
            "unauthorized"
        )

        with patch("src.playlistexport.auth.get_youtube_service", return_value=youtube):
            result = cli.main(["save-playlists", "--no-progress"])

        self.assertEqual(result, 1)
        args = self.mock_logger.error.call_args.args
        self.assertEqual(args[0], "Command failed: %s")
        self.assertIn("Error fetching playlists", args[1])

    def test_save_watch_later_missing_input(self):
        result = cli.main(["save-watch-later-html", "does-not-exist.html"])

        self.assertEqual(result, 1)
        args = self.mock_logger.error.call_args.args
        self.assertIn("does-not-exist.html", args[1])


def test_resolve_output():
    assert cli.resolve_output(None, False, "youtube-output", "json") is None
    assert cli.resolve_output(None, True, "youtube-output", "json") == "youtube-output.json"
    assert cli.resolve_output(None, True, "youtube-output-wl", "text") == "youtube-output-wl.txt"
    assert cli.resolve_output("mine.json", False, "youtube-output", "json") == "mine.json"


def test_save_watch_later_default_output(tmp_path, monkeypatch, watch_later_html):
    """``--default-output`` writes to the default filename."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "wl.html").write_text(watch_later_html, encoding="utf-8")

    result = cli.main(["save-watch-later-html", "wl.html", "--default-output"])

    assert result == 0
    data = json.loads((tmp_path / "youtube-output-wl.json").read_text(encoding="utf-8"))
    assert [item["id"] for item in data] == ["AAA111", "BBB222", "CCC333"]


def test_save_watch_later_text_output(tmp_path, watch_later_html):
    html_path = tmp_path / "wl.html"
    html_path.write_text(watch_later_html, encoding="utf-8")
    out_path = tmp_path / "wl.txt"

    result = cli.main(
        ["save-watch-later-html", str(html_path), "-o", str(out_path), "--format", "text"]
    )

    assert result == 0
    assert out_path.read_text(encoding="utf-8").splitlines() == [
        "First - Chan A - /watch?v=AAA111&list=WL&index=1",
        "Second - Chan C - /watch?v=BBB222&list=WL&index=3",
        "Third - Chan E - /watch?v=CCC333&list=WL&index=5",
    ]


def test_save_watch_later_to_stdout(tmp_path, capsys, watch_later_html):
    html_path = tmp_path / "wl.html"
    html_path.write_text(watch_later_html, encoding="utf-8")

    result = cli.main(["save-watch-later-html", str(html_path)])

    assert result == 0
    out = capsys.readouterr().out
    assert len(json.loads(out)) == 3
    assert not os.path.exists(tmp_path / "youtube-output-wl.json")


def test_save_watch_later_output_before_input(tmp_path, watch_later_html):
    """The output option may precede the input path."""
    html_path = tmp_path / "wl.html"
    html_path.write_text(watch_later_html, encoding="utf-8")
    out_path = tmp_path / "out.json"

    result = cli.main(["save-watch-later-html", "-o", str(out_path), str(html_path)])

    assert result == 0
    assert len(json.loads(out_path.read_text(encoding="utf-8"))) == 3


def test_output_options_are_exclusive(capsys):
    result = cli.main(["save-watch-later-html", "wl.html", "-o", "a.json", "--default-output"])

    assert result == 1
    assert "not allowed with argument" in capsys.readouterr().err


def test_save_playlists_unencodable_title(tmp_path):
    """An output write failure is reported, not raised."""
    youtube = MagicMock()
    youtube.playlists.return_value.list.return_value.execute.return_value = {
        "items": [{"id": "PL1", "snippet": {"title": "bad \ud800"}}]
    }
    youtube.playlistItems.return_value.list.return_value.execute.return_value = {"items": []}
    out_path = tmp_path / "out.txt"

    with patch("src.playlistexport.auth.get_youtube_service", return_value=youtube):
        with patch("src.playlistexport.cli.logger") as mock_logger:
            result = cli.main(
                ["save-playlists", "--no-progress", "--format", "text", "-o", str(out_path)]
            )

    assert result == 1
    assert mock_logger.error.call_args.args[0] == "Command failed: %s"
    assert os.listdir(tmp_path) == []
