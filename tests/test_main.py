from pathlib import Path
from unittest.mock import patch

import pytest

from coreason_move_agent.main import main


def test_main_serves_app() -> None:
    env = {"COREASON_MOVE_AGENT_PORT": "9123", "COREASON_MOVE_AGENT_HOST": "127.0.0.1"}
    with patch.dict("os.environ", env, clear=True):
        with patch("coreason_move_agent.main.uvicorn.run") as mock_run:
            main()

    app = mock_run.call_args.args[0]
    assert app.title == "CoReason Move Agent"
    assert mock_run.call_args.kwargs == {"host": "127.0.0.1", "port": 9123, "log_level": "info"}


def test_main_applies_log_level_from_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("COREASON_MOVE_AGENT_LOG_LEVEL=WARNING\n")
    monkeypatch.chdir(tmp_path)

    with patch.dict("os.environ", {}, clear=True):
        with patch("coreason_move_agent.main.uvicorn.run") as mock_run:
            with patch("coreason_move_agent.main.set_console_level") as mock_level:
                main()

    mock_level.assert_called_once_with("WARNING")
    assert mock_run.call_args.kwargs["log_level"] == "warning"
