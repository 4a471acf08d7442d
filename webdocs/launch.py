import os
import subprocess
import sys
from pathlib import Path

from webdocs.config import ViewerConfig


def streamlit_command(*, host: str, port: int, open_browser: bool) -> list[str]:
    app_path = Path(__file__).resolve().parent / "web" / "app.py"
    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(app_path),
        "--server.address",
        str(host),
        "--server.port",
        str(port),
        "--server.headless",
        "false" if open_browser else "true",
    ]


def launch_web(
    *,
    config: ViewerConfig | None = None,
    host: str = "127.0.0.1",
    port: int = 8501,
    open_browser: bool = True,
    wait: bool = True,
) -> int | subprocess.Popen[str]:
    config = config or ViewerConfig.from_env()
    env = os.environ.copy()
    env.update(config.to_env())

    cmd = streamlit_command(host=host, port=port, open_browser=open_browser)

    if wait:
        completed = subprocess.run(cmd, env=env, check=False)
        return int(completed.returncode)

    return subprocess.Popen(cmd, env=env, text=True)
