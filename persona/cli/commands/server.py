"""Run the API server in the foreground."""

import cyclopts
import logfire
import uvicorn

from persona.application.api.rest.app import create_app
from persona.config import Config

app = cyclopts.App(name="server", help="Server commands")


@app.command
def start(
    host: str = "127.0.0.1",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Start the catalog API.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    config = Config()
    logfire.configure(
        service_name="persona",
        service_version=config.server.version,
        send_to_logfire="if-token-present",
        console=False,
    )
    if reload:
        uvicorn.run(
            "persona.application.api.rest.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
        )
    else:
        uvicorn.run(create_app(config), host=host, port=port)
