"""Backend entrypoint. Starts uvicorn with host and port from settings."""
import uvicorn

from session_ledger.config.settings import get_settings
from session_ledger.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
