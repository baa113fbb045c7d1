"""Run the local API server."""
import uvicorn

from worklog.config import settings


def main() -> None:
    uvicorn.run("worklog.main:app", host=settings.api_host, port=settings.api_port, reload=settings.debug)


if __name__ == "__main__":
    main()
