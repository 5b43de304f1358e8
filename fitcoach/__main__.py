"""Run the FitCoach app with uvicorn."""

import uvicorn

from fitcoach.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("fitcoach.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    main()
