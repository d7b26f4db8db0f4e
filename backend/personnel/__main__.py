"""Run the API under uvicorn: python -m personnel (binds HOST/PORT from settings)."""

import uvicorn

from personnel.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("personnel.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
