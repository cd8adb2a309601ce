import uvicorn

from weathermood import config
from weathermood.api.fastapi_app import app

__all__ = ["app"]


def main() -> None:
    uvicorn.run(
        "weathermood.api.fastapi_app:app",
        host=config.HOST,
        port=config.PORT,
    )


if __name__ == "__main__":
    main()
