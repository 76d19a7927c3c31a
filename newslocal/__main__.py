"""Run the API server: python -m newslocal"""

import uvicorn

from .config import config


def main():
    uvicorn.run(
        "newslocal.server:app",
        host="0.0.0.0",
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
