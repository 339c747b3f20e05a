"""Run the account service.

  python -m account_service
"""
import uvicorn

from account_service.config import settings


def main() -> None:
    uvicorn.run("account_service.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
