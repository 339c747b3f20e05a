from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from account_service.main import app, lifespan


@pytest.mark.asyncio
async def test_startup_survives_unavailable_database():
    with patch("account_service.main.create_tables", side_effect=SQLAlchemyError("down")), \
            patch("account_service.main.logger") as mock_logger:
        async with lifespan(app):
            started = True

    assert started
    mock_logger.exception.assert_called_once()
    mock_logger.info.assert_not_called()


@pytest.mark.asyncio
async def test_startup_creates_tables():
    with patch("account_service.main.create_tables") as mock_create, \
            patch("account_service.main.logger") as mock_logger:
        async with lifespan(app):
            pass

    mock_create.assert_awaited_once()
    mock_logger.exception.assert_not_called()
