import os
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

# Ensure repository root is on the import path so ``studybot`` package is found
sys.path.append(str(Path(__file__).resolve().parent.parent))

# Provide dummy environment variables required by studybot.config when importing
os.environ.setdefault("BOT_TOKEN", "test")

from studybot.catalogue import Catalogue
from studybot.handlers import HandlerContext
from studybot.utils.telegram import Delivery
from tests.helpers import CATALOGUE_DATA, ORIGIN


@pytest.fixture
def catalogue() -> Catalogue:
    return Catalogue.from_dict(CATALOGUE_DATA)


@pytest.fixture
def fake_bot():
    """Stand-in for :class:`telegram.Bot` recording every outbound call."""
    return SimpleNamespace(
        get_me=AsyncMock(return_value=SimpleNamespace(username="study_bot")),
        answer_callback_query=AsyncMock(),
        send_message=AsyncMock(),
        edit_message_text=AsyncMock(),
        edit_message_reply_markup=AsyncMock(),
        send_photo=AsyncMock(),
        send_media_group=AsyncMock(),
    )


@pytest.fixture
def ctx(fake_bot, catalogue) -> HandlerContext:
    return HandlerContext(delivery=Delivery(fake_bot), catalogue=catalogue, origin=ORIGIN)
