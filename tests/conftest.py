import pytest

from creative_naming.models import Classification
from creative_naming.schemas import get_revision
from creative_naming.services import LockRegistry

from fakes import FakeSheetsClient


@pytest.fixture
def revision():
    return get_revision("marketing", "Creative", "Title")


@pytest.fixture
def sheets():
    return FakeSheetsClient({"Creative": [], "Title": []})


@pytest.fixture
def locks():
    return LockRegistry()


@pytest.fixture
def classification():
    return Classification(
        type="static",
        hypothesis_name="city",
        ai_flag="not AI",
        style="Real",
        main_tone="bright",
        main_object="city",
        header_text="Learn maths in 30 days",
        uvp="через выгоду",
        product="курс математики",
        offer="бесплатный урок",
    )
