import pytest

from debatestats import tabroom
from debatestats.errors import IdNotFound
from debatestats.urls import process_url


def test_feed_url_from_tournament_page() -> None:
    url = process_url("https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=17253")

    assert tabroom.feed_url(url) == "https://www.tabroom.com/api/tourn_published.mhtml?tourn_id=17253"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=17253", 17253),
        ("https://www.tabroom.com/index/tourn/postings/round.mhtml?tourn_id=17253&round_id=622046", 17253),
        ("https://tabroom.com/index/tourn/index.mhtml?tourn_id=16814", 16814),
    ],
)
def test_tournament_id(url: str, expected: int) -> None:
    assert tabroom.tournament_id(process_url(url)) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://tabroom.com",
        "https://www.tabroom.com/index/tourn/index.mhtml?round_id=622046",
        "https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=",
        "https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=abc",
        "https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=-5",
        "https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=99999999999",
    ],
)
def test_tournament_id_not_found(url: str) -> None:
    with pytest.raises(IdNotFound) as excinfo:
        tabroom.tournament_id(process_url(url))

    assert excinfo.value.url == url
