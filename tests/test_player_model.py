import pytest
from pydantic import ValidationError

from pitchside.models import Player, PlayerUpdate, TeamCreate, validate_player


def test_player_is_frozen():
    player = Player(id="p1", name="Rossi", number=1, preferred_position="GK")

    assert player.status == "available"
    assert player.rating is None

    with pytest.raises((TypeError, ValidationError)):
        player.name = "Bianchi"  # type: ignore[misc]


def test_validate_player_accepts_camel_case_and_trims():
    data = validate_player({"name": "  Totti ", "preferredPosition": "ST", "number": 10})
    assert data.name == "Totti"
    assert data.preferred_position == "ST"
    assert data.number == 10


def test_validate_player_defaults_number_to_sentinel():
    assert validate_player({"name": "Pirlo", "preferredPosition": "CM"}).number == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "   ", "preferredPosition": "GK"},
        {"name": "Buffon"},
        {"name": "Buffon", "preferredPosition": ""},
        {"name": "Buffon", "preferredPosition": "GK", "status": "retired"},
        {"name": "Buffon", "preferredPosition": "GK", "age": 0},
    ],
)
def test_validate_player_rejects_bad_input(payload):
    with pytest.raises(ValidationError):
        validate_player(payload)


def test_photo_data_uri_mime_allow_list():
    ok = validate_player({"name": "Nesta", "preferredPosition": "CB", "photoUrl": "data:image/webp;base64,AAAA"})
    assert ok.photo_url.startswith("data:image/webp")

    external = validate_player({"name": "Nesta", "preferredPosition": "CB", "photoUrl": "https://example.org/n.png"})
    assert external.photo_url == "https://example.org/n.png"

    with pytest.raises(ValidationError):
        validate_player({"name": "Nesta", "preferredPosition": "CB", "photoUrl": "data:image/svg+xml;base64,AAAA"})


def test_player_update_rejects_null_required_fields():
    with pytest.raises(ValidationError):
        PlayerUpdate.model_validate({"name": None})
    update = PlayerUpdate.model_validate({"rating": None})
    assert update.model_dump(exclude_unset=True) == {"rating": None}


def test_player_update_rating_range():
    assert PlayerUpdate.model_validate({"rating": 7.5}).rating == 7.5
    with pytest.raises(ValidationError):
        PlayerUpdate.model_validate({"rating": 11})
    with pytest.raises(ValidationError):
        PlayerUpdate.model_validate({"rating": 0})


def test_team_formation_must_be_known():
    assert TeamCreate(name="Juve").formation == "4-4-2"
    with pytest.raises(ValidationError):
        TeamCreate(name="Juve", formation="1-1-8")


def test_player_serializes_camel_case():
    player = Player(id="p1", name="Rossi", number=1, preferred_position="GK", entry_order=5)
    dumped = player.model_dump(by_alias=True)
    assert dumped["preferredPosition"] == "GK"
    assert dumped["entryOrder"] == 5
