import pytest

from pokesearch.pokedex import Pokedex, PokedexConfig

from conftest import BASE, FakeResponse, list_payload, pokemon_payload


FIRST = f"{BASE}/pokemon?offset=0&limit=3"
SECOND = f"{BASE}/pokemon?offset=3&limit=3"
INDEX = f"{BASE}/pokemon?offset=0&limit=1000"


@pytest.fixture
def pokedex(make_client):
    client = make_client(
        {
            FIRST: FakeResponse(200, list_payload(["bulbasaur", "ivysaur", "venusaur"], next=SECOND, count=5)),
            SECOND: FakeResponse(200, list_payload(["charmander", "charmeleon"], offset=3, previous=FIRST, count=5)),
            INDEX: FakeResponse(200, list_payload(["bulbasaur", "ivysaur", "pikachu", "raichu"])),
            f"{BASE}/pokemon/2": FakeResponse(200, pokemon_payload(2, "ivysaur", "grass", "poison")),
            f"{BASE}/pokemon/pikachu": FakeResponse(200, pokemon_payload(25, "pikachu", "electric")),
        }
    )
    return Pokedex(PokedexConfig(page_size=3, verbose=False, api=client.config), client)


def test_config_rejects_bad_page_size():
    with pytest.raises(ValueError):
        PokedexConfig(page_size=0)


def test_start_loads_first_page(pokedex):
    pokedex.start()
    assert [entry.name for entry in pokedex.state.entries] == ["bulbasaur", "ivysaur", "venusaur"]
    assert pokedex.state.previous_url is None
    assert pokedex.state.next_url == SECOND


def test_next_and_previous_follow_cursors(pokedex):
    pokedex.start()
    assert not pokedex.previous_page()
    assert pokedex.next_page()
    assert [entry.id for entry in pokedex.state.entries] == [4, 5]
    assert not pokedex.next_page()
    assert pokedex.previous_page()
    assert pokedex.state.entries[0].name == "bulbasaur"


def test_select_shows_slot(pokedex):
    pokedex.start()
    pokemon = pokedex.select(1)
    assert pokemon.name == "ivysaur"
    assert pokedex.state.current is pokemon


def test_select_rejects_empty_slot(pokedex):
    pokedex.start()
    pokedex.next_page()
    with pytest.raises(ValueError):
        pokedex.select(2)


def test_search_exact_name(pokedex):
    outcome = pokedex.search("  Pikachu ")
    assert outcome.found
    assert outcome.suggestion is None
    assert pokedex.state.current.id == 25
    assert INDEX not in pokedex.client.session.calls


def test_search_suggests_closest_name_and_accepts(pokedex):
    asked = []

    def confirm(name):
        asked.append(name)
        return True

    outcome = pokedex.search("pikachuu", confirm)
    assert asked == ["pikachu"]
    assert outcome.accepted
    assert outcome.pokemon.name == "pikachu"
    assert pokedex.state.message == ""


def test_search_suggestion_declined(pokedex):
    outcome = pokedex.search("pikachuu", lambda _name: False)
    assert not outcome.found
    assert outcome.suggestion == "pikachu"
    assert not outcome.accepted
    assert pokedex.state.message == "Pokemon not found. Did you mean pikachu?"
    assert pokedex.state.current is None


def test_search_without_confirm_only_suggests(pokedex):
    outcome = pokedex.search("raichoo")
    assert outcome.suggestion == "raichu"
    assert not outcome.accepted


def test_search_with_empty_index(make_client):
    client = make_client({INDEX: FakeResponse(200, list_payload([]))})
    pokedex = Pokedex(PokedexConfig(verbose=False, api=client.config), client)
    outcome = pokedex.search("missingno", lambda _name: True)
    assert outcome.suggestion is None
    assert pokedex.state.message == "Pokemon not found."


def test_search_rejects_blank_term(pokedex):
    with pytest.raises(ValueError):
        pokedex.search("   ")


def test_render_reflects_state(pokedex):
    pokedex.start()
    pokedex.select(1)
    screen = pokedex.render()
    assert "Ivysaur #002" in screen
    assert "Type: Grass / Poison" in screen
    assert " 3 | 3. Venusaur" in screen
    assert "[n] next" in screen
    assert "[p] previous" not in screen
