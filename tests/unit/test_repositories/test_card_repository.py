"""Unit tests for CardRepository."""

from uuid import uuid4

import pytest

from finparse.db.store import JSONFileStore
from finparse.repositories.card import CARDS_KEY, SELECTED_CARD_KEY, CardRepository
from finparse.schemas.card import Card, CardColor


@pytest.fixture
def store(tmp_path) -> JSONFileStore:
    return JSONFileStore(tmp_path / "store.json")


@pytest.fixture
def repo(store) -> CardRepository:
    return CardRepository(store)


class TestDefaults:
    def test_fresh_store_gets_default_card(self, repo, store):
        (card,) = repo.get_all()

        assert card.name == "Card"
        assert card.currency == "KZT"
        assert card.balance == 0
        assert card.color == CardColor.BLUE
        assert repo.selected_card == card
        assert store.get(SELECTED_CARD_KEY) == str(card.id)

    def test_existing_cards_not_reseeded(self, repo, store):
        repo.add(Card(name="Kaspi Gold"))

        reloaded = CardRepository(store)

        assert [c.name for c in reloaded.get_all()] == ["Card", "Kaspi Gold"]
        assert len(store.get(CARDS_KEY)) == 2


class TestSelection:
    def test_add_keeps_existing_selection(self, repo):
        first = repo.selected_card
        repo.add(Card(name="Halyk"))

        assert repo.selected_card == first

    def test_add_selects_when_nothing_selected(self, repo):
        repo.delete(repo.selected_card.id)
        assert repo.selected_card is None

        added = repo.add(Card(name="Halyk"))

        assert repo.selected_card_id == added.id

    def test_select_persists(self, repo, store):
        halyk = repo.add(Card(name="Halyk"))

        repo.select(halyk.id)

        assert CardRepository(store).selected_card == halyk

    def test_select_unknown(self, repo):
        with pytest.raises(KeyError):
            repo.select(uuid4())

    def test_deleting_selected_moves_selection_to_first(self, repo):
        default = repo.selected_card
        halyk = repo.add(Card(name="Halyk"))
        repo.select(halyk.id)

        assert repo.delete(halyk.id) is True

        assert repo.selected_card_id == default.id

    def test_deleting_other_card_keeps_selection(self, repo):
        default = repo.selected_card
        halyk = repo.add(Card(name="Halyk"))

        repo.delete(halyk.id)

        assert repo.selected_card_id == default.id

    def test_stale_selection_falls_back_to_first(self, repo, store):
        store.set(SELECTED_CARD_KEY, str(uuid4()))

        reloaded = CardRepository(store)

        assert reloaded.selected_card == reloaded.get_all()[0]


class TestEditing:
    def test_update(self, repo, store):
        card = repo.selected_card

        repo.update(card.id, {"name": "Main", "color": "teal"})

        stored = CardRepository(store).get_by_id(card.id)
        assert stored.name == "Main"
        assert stored.color == CardColor.TEAL

    def test_update_balance(self, repo):
        card = repo.selected_card

        repo.update_balance(card.id, 10000, is_expense=False)
        updated = repo.update_balance(card.id, 2500, is_expense=True)

        assert updated.balance == 7500

    def test_update_balance_unknown_card(self, repo):
        assert repo.update_balance(uuid4(), 100, is_expense=True) is None

    def test_move(self, repo, store):
        repo.add(Card(name="B"))
        repo.add(Card(name="C"))

        repo.move([0], 3)

        assert [c.name for c in CardRepository(store).get_all()] == ["B", "C", "Card"]

    def test_move_out_of_range(self, repo):
        with pytest.raises(IndexError):
            repo.move([5], 0)


class TestCardFormatting:
    @pytest.mark.parametrize(
        "currency,symbol",
        [("KZT", "₸"), ("USD", "$"), ("EUR", "€"), ("RUB", "₽"), ("GBP", "GBP")],
    )
    def test_currency_symbol(self, currency, symbol):
        assert Card(name="x", currency=currency).currency_symbol == symbol

    def test_formatted_balance(self):
        assert Card(name="x", balance=1234567.5).formatted_balance == "1 234 567.50 ₸"

    def test_formatted_negative_balance(self):
        assert Card(name="x", balance=-950, currency="USD").formatted_balance == "-950.00 $"
