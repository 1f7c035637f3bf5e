import pytest

from finparse.categorization import (
    CATEGORY_MAP,
    TransactionType,
    map_category,
    transaction_type_for,
)


@pytest.mark.parametrize(
    "label,expected",
    [
        ("переводы", "Transfer"),
        ("покупки", "Shopping"),
        ("транспорт", "Transport"),
        ("супермаркеты", "Groceries"),
        ("рестораны и кафе", "Food"),
        ("подписки", "Subscriptions"),
        ("маркетплейсы", "Shopping"),
        ("другое", "Other"),
    ],
)
def test_map_category_table(label: str, expected: str) -> None:
    assert map_category(label) == expected


def test_table_has_eight_entries() -> None:
    assert len(CATEGORY_MAP) == 8


def test_map_category_is_case_insensitive() -> None:
    assert map_category("ПОКУПКИ") == "Shopping"
    assert map_category("Рестораны и кафе") == "Food"


def test_map_category_unknown_label() -> None:
    assert map_category("неизвестно") == "Other"


def test_map_category_missing_label() -> None:
    assert map_category(None) == "Other"


def test_map_category_english_label_is_not_mapped() -> None:
    assert map_category("shopping") == "Other"


@pytest.mark.parametrize(
    "category,expected",
    [
        ("Subscriptions", TransactionType.SUBSCRIPTIONS),
        ("Shopping", TransactionType.SHOPPING),
        ("Groceries", TransactionType.SHOPPING),
        ("Food", TransactionType.FOOD),
        ("entertainment", TransactionType.ENTERTAINMENT),
        ("Utilities", TransactionType.UTILITIES),
        ("Bills", TransactionType.UTILITIES),
        ("Transfer", TransactionType.TRANSFER),
        ("Transport", TransactionType.OTHER),
        ("Other", TransactionType.OTHER),
    ],
)
def test_transaction_type_for(category: str, expected: TransactionType) -> None:
    assert transaction_type_for(category) == expected
