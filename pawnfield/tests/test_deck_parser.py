"""
Tests for the text deck format.
"""

import pytest

from ..decks import DECKS, example_big_deck, get_deck, load_deck, parse_card, parse_deck, parse_footprint
from ..engine_core.card import Cost, InfluenceType
from ..engine_core.errors import InvalidConfigurationError


VALID_DECK = """
# a comment line
Spark, 1, 1, X I X / I C I / X I X

Bolt,  2, 3, I X I / X C X / I X I
"""


class TestParseFootprint:
    """Tests for footprint strings."""

    def test_parses_grid(self):
        footprint = parse_footprint("X I X / I C I / X I X")
        assert footprint[1] == (InfluenceType.INFLUENCE, InfluenceType.CENTER, InfluenceType.INFLUENCE)
        assert footprint[0][0] is InfluenceType.NONE

    def test_lowercase_tokens(self):
        assert parse_footprint("c") == ((InfluenceType.CENTER,),)

    def test_unknown_token(self):
        with pytest.raises(InvalidConfigurationError, match="unknown footprint token"):
            parse_footprint("X Q X / I C I / X I X")

    def test_ragged_rows(self):
        with pytest.raises(InvalidConfigurationError, match="square"):
            parse_footprint("X I / I C I / X I X")

    def test_no_center(self):
        with pytest.raises(InvalidConfigurationError, match="found 0"):
            parse_footprint("X I X / I I I / X I X")


class TestParseCard:
    """Tests for single card records."""

    def test_parses_card(self):
        card = parse_card("Spark, 2, 4, X I X / I C I / X I X")
        assert card.name == "Spark"
        assert card.cost is Cost.TWO
        assert card.points == 4
        assert card.size == 3

    @pytest.mark.parametrize("line,message", [
        ("Spark, 1, 1", "expected 4 fields"),
        (", 1, 1, C", "name is empty"),
        ("Spark, one, 1, C", "must be integers"),
        ("Spark, 4, 1, C", "cost must be 1-3"),
        ("Spark, 1, 0, C", "points must be >= 1"),
    ])
    def test_bad_records(self, line, message):
        with pytest.raises(InvalidConfigurationError, match=message):
            parse_card(line)


class TestParseDeck:
    """Tests for whole deck texts."""

    def test_skips_comments_and_blanks(self):
        deck = parse_deck(VALID_DECK)
        assert [card.name for card in deck] == ["Spark", "Bolt"]

    def test_errors_carry_line_numbers(self):
        text = "Spark, 1, 1, C\nBolt, 9, 1, C\nBroken\n"
        with pytest.raises(InvalidConfigurationError) as exc:
            parse_deck(text, label="mine.deck")
        assert exc.value.errors == [
            "mine.deck line 2: cost must be 1-3, got 9",
            "mine.deck line 3: expected 4 fields (name, cost, points, footprint), got 1",
        ]

    def test_duplicate_names(self):
        with pytest.raises(InvalidConfigurationError, match="duplicate card name 'Spark'"):
            parse_deck("Spark, 1, 1, C\nSpark, 2, 2, C\n")

    def test_mixed_sizes(self):
        with pytest.raises(InvalidConfigurationError, match="mixed footprint sizes"):
            parse_deck("Spark, 1, 1, C\nBolt, 1, 1, X I X / I C I / X I X\n")

    def test_empty_text(self):
        assert parse_deck("# nothing here\n") == []

    def test_load_deck(self, tmp_path):
        path = tmp_path / "duel.deck"
        path.write_text(VALID_DECK, encoding="utf-8")
        assert [card.name for card in load_deck(path)] == ["Spark", "Bolt"]

    def test_load_deck_labels_errors_with_file_name(self, tmp_path):
        path = tmp_path / "broken.deck"
        path.write_text("Spark, 1, 1\n", encoding="utf-8")
        with pytest.raises(InvalidConfigurationError, match="broken.deck line 1"):
            load_deck(path)


class TestBuiltinDecks:
    """Tests for the bundled decks."""

    def test_example_big_deck(self):
        deck = example_big_deck()
        assert [card.name for card in deck] == ["Sentinel", "Lancer", "Warden", "Outrider", "Colossus"]
        assert {card.size for card in deck} == {5}
        assert [int(card.cost) for card in deck] == [1, 1, 1, 2, 3]
        assert [card.points for card in deck] == [1, 2, 1, 3, 5]

    def test_fresh_list_each_call(self):
        first = example_big_deck()
        first.pop()
        assert len(example_big_deck()) == 5

    def test_get_deck(self):
        assert "example_big_deck" in DECKS
        assert get_deck("example_big_deck") == example_big_deck()

    def test_unknown_deck(self):
        with pytest.raises(ValueError, match="Unknown deck"):
            get_deck("nope")
