"""Tests for word and number counting."""

from ieltsmark.engine.word_count import WordCount, count_words, validate_word_limit


class TestCountWords:
    def test_hyphenated_and_ordinal(self):
        assert count_words("mother-in-law and 15th of May") == WordCount(words=5, numbers=1)

    def test_symbols_not_counted(self):
        assert count_words("$50 and 20%") == WordCount(words=1, numbers=2)

    def test_dates_and_times_are_numbers(self):
        assert count_words("9.30am 15.05.2025 10/12") == WordCount(words=0, numbers=3)

    def test_empty(self):
        assert count_words("") == WordCount(words=0, numbers=0)
        assert count_words("   ") == WordCount(words=0, numbers=0)


class TestWordLimit:
    def test_over_word_limit(self):
        result = validate_word_limit("the old hospital", 2)
        assert not result.valid
        assert result.word_count == 3
        assert result.number_count == 0

    def test_numbers_do_not_use_word_budget(self):
        result = validate_word_limit("1,000 people", 1)
        assert result.valid
        assert (result.word_count, result.number_count) == (1, 1)

    def test_number_limit(self):
        assert validate_word_limit("15th May", 2, 1).valid
        assert not validate_word_limit("3 or 4 hospitals", 2, 1).valid

    def test_no_number_limit_by_default(self):
        assert validate_word_limit("10 20 30", 0).valid
