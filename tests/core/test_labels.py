"""Unit tests for labels and result text."""

import pytest

from bodyfuel.core.labels import (
    LABELS,
    describe_options,
    error_message,
    format_result,
    is_supported_language,
    option_label,
)
from bodyfuel.core.models import ActivityLevel, Goal, MacroResult, Sex


RESULT = MacroResult(calories=2798, protein_grams=160, fat_grams=80, carb_grams=360)


class TestLabels:
    """Tests for the static label tables."""

    def test_languages_have_same_keys(self):
        """Every language defines the same labels."""
        assert set(LABELS["en"]) == set(LABELS["ar"])

    def test_option_label_english(self):
        """English option labels."""
        assert option_label(Goal.CUT) == "Cut"
        assert option_label(Sex.FEMALE) == "Female"

    def test_option_label_arabic(self):
        """Arabic option labels."""
        assert option_label(ActivityLevel.MEDIUM, "ar") == "متوسط"
        assert option_label(Goal.BULK, "ar") == "تضخيم"

    def test_unknown_language(self):
        """Unknown language raises KeyError."""
        with pytest.raises(KeyError):
            option_label(Goal.CUT, "fr")


class TestDescribeOptions:
    """Tests for describe_options."""

    def test_choices_and_defaults(self):
        """Every choice field lists its values and default."""
        options = describe_options()

        assert [c["value"] for c in options["sex"]["choices"]] == ["male", "female"]
        assert options["sex"]["default"] == "male"
        assert options["activity"]["default"] == "medium"
        assert options["goal"]["default"] == "maintain"

    def test_attached_data(self):
        """Activity factors and goal adjustments are included."""
        options = describe_options()

        assert [c["factor"] for c in options["activity"]["choices"]] == [1.2, 1.55, 1.75]
        assert [c["kcal_adjust"] for c in options["goal"]["choices"]] == [-400, 0, 300]

    def test_ranges(self):
        """Numeric ranges match the validation bounds."""
        options = describe_options()

        assert (options["age"]["min"], options["age"]["max"]) == (10, 80)
        assert (options["height_cm"]["min"], options["height_cm"]["max"]) == (120.0, 230.0)
        assert (options["weight_kg"]["min"], options["weight_kg"]["max"]) == (30.0, 200.0)

    def test_arabic(self):
        """Arabic labels are used when requested."""
        options = describe_options("ar")
        assert options["lang"] == "ar"
        assert options["goal"]["label"] == "الهدف"


class TestFormatResult:
    """Tests for format_result."""

    def test_english(self):
        """English card lists every target."""
        text = format_result(RESULT)

        assert "Calories: 2798 kcal" in text
        assert "Protein: 160 g" in text
        assert "Fat: 80 g" in text
        assert "Carbs: 360 g" in text
        assert text.startswith("Daily targets")

    def test_includes_note(self):
        """Method note is the last line."""
        text = format_result(RESULT)
        assert text.splitlines()[-1] == LABELS["en"]["note"]

    def test_arabic(self):
        """Arabic card uses Arabic labels."""
        text = format_result(RESULT, "ar")
        assert "السعرات: 2798 kcal" in text


class TestErrorMessage:
    """Tests for error_message and is_supported_language."""

    def test_english(self):
        """English text for a known code."""
        assert error_message("out_of_range", "fallback") == LABELS["en"]["out_of_range"]

    def test_arabic(self):
        """Arabic text for a known code."""
        assert error_message("invalid_number", "fallback", "ar") == "رجاءً أدخل أرقام صحيحة في العمر/الطول/الوزن."

    def test_unlabelled_code_uses_default(self):
        """Codes without a label fall back to the given text."""
        assert error_message("unknown_choice", "Unknown goal 'shred'.", "ar") == "Unknown goal 'shred'."

    @pytest.mark.parametrize("lang", ["fr", "", None, ["ar"], 5])
    def test_unsupported_languages(self, lang):
        """Only string names of label tables are supported."""
        assert is_supported_language(lang) is False

    def test_supported_languages(self):
        """Both label tables are supported."""
        assert is_supported_language("en") and is_supported_language("ar")
