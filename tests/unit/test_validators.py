"""Unit tests for query parameter validators."""
import pytest
from app.utils.validators import IdeaValidator
from app.core.exceptions import ValidationError

class TestIdeaValidator:
    """Test idea and region validation."""

    def test_valid_idea_is_trimmed(self):
        assert IdeaValidator.validate_idea("  budget travel  ") == "budget travel"

    @pytest.mark.parametrize("idea", [None, "", "   "])
    def test_blank_idea_rejected(self, idea):
        with pytest.raises(ValidationError) as exc_info:
            IdeaValidator.validate_idea(idea)

        assert exc_info.value.message == 'Missing "idea" parameter'

    def test_field_name_in_message(self):
        with pytest.raises(ValidationError) as exc_info:
            IdeaValidator.validate_idea(None, field="seed")

        assert exc_info.value.details == {"field": "seed"}

    def test_long_idea_accepted(self):
        idea = "budget travel " * 30

        assert IdeaValidator.validate_idea(idea) == idea.strip()

    def test_region_defaults(self):
        assert IdeaValidator.validate_region(None) == "US"
        assert IdeaValidator.validate_region("") == "US"

    def test_region_upper_cased(self):
        assert IdeaValidator.validate_region("gb") == "GB"
        assert IdeaValidator.validate_region(" de ") == "DE"

    @pytest.mark.parametrize("region,expected", [("usa", "USA"), ("1a", "1A"), ("u", "U")])
    def test_unknown_region_passed_through(self, region, expected):
        assert IdeaValidator.validate_region(region) == expected

    def test_parse_topics(self):
        assert IdeaValidator.parse_topics("bread, cake,, ,pie") == ["bread", "cake", "pie"]
        assert IdeaValidator.parse_topics(None) == []
