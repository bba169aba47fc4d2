import pytest
from pydantic import ValidationError

from text_overlap import cfg, compare
from text_overlap.core.comparison import TextComparison
from text_overlap.data.report import SimilarityReport


class TestTextComparison:
    """Unit tests for TextComparison and compare."""

    @pytest.fixture
    def template(self):
        """Starter code handed out with an assignment."""
        return "public class Main {\n    // your code here\n}\n"

    @pytest.fixture
    def submission_a(self):
        return (
            "public class Main {\n"
            "    int total = 0;\n"
            "    for (int i = 0; i < 10; i++) total += i;\n"
            "}\n"
        )

    @pytest.fixture
    def submission_b(self):
        return (
            "public class Main {\n"
            "  int total = 0;\n"
            "  for (int j = 0; j < 10; j++) total += j;\n"
            "}\n"
        )

    def test_default_shingle_length(self):
        """Shingle length defaults to the configured value."""
        comparison = TextComparison(text1="a", text2="b")
        assert comparison.shingle_length == cfg.similarity.shingle_length
        assert comparison.template == ""

    def test_score_identical(self, submission_a, template):
        """Identical submissions score 1.0 everywhere."""
        report = TextComparison(text1=submission_a, text2=submission_a, template=template).score()
        assert report.line_similarity == 1.0
        assert report.template_line_similarity == 1.0
        assert report.shingle_similarity == 1.0

    def test_score_template_lowers_line_similarity(self, submission_a, submission_b, template):
        """Shared boilerplate lines stop counting once the template is given."""
        report = compare(submission_a, submission_b, template=template, shingle_length=2)
        # Shared: "public class Main {", "int total = 0;", "}" out of 5 distinct lines
        assert report.line_similarity == pytest.approx(3 / 5)
        # Remaining: "int total = 0;" shared, two different loops
        assert report.template_line_similarity == pytest.approx(1 / 3)
        assert report.shingle_length == 2
        assert 0.0 < report.shingle_similarity < 1.0

    def test_compare_matches_model(self, submission_a, submission_b, template):
        """compare is a shortcut for TextComparison.score."""
        direct = TextComparison(
            text1=submission_a, text2=submission_b, template=template, shingle_length=4
        ).score()
        assert compare(submission_a, submission_b, template, 4) == direct

    def test_compare_scenario(self):
        """Bigram scenario from plain sentences."""
        report = compare("the cat sat", "the cat ran", shingle_length=2)
        assert isinstance(report, SimilarityReport)
        assert report.shingle_similarity == pytest.approx(1 / 3)
        assert report.line_similarity == 0.0

    def test_invalid_shingle_length(self):
        """Non-positive shingle length fails validation."""
        with pytest.raises(ValidationError):
            TextComparison(text1="a", text2="b", shingle_length=0)
        with pytest.raises(ValidationError):
            compare("a", "b", shingle_length=-1)

    def test_invalid_text(self):
        """Texts must be strings."""
        with pytest.raises(ValidationError):
            TextComparison(text1=None, text2="b")

    def test_bytes_text_rejected(self):
        """Bytes are not decoded into text."""
        with pytest.raises(ValidationError):
            TextComparison(text1=b"the cat sat", text2="the cat ran")
        with pytest.raises(ValidationError):
            compare("the cat sat", "the cat ran", template=b"the cat")

    def test_shingle_length_not_coerced(self):
        """Booleans and numeric strings are not accepted as lengths."""
        with pytest.raises(ValidationError):
            compare("a b", "a b", shingle_length=True)
        with pytest.raises(ValidationError):
            compare("a b", "a b", shingle_length="2")
        with pytest.raises(ValidationError):
            TextComparison(text1="a b", text2="a b", shingle_length=2.0)

    def test_frozen(self):
        """Comparisons are immutable."""
        comparison = TextComparison(text1="a", text2="b")
        with pytest.raises(ValidationError):
            comparison.text1 = "c"
