"""Tests for gnomit.message.markup module."""

from gnomit.config import APPLICATION_NAME
from gnomit.message import annotate, build_markup, parse, window_title


class TestWindowTitle:
    """Tests for window_title function."""

    def test_project_and_branch(self):
        """Test the full title."""
        assert window_title("project", "main") == "project (main)"

    def test_project_only(self):
        """Test the branch is omitted when unknown."""
        assert window_title("project", None) == "project"

    def test_branch_only(self):
        """Test the program name stands in for an unknown project."""
        assert window_title(None, "main") == "Gnomit (main)"

    def test_neither(self):
        """Test the application name is used when nothing is known."""
        assert window_title(None, None) == APPLICATION_NAME


class TestBuildMarkup:
    """Tests for build_markup function."""

    def test_comment_is_wrapped_in_span(self):
        """Test the comment block is coloured."""
        result = build_markup("Merge", "\n# comment")

        assert result == 'Merge<span foreground="#959595">\n# comment</span>'

    def test_custom_color(self):
        """Test a configured colour is used."""
        assert 'foreground="#aaaaaa"' in build_markup("", "\n#", "#aaaaaa")

    def test_escapes_quotes_in_color(self):
        """Test a quote in the colour cannot end the attribute."""
        result = build_markup("", "\n#", '#fff" weight="bold')

        assert 'foreground="#fff&quot; weight=&quot;bold"' in result

    def test_escapes_markup_characters(self):
        """Test that angle brackets and ampersands are escaped."""
        result = build_markup("Merge <feature> & fix", "\n# <b>")

        assert "Merge &lt;feature&gt; &amp; fix" in result
        assert "# &lt;b&gt;" in result


class TestAnnotate:
    """Tests for annotate function."""

    def test_cursor_at_start_without_body(self, commit_template):
        """Test the cursor sits at the start when there is no body."""
        parsed = parse(commit_template.encode("utf-8"), "/home/u/project/.git/COMMIT_EDITMSG")

        annotated = annotate(parsed)

        assert annotated.cursor_offset == 0
        assert annotated.protected_start == 0
        assert annotated.protected_end == len(annotated.text)
        assert annotated.title == "project (main)"

    def test_cursor_after_body(self, merge_template):
        """Test the cursor sits at the end of the body."""
        parsed = parse(merge_template.encode("utf-8"), "/work/webapp/.git/MERGE_MSG")

        annotated = annotate(parsed)
        body = "Merge branch 'feature/login' into develop"

        assert annotated.cursor_offset == len(body)
        assert annotated.text[: annotated.cursor_offset] == body
        assert annotated.text[annotated.protected_start:] == parsed.comment
        assert annotated.title == "webapp (develop)"

    def test_markup_uses_color(self, commit_template):
        """Test the comment colour flows into the markup."""
        parsed = parse(commit_template.encode("utf-8"), "/tmp/COMMIT_EDITMSG")

        annotated = annotate(parsed, "#123456")

        assert annotated.markup.startswith('<span foreground="#123456">')
        assert annotated.markup.endswith("</span>")
