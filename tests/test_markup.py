"""Tests for the section markup scanners."""

from helpers import make_cover_html, make_poem_rows

from ses_makinesi.extractors.markup import (
    iter_rows,
    parse_audio_locations,
    parse_cover,
    parse_last_column,
    strip_tags,
)


class TestIterRows:
    """Tests for the iter_rows tokenizer."""

    def test_yields_one_fragment_per_row(self):
        """N row pairs produce exactly N fragments."""
        content = "".join(f"<tr><td>{i}</td></tr>" for i in range(5))

        rows = list(iter_rows(content))

        assert len(rows) == 5

    def test_fragment_spans_open_marker_to_close_marker(self):
        """Fragments start at <tr> and stop before </tr>."""
        content = "<table><tr><td>a</td></tr>\n<tr><td>b</td><td>c</td></tr></table>"

        rows = list(iter_rows(content))

        assert rows == ["<tr><td>a</td>", "<tr><td>b</td><td>c</td>"]

    def test_no_rows(self):
        """Content without rows yields nothing."""
        assert list(iter_rows("<p>Ses Makinesi</p>")) == []
        assert list(iter_rows("")) == []

    def test_rows_with_attributes_are_not_rows(self):
        """Only the bare <tr> marker opens a row."""
        content = '<tr class="x"><td>a</td></tr><tr><td>b</td></tr>'

        assert list(iter_rows(content)) == ["<tr><td>b</td>"]

    def test_nested_row_resumes_after_previous_open_marker(self):
        """Scanning resumes after the previous <tr>, not after its </tr>."""
        content = "<tr><td>a<tr><td>b</td></tr></td></tr>"

        rows = list(iter_rows(content))

        assert rows == ["<tr><td>a<tr><td>b</td>", "<tr><td>b</td>"]

    def test_unclosed_row_runs_to_sentinel(self):
        """A row without </tr> stops before the last character of the content."""
        content = "<tr><td>a</td></tr><tr><td>b</td>"

        rows = list(iter_rows(content))

        assert rows == ["<tr><td>a</td>", "<tr><td>b</td"]

    def test_unclosed_row_logs_warning(self, caplog):
        """An unclosed row is reported."""
        list(iter_rows("<tr><td>a</td>"))

        assert "Unclosed row" in caplog.text

    def test_is_lazy_and_restartable(self):
        """The tokenizer is a generator that can be run again."""
        content = make_poem_rows("Şair", "Şiir", "Okuyan")

        rows = iter_rows(content)

        assert next(rows).startswith("<tr>")
        assert list(iter_rows(content)) == list(iter_rows(content))
        assert len(list(iter_rows(content))) == 4


class TestParseAudioLocations:
    """Tests for the audio reference scanner."""

    def test_returns_class_of_hidden_single_cell_inputs(self):
        """Hidden size-1 inputs supply their class value."""
        content = '<input type="hidden" size="1" class="/magazines/12/audio/a.mp3">'

        assert parse_audio_locations(content) == ["/magazines/12/audio/a.mp3"]

    def test_keeps_document_order(self):
        """References come back in the order the inputs appear."""
        content = "".join(
            make_poem_rows("p", "t", "r", audio=f"/audio/{name}.mp3")
            for name in ("c", "a", "b")
        )

        assert parse_audio_locations(content) == ["/audio/c.mp3", "/audio/a.mp3", "/audio/b.mp3"]

    def test_ignores_inputs_that_are_not_hidden(self):
        """Visible inputs are skipped even when sized to one cell."""
        content = (
            '<input type="text" size="1" class="/audio/no.mp3">'
            '<input type="hidden" size="1" class="/audio/yes.mp3">'
        )

        assert parse_audio_locations(content) == ["/audio/yes.mp3"]

    def test_ignores_inputs_with_other_sizes(self):
        """Hidden inputs of another size are skipped."""
        content = (
            '<input type="hidden" size="10" class="/audio/no.mp3">'
            '<input type="hidden" class="/audio/none.mp3">'
            '<input size="1" type="hidden" class="/audio/yes.mp3" />'
        )

        assert parse_audio_locations(content) == ["/audio/yes.mp3"]

    def test_skips_matching_input_without_class(self, caplog):
        """A matching input without class is skipped with a warning."""
        content = (
            '<input type="hidden" size="1" id="player">'
            '<input type="hidden" size="1" class="/audio/a.mp3">'
        )

        assert parse_audio_locations(content) == ["/audio/a.mp3"]
        assert "without class attribute" in caplog.text

    def test_unterminated_input_is_ignored(self):
        """An input running to the end of the content yields nothing."""
        assert parse_audio_locations('<input type="hidden" size="1" class="/a.mp3"') == []

    def test_no_inputs(self):
        """Content without inputs yields an empty list."""
        assert parse_audio_locations("<table></table>") == []


class TestStripTags:
    """Tests for the tag stripper."""

    def test_removes_tags(self):
        """All tags are removed and text is kept."""
        assert strip_tags('<b>İsmet</b> <a href="/x">Özel</a>') == "İsmet Özel"

    def test_decodes_character_references(self):
        """Entities are decoded to plain text."""
        assert strip_tags("Ali &amp; Veli&nbsp;&#351;") == "Ali & Veli\xa0ş"

    def test_drops_script_and_style_bodies(self):
        """Non-text elements disappear together with their content."""
        html = "Kara<script>alert(1)</script> <style>b{}</style>Gözler"

        assert strip_tags(html) == "Kara Gözler"

    def test_preserves_whitespace(self):
        """Whitespace is kept as authored."""
        assert strip_tags("  Capriccio Ölüm //<br> Ölüm Cantabile\n") == (
            "  Capriccio Ölüm // Ölüm Cantabile\n"
        )

    def test_idempotent_on_plain_text(self):
        """Stripping twice equals stripping once."""
        texts = [
            "Kara Gözler",
            "<i>Kara</i> Gözler",
            "",
            "  a  b  ",
            "a &amp;lt; b",
            "&lt;i&gt;x&lt;/i&gt;",
            "&amp;amp;amp;",
        ]
        for text in texts:
            once = strip_tags(text)
            assert strip_tags(once) == once

    def test_decodes_nested_references(self):
        """Escaped references are decoded until plain text remains."""
        assert strip_tags("a &amp;lt; b") == "a < b"

    def test_removes_escaped_markup(self):
        """Markup revealed by decoding is stripped as well."""
        assert strip_tags("&lt;i&gt;Mona Roza&lt;/i&gt;") == "Mona Roza"

    def test_keeps_stray_angle_brackets(self):
        """A bracket not followed by a tag name is text."""
        assert strip_tags("a < b > c") == "a < b > c"
        assert strip_tags("1 <2 and 3> 2") == "1 <2 and 3> 2"

    def test_removes_comments(self):
        """HTML comments are dropped."""
        assert strip_tags("Kara<!-- eski > yeni --> Gözler") == "Kara Gözler"

    def test_empty(self):
        """Empty input gives an empty string."""
        assert strip_tags("") == ""


class TestParseLastColumn:
    """Tests for the last-cell sanitizer."""

    def test_reads_last_cell(self):
        """The label cell is ignored and the value cell is returned."""
        row = "<tr><td><b>Şair:</b></td><td><i>İsmet Özel</i></td>"

        assert parse_last_column(row) == "İsmet Özel"

    def test_single_cell(self):
        """A row with one cell returns that cell's text."""
        assert parse_last_column("<tr><td>Kara Gözler</td>") == "Kara Gözler"

    def test_last_cell_wins(self):
        """An unexpected trailing cell is what gets read."""
        row = "<tr><td>Okuyan:</td><td>Semih Bozkurt</td><td>extra</td>"

        assert parse_last_column(row) == "extra"

    def test_row_without_cells(self):
        """A row without cells gives an empty string."""
        assert parse_last_column("<tr>") == ""

    def test_unclosed_last_cell(self):
        """A last cell opened after the last close marker gives an empty string."""
        assert parse_last_column("<tr><td>a</td><td>b") == ""


class TestParseCover:
    """Tests for the cover image scanner."""

    def test_returns_first_src(self):
        """The first src attribute wins."""
        assert parse_cover(make_cover_html(12)) == "/magazines/12/kapak.jpg"

    def test_returns_none_without_image(self):
        """Pages without src attributes give None."""
        assert parse_cover("<h1>Galata</h1>") is None
