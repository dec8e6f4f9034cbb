"""End-to-end tests for preprocess().

Expected outputs are byte-exact: downstream stylesheets and the host's
markdown pass depend on the exact markup and blank lines.
"""

from __future__ import annotations

import pytest

from admonish import (
    AdmonitionBailError,
    AdmonitionDefaults,
    OnFailure,
    PreprocessConfig,
    RenderTextMode,
    preprocess,
)


class TestBasicBlocks:
    """Blocks with default, named and aliased kinds."""

    def test_adds_admonish(self, prep) -> None:
        """A bare block renders as a titled note."""
        content = "# Chapter\n```admonish\nA simple admonition.\n```\nText\n"
        expected = """# Chapter

<div id="admonition-note" class="admonition note">
<div class="admonition-title">

Note

<a class="admonition-anchor-link" href="#admonition-note"></a>
</div>
<div>

A simple admonition.

</div>
</div>
Text
"""
        assert prep(content) == expected

    def test_longer_code_fence_keeps_inner_fence(self, prep) -> None:
        """A longer outer fence keeps inner fences in the body."""
        content = "# Chapter\n````admonish\n```json\n{}\n```\n````\nText\n"
        expected = """# Chapter

<div id="admonition-note" class="admonition note">
<div class="admonition-title">

Note

<a class="admonition-anchor-link" href="#admonition-note"></a>
</div>
<div>

```json
{}
```

</div>
</div>
Text
"""
        assert prep(content) == expected

    def test_named_kind(self, prep) -> None:
        """A named kind sets class and title."""
        content = "# Chapter\n```admonish warning\nA simple admonition.\n```\nText\n"
        expected = """# Chapter

<div id="admonition-warning" class="admonition warning">
<div class="admonition-title">

Warning

<a class="admonition-anchor-link" href="#admonition-warning"></a>
</div>
<div>

A simple admonition.

</div>
</div>
Text
"""
        assert prep(content) == expected

    def test_alias_keeps_own_title(self, prep) -> None:
        """An alias maps to its kind but keeps its own title."""
        content = "# Chapter\n```admonish caution\nA warning with alternate title.\n```\nText\n"
        expected = """# Chapter

<div id="admonition-caution" class="admonition warning">
<div class="admonition-title">

Caution

<a class="admonition-anchor-link" href="#admonition-caution"></a>
</div>
<div>

A warning with alternate title.

</div>
</div>
Text
"""
        assert prep(content) == expected

    def test_unknown_kind_becomes_note(self, prep) -> None:
        """Unknown kinds render as notes."""
        result = prep("```admonish sparkle\nShiny.\n```\n")
        assert 'id="admonition-note"' in result
        assert 'class="admonition note"' in result
        assert "\nNote\n" in result

    def test_tilde_fence(self, prep) -> None:
        """Tilde fences are recognized."""
        result = prep("~~~admonish tip\nTilde body\n~~~\n")
        assert 'class="admonition tip"' in result
        assert "\n\nTilde body\n\n</div>" in result
        assert "~~~" not in result


class TestTitles:
    """Legacy and attribute titles, slugs derived from them."""

    def test_markdown_title(self, prep) -> None:
        """Title markdown is emitted as written."""
        content = '# Chapter\n```admonish warning "Read **this**!"\nA simple admonition.\n```\nText\n'
        expected = """# Chapter

<div id="admonition-read-this" class="admonition warning">
<div class="admonition-title">

Read **this**!

<a class="admonition-anchor-link" href="#admonition-read-this"></a>
</div>
<div>

A simple admonition.

</div>
</div>
Text
"""
        assert prep(content) == expected

    def test_info_string_that_changes_length_when_unescaped(self, prep) -> None:
        """Entities and escapes in the info string are decoded."""
        content = r"""
```admonish note "And \\"<i>in</i>\\" the title"
With <b>html</b> styling.
```
hello
"""
        expected = """

<div id="admonition-and-in-the-title" class="admonition note">
<div class="admonition-title">

And "<i>in</i>" the title

<a class="admonition-anchor-link" href="#admonition-and-in-the-title"></a>
</div>
<div>

With <b>html</b> styling.

</div>
</div>
hello
"""
        assert prep(content) == expected

    def test_title_ending_in_symbol(self, prep) -> None:
        """Trailing symbols do not leave a trailing hyphen in the id."""
        content = '\n```admonish warning "Trademark™"\nShould be respected\n```\nhello\n'
        expected = """

<div id="admonition-trademark" class="admonition warning">
<div class="admonition-title">

Trademark™

<a class="admonition-anchor-link" href="#admonition-trademark"></a>
</div>
<div>

Should be respected

</div>
</div>
hello
"""
        assert prep(content) == expected

    def test_default_title_from_config(self, titled_defaults_config) -> None:
        """The configured default title applies to bare blocks."""
        content = "# Chapter\n```admonish\nA simple admonition.\n```\nText\n"
        expected = """# Chapter

<div id="admonition-admonish" class="admonition note">
<div class="admonition-title">

Admonish

<a class="admonition-anchor-link" href="#admonition-admonish"></a>
</div>
<div>

A simple admonition.

</div>
</div>
Text
"""
        assert preprocess(content, titled_defaults_config) == expected

    def test_default_title_not_used_when_kind_is_named(self, titled_defaults_config) -> None:
        """Named kinds keep their own title."""
        result = preprocess("```admonish tip\nx\n```", titled_defaults_config)
        assert "\nTip\n" in result
        assert "Admonish" not in result

    @pytest.mark.parametrize("with_default_title", [False, True])
    def test_empty_explicit_title(self, with_default_title: bool) -> None:
        """An empty title suppresses the title wrapper."""
        defaults = AdmonitionDefaults(title="Admonish" if with_default_title else None)
        content = '# Chapter\n```admonish title=""\nA simple admonition.\n```\nText\n'
        expected = """# Chapter

<div id="admonition-default" class="admonition note">
<div>

A simple admonition.

</div>
</div>
Text
"""
        assert preprocess(content, PreprocessConfig(defaults=defaults)) == expected

    @pytest.mark.parametrize("kind", ["tip", "danger", "quote"])
    def test_empty_title_ignores_kind(self, prep, kind: str) -> None:
        """A suppressed title uses the default id whatever the kind."""
        result = prep(f'```admonish {kind} title=""\nBody\n```')
        assert 'id="admonition-default"' in result
        assert "admonition-title" not in result


class TestClasses:
    """Extra CSS classes from both grammars."""

    def test_additional_classnames(self, prep) -> None:
        """Legacy classes are appended to the class attribute."""
        content = "\n```admonish tip.my-style.other-style\nWill have bonus classnames\n```\n"
        expected = """

<div id="admonition-tip" class="admonition tip my-style other-style">
<div class="admonition-title">

Tip

<a class="admonition-anchor-link" href="#admonition-tip"></a>
</div>
<div>

Will have bonus classnames

</div>
</div>
"""
        assert prep(content) == expected

    def test_additional_classnames_and_title(self, prep) -> None:
        """Legacy classes combine with a title."""
        content = (
            "\n```admonish tip.my-style.other-style "
            '"Developers don\'t want you to know this one weird tip!"\n'
            "Will have bonus classnames\n```\n"
        )
        expected = """

<div id="admonition-developers-dont-want-you-to-know-this-one-weird-tip" class="admonition tip my-style other-style">
<div class="admonition-title">

Developers don't want you to know this one weird tip!

<a class="admonition-anchor-link" href="#admonition-developers-dont-want-you-to-know-this-one-weird-tip"></a>
</div>
<div>

Will have bonus classnames

</div>
</div>
"""
        assert prep(content) == expected

    def test_empty_classnames_title_and_content(self, prep) -> None:
        """Empty classes, title and body still render."""
        content = '\n```admonish .... ""\n```\n'
        expected = """

<div id="admonition-default" class="admonition note">
<div>



</div>
</div>
"""
        assert prep(content) == expected

    def test_attribute_form(self, prep) -> None:
        """The attribute grammar renders like the legacy one."""
        content = '\n```admonish tip class="my other-style" title="Article Heading"\nBonus content!\n```\n'
        expected = """

<div id="admonition-article-heading" class="admonition tip my other-style">
<div class="admonition-title">

Article Heading

<a class="admonition-anchor-link" href="#admonition-article-heading"></a>
</div>
<div>

Bonus content!

</div>
</div>
"""
        assert prep(content) == expected

    @pytest.mark.parametrize(
        ("header", "title"),
        [
            ('title="x" # trailing comment', "x"),
            ('foo=1 title="x"', "x"),
            ('title="""multi"""', "multi"),
        ],
    )
    def test_attribute_form_accepts_toml(self, prep, header: str, title: str) -> None:
        """Any TOML the attribute grammar reads renders normally."""
        result = prep(f"```admonish {header}\nbody\n```\n")
        assert f'<div id="admonition-{title}" class="admonition note">' in result
        assert f"\n{title}\n" in result
        assert "bug" not in result

class TestUniqueIds:
    """Anchor ids within one document."""

    def test_same_title_gets_suffix(self, prep) -> None:
        """Repeated titles get numbered ids."""
        content = """
```admonish note "My Note"
Content zero.
```

```admonish note "My Note"
Content one.
```
"""
        expected = """

<div id="admonition-my-note" class="admonition note">
<div class="admonition-title">

My Note

<a class="admonition-anchor-link" href="#admonition-my-note"></a>
</div>
<div>

Content zero.

</div>
</div>


<div id="admonition-my-note-1" class="admonition note">
<div class="admonition-title">

My Note

<a class="admonition-anchor-link" href="#admonition-my-note-1"></a>
</div>
<div>

Content one.

</div>
</div>
"""
        assert prep(content) == expected

    def test_ids_restart_per_document(self, prep) -> None:
        """Each call starts a fresh id allocator."""
        content = "```admonish\nx\n```\n"
        assert prep(content) == prep(content)
        assert 'id="admonition-note-1"' not in prep(content)

    def test_title_colliding_with_suffixed_id(self, prep) -> None:
        """A literal title never reuses a generated id."""
        content = (
            '```admonish note "My Note"\na\n```\n\n'
            '```admonish note "My Note 1"\nb\n```\n\n'
            '```admonish note "My Note"\nc\n```\n'
        )
        result = prep(content)
        assert result.count('id="admonition-my-note"') == 1
        assert result.count('id="admonition-my-note-1"') == 1
        assert result.count('id="admonition-my-note-2"') == 1


class TestCollapsible:
    """Collapsible blocks from headers and defaults."""

    def test_collapsible_block(self, prep) -> None:
        """Collapsible blocks use details and summary."""
        content = "\n```admonish collapsible=true\nHidden\n```\n"
        expected = """

<details id="admonition-note" class="admonition note">
<summary class="admonition-title">

Note

<a class="admonition-anchor-link" href="#admonition-note"></a>
</summary>
<div>

Hidden

</div>
</details>
"""
        assert prep(content) == expected

    def test_collapsible_default(self) -> None:
        """The configured default makes blocks collapsible."""
        config = PreprocessConfig(defaults=AdmonitionDefaults(collapsible=True))
        result = preprocess("```admonish\nHidden\n```", config)
        assert result.startswith('\n<details id="admonition-note"')

    def test_explicit_false_overrides_default(self) -> None:
        """collapsible=false beats the default."""
        config = PreprocessConfig(defaults=AdmonitionDefaults(collapsible=True))
        result = preprocess("```admonish collapsible=false\nShown\n```", config)
        assert result.startswith('\n<div id="admonition-note"')
        assert "<details" not in result


class TestPassthrough:
    """Documents without admonish blocks come back byte-identical."""

    def test_leaves_tables_untouched(self, prep) -> None:
        """Tables pass through."""
        content = "# Heading\n| Head 1 | Head 2 |\n|--------|--------|\n| Row 1  | Row 2  |\n"
        assert prep(content) == content

    def test_leaves_html_untouched(self, prep) -> None:
        """Raw HTML passes through."""
        content = "# Heading\n<del>\n*foo*\n</del>\n"
        assert prep(content) == content

    def test_leaves_code_in_list_untouched(self, prep) -> None:
        """Ordinary fences in lists pass through."""
        content = "# Heading\n1. paragraph 1\n   ```\n   code 1\n   ```\n2. paragraph 2\n"
        assert prep(content) == content

    def test_similar_keyword_is_not_admonition(self, prep) -> None:
        """Keywords that only start with admonish are ignored."""
        content = "```admonishment\nnot me\n```\n"
        assert prep(content) == content

    def test_indented_code_is_not_admonition(self, prep) -> None:
        """Indented code blocks are ignored."""
        content = "Para\n\n    ```admonish\n    literal\n    ```\n"
        assert prep(content) == content

    def test_inline_code_is_not_admonition(self, prep) -> None:
        """Inline code is ignored."""
        content = "Use ```admonish``` inline.\n"
        assert prep(content) == content

    def test_surrounding_text_kept(self, prep) -> None:
        """Text around a block is copied unchanged."""
        content = "before\n\n```rust\nfn main() {}\n```\n\n```admonish\nx\n```\n\nafter *text*\r\n"
        result = prep(content)
        assert result.startswith("before\n\n```rust\nfn main() {}\n```\n\n\n<div")
        assert result.endswith("</div>\n</div>\n\nafter *text*\r\n")


class TestFailurePolicy:
    """Malformed headers under continue and bail."""

    def test_continue_renders_bug_block(self, prep) -> None:
        """A bad header renders an error block."""
        content = '\n```admonish title="\nBonus content!\n```\n'
        expected = """

<div id="admonition-error-rendering-admonishment" class="admonition bug">
<div class="admonition-title">

Error rendering admonishment

<a class="admonition-anchor-link" href="#admonition-error-rendering-admonishment"></a>
</div>
<div>

Failed with:

```log
directive parse error at line 1, column 8
  |
1 | title="
  |        ^
Unterminated string
```

Original markdown input:

````markdown
```admonish title="
Bonus content!
```
````


</div>
</div>
"""
        assert prep(content) == expected

    def test_continue_processes_rest_of_document(self, prep) -> None:
        """Blocks after a bad header still render."""
        content = '```admonish title="\nbad\n```\n\n```admonish tip\ngood\n```\n'
        result = prep(content)
        assert 'class="admonition bug"' in result
        assert 'id="admonition-tip"' in result
        assert "\n\ngood\n\n" in result

    def test_continue_logs_warning(self, prep, caplog) -> None:
        """A bad header is logged."""
        with caplog.at_level("WARNING", logger="admonish"):
            prep('```admonish note "open\nx\n```\n')
        assert any("line 1" in record.getMessage() for record in caplog.records)

    def test_bail_raises_with_original_source(self, bail_config) -> None:
        """Bail raises with the block source."""
        content = '\n```admonish title="\nBonus content!\n```\n'
        with pytest.raises(AdmonitionBailError) as exc_info:
            preprocess(content, bail_config)
        assert str(exc_info.value) == (
            'Error processing admonition, bailing:\n```admonish title="\nBonus content!\n```'
        )
        assert exc_info.value.__cause__ is not None

    def test_bail_on_later_block(self, bail_config) -> None:
        """Bail fires on any block, not just the first."""
        content = '```admonish\nok\n```\n\n```admonish tip"x"\nbad\n```\n'
        with pytest.raises(AdmonitionBailError, match='tip"x"'):
            preprocess(content, bail_config)

    def test_bail_passes_valid_documents(self, bail_config) -> None:
        """Bail leaves valid documents alone."""
        result = preprocess("```admonish tip\nfine\n```", bail_config)
        assert 'class="admonition tip"' in result


class TestStripMode:
    """Strip mode output."""

    def test_strip_keeps_body_only(self, strip_config) -> None:
        """Strip mode emits the body alone."""
        content = '\n````admonish title="Title"\n```rust\nlet x = 10;\nx = 20;\n```\n````\n'
        expected = "\n\n```rust\nlet x = 10;\nx = 20;\n```\n\n"
        assert preprocess(content, strip_config) == expected

    def test_strip_ignores_kind_and_classes(self, strip_config) -> None:
        """Strip mode ignores header fields."""
        result = preprocess('```admonish danger.loud "Title"\nBody\n```', strip_config)
        assert result == "\nBody\n"

    def test_strip_with_error_renders_bug_body(self) -> None:
        """Strip mode still reports bad headers."""
        config = PreprocessConfig(render_mode=RenderTextMode.STRIP)
        result = preprocess('```admonish title="\nBody\n```', config)
        assert result.startswith("\nFailed with:\n")
        assert "Original markdown input" in result


class TestNesting:
    """Blocks inside container structures."""

    def test_block_in_list_item(self, prep) -> None:
        """Blocks nested in list items render."""
        content = "1. item\n   ```admonish\n   inside\n   ```\n2. next\n"
        result = prep(content)
        assert result.startswith('1. item\n   \n<div id="admonition-note"')
        assert "<div>\n\n   inside\n\n</div>" in result
        assert result.endswith("</div>\n</div>\n2. next\n")

    def test_unclosed_block_runs_to_end(self, prep) -> None:
        """An unclosed block runs to the end of the document."""
        result = prep("Intro\n\n```admonish tip\nno closing fence\n")
        assert result.startswith('Intro\n\n\n<div id="admonition-tip"')
        assert result.endswith("<div>\n\nno closing fence\n\n</div>\n</div>\n")

    def test_crlf_line_endings(self, prep) -> None:
        """CRLF documents are handled."""
        content = "a\r\n\r\n```admonish tip\r\nbody\r\n```\r\nb\r\n"
        result = prep(content)
        assert result.startswith('a\r\n\r\n\n<div id="admonition-tip"')
        assert "<div>\n\nbody\n\n</div>" in result
        assert result.endswith("</div>\n</div>\r\nb\r\n")


class TestAmbientConfig:
    """Config taken from the context variable."""

    def test_uses_context_config(self) -> None:
        """Without a config argument the context config applies."""
        from admonish import preprocess_config_context

        content = '```admonish title="\nx\n```'
        with preprocess_config_context(PreprocessConfig(on_failure=OnFailure.BAIL)):
            with pytest.raises(AdmonitionBailError):
                preprocess(content)
        assert 'class="admonition bug"' in preprocess(content)
