from b4x_search.extract.text import strip_html


def test_strip_html_decodes_entities():
    assert strip_html("<b>A &amp; B</b>") == "A & B"
    assert strip_html("&lt;tag&gt; &quot;q&quot; it&#39;s&nbsp;here") == "<tag> \"q\" it's here"


def test_strip_html_drops_script_and_style_blocks():
    html = """
    <p>Before</p>
    <SCRIPT type="text/javascript">var x = "<b>not text</b>";</SCRIPT>
    <style>.block-row { color: red; }</style>
    <p>After</p>
    """
    assert strip_html(html) == "Before After"


def test_strip_html_collapses_whitespace():
    assert strip_html("  <div>\n\tone\n\n<span>two</span>   three </div> ") == "one two three"
