from __future__ import annotations

from b4x_search.extract.results import extract_result_from_item, parse_search_results
from b4x_search.settings import DEFAULT_BASE_URL


def _block(inner: str) -> str:
    return f'<li class="block-row block-row--separated">{inner}</li>'


SAMPLE_ITEM = """
<div class="contentRow">
  <div class="contentRow-main">
    <h3 class="contentRow-title"><a href="/threads/sample.123/">Sample Thread</a></h3>
    <div class="contentRow-snippet">Example answer text</div>
    <div class="contentRow-minor">
      <a href="/members/erel.5/" class="username" data-user-id="5">Erel</a>
      <time class="u-dt" datetime="2024-01-01" data-time="1704067200">Jan 1, 2024</time>
    </div>
  </div>
</div>
"""


def test_parses_block_row_item():
    html = "<ol class='block-body'>" + _block(SAMPLE_ITEM) + "</ol>"
    results = parse_search_results(html, 10)
    assert len(results) == 1
    assert results[0].to_dict() == {
        "title": "Sample Thread",
        "url": f"{DEFAULT_BASE_URL}/threads/sample.123/",
        "snippet": "Example answer text",
        "author": "Erel",
        "date": "2024-01-01",
    }


def test_forum_category_only_present_when_linked():
    item = extract_result_from_item(
        '<a class="contentRow-title" href="https://www.b4x.com/android/forum/threads/x.1/">Some <em>title</em></a>'
        '<a href="/android/forum/forums/android-questions.26/">Android Questions</a>'
    )
    assert item is not None
    assert item.title == "Some title"
    assert item.url == "https://www.b4x.com/android/forum/threads/x.1/"
    assert item.forum == "Android Questions"

    bare = extract_result_from_item('<a href="/threads/y.2/">Another thread</a>')
    assert bare is not None
    assert "forum" not in bare.to_dict()
    assert bare.snippet == "" and bare.author == "" and bare.date == ""


def test_field_fallbacks():
    item = extract_result_from_item(
        '<a href="/threads/z.3/">Thread z</a>'
        '<a class="username" href="/members/bob.9/">Bob</a>'
        "<time>Yesterday at 3:00 PM</time>"
        '<div class="contentRow-snippet">' + "x" * 400 + "</div>"
    )
    assert item is not None
    assert item.author == "Bob"
    assert item.date == "Yesterday at 3:00 PM"
    assert len(item.snippet) == 300


def test_short_titles_are_rejected():
    html = _block('<a class="contentRow-title" href="/threads/ab.1/">ab</a>')
    assert extract_result_from_item('<a class="contentRow-title" href="/threads/ab.1/"> <b>ab</b> </a>') is None
    assert parse_search_results(html, 10) == []


def test_limit_is_respected():
    html = "".join(_block(f'<a href="/threads/t.{i}/">Thread number {i}</a>') for i in range(5))
    results = parse_search_results(html, 2)
    assert [r.title for r in results] == ["Thread number 0", "Thread number 1"]
    assert parse_search_results(html, 0) == []


def test_thread_link_fallback_dedupes_and_filters():
    html = """
    <div>
      <a href="/threads/a.1/">First thread</a>
      <a href="/threads/a.1/">Duplicate of first</a>
      <a href="/threads/b.2/">Tiny</a>
      <a href="https://example.org/threads/c.3/">Absolute link</a>
      <a href="/members/x.1/">Not a thread at all</a>
    </div>
    """
    results = parse_search_results(html, 10)
    assert [(r.title, r.url) for r in results] == [
        ("First thread", f"{DEFAULT_BASE_URL}/threads/a.1/"),
        ("Absolute link", "https://example.org/threads/c.3/"),
    ]
    assert all(r.snippet == "" and r.author == "" and r.date == "" for r in results)
    assert len(parse_search_results(html, 1)) == 1


def test_no_matches_yields_empty():
    assert parse_search_results("<html><body><p>No results.</p></body></html>", 10) == []
    assert parse_search_results("", 10) == []


def test_parsing_is_repeatable():
    html = _block(SAMPLE_ITEM) + _block('<a href="/threads/q.7/">Second result</a>')
    assert parse_search_results(html, 10) == parse_search_results(html, 10)


def test_custom_base_url():
    results = parse_search_results(_block(SAMPLE_ITEM), 10, base_url="https://forum.test/android/forum")
    assert results[0].url == "https://forum.test/android/forum/threads/sample.123/"
