from fuze.services.linkscan.links import extract_hrefs

def test_extracts_anchor_hrefs_only():
    html = """
    <html><head><link href="/style.css"></head>
    <body>
      <a href="/a">a</a>
      <a href="/a">again</a>
      <a name="no-href">x</a>
      <area href="/map">
      <a href="https://other.test/">out</a>
    </body></html>
    """
    assert sorted(extract_hrefs(html)) == ["/a", "/a", "https://other.test/"]

def test_malformed_markup_degrades():
    assert extract_hrefs("<a href='/x'><div><<<</a") in ([], ["/x"])
    assert extract_hrefs("") == []
    assert extract_hrefs("plain text, no markup") == []

def test_parser_failure_yields_no_links(monkeypatch, caplog):
    from fuze.services.linkscan import links

    def boom(*a, **kw):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(links, "BeautifulSoup", boom)
    with caplog.at_level("WARNING", logger="fuze.services.linkscan.links"):
        assert links.extract_hrefs('<a href="/x">x</a>') == []
    assert "parser exploded" in caplog.text
