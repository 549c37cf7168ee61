"""
renderer.py - HTML Tag Cloud Output

Builds the tag cloud page with BeautifulSoup. Each word becomes a span
whose class f<size> picks the font size from the linked stylesheet and
whose title shows the raw count.
"""

from bs4 import BeautifulSoup

PAGE_SKELETON = "<html><head></head><body></body></html>"


def _heading(size, source_name):
    return f"Top {size} words in {source_name}"


def build_document(entries, size, source_name, stylesheets=()):
    """
    Build the tag cloud page as a BeautifulSoup tree.

    Args:
        entries: TagCloudEntry values, already in display order
        size: Requested cloud size (shown in the title, even if fewer words exist)
        source_name: Name of the text file the words came from
        stylesheets: Stylesheet hrefs to link from <head>
    """
    soup = BeautifulSoup(PAGE_SKELETON, "lxml")

    title = soup.new_tag("title")
    title.string = _heading(size, source_name)
    soup.head.append(title)
    for href in stylesheets:
        soup.head.append(soup.new_tag("link", href=href, rel="stylesheet", type="text/css"))

    h2 = soup.new_tag("h2")
    h2.string = _heading(size, source_name)
    soup.body.append(h2)
    soup.body.append(soup.new_tag("hr"))

    div = soup.new_tag("div", attrs={"class": "cdiv"})
    box = soup.new_tag("p", attrs={"class": "cbox"})
    for entry in entries:
        span = soup.new_tag("span", attrs={
            "style": "cursor:default",
            "class": f"f{entry.font_size}",
            "title": f"count:{entry.count}",
        })
        span.string = entry.word
        box.append(span)
        box.append("\n")
    div.append(box)
    soup.body.append(div)
    return soup


def render_tag_cloud(entries, size, source_name, stylesheets=()):
    """Return the tag cloud page as an HTML string."""
    return str(build_document(entries, size, source_name, stylesheets))


def write_tag_cloud(path, entries, size, source_name, stylesheets=()):
    """Render the tag cloud and write it to path (UTF-8)."""
    html = render_tag_cloud(entries, size, source_name, stylesheets)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
