"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def sample_atom_content():
    """Sample arXiv export API response with two entries."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/"
      xmlns:arxiv="http://arxiv.org/schemas/atom">
  <title type="html">ArXiv Query: search_query=all:transformers</title>
  <link href="http://arxiv.org/api/query?search_query=all:transformers" rel="self"/>
  <opensearch:totalResults>2</opensearch:totalResults>
  <entry>
    <id>http://arxiv.org/abs/2301.12345v2</id>
    <title>  Attention Is Still All You Need </title>
    <summary>
      We revisit attention.
    </summary>
    <author><name>Alice Smith</name></author>
    <author><name>Bob Jones</name></author>
    <link href="http://arxiv.org/abs/2301.12345v2" rel="alternate" type="text/html"/>
    <arxiv:primary_category term="cs.LG" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.LG" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.AI" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
  <entry>
    <id>http://arxiv.org/abs/2302.00001v1</id>
    <title>Second Paper</title>
    <summary>Another abstract.</summary>
    <author><name>Carol White</name></author>
    <link href="http://arxiv.org/pdf/2302.00001v1" rel="related" type="application/pdf"/>
    <category term="stat.ML"/>
  </entry>
</feed>"""


@pytest.fixture
def empty_atom_content():
    """Well-formed feed with no entries."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>ArXiv Query: search_query=all:nothing</title>
  <link href="http://arxiv.org/api/query" rel="self"/>
</feed>"""


@pytest.fixture
def sample_paper_dict():
    """Expected JSON form of the first sample entry."""
    return {
        "title": "Attention Is Still All You Need",
        "authors": ["Alice Smith", "Bob Jones"],
        "abstract_text": "We revisit attention.",
        "url": "https://arxiv.org/pdf/2301.12345v2.pdf",
        "categories": ["cs.LG", "cs.AI"],
    }
