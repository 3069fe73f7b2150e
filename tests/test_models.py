"""Tests for record and query models."""

import json

import pytest
from pydantic import ValidationError

from paperscope.models.paper import PaperRecord, papers_from_json, papers_to_json
from paperscope.models.query import SearchQuery


def test_paper_record_defaults():
    paper = PaperRecord()

    assert paper.title == ""
    assert paper.authors == ()
    assert paper.abstract_text == ""
    assert paper.url == ""
    assert paper.categories == ()


def test_paper_record_is_frozen():
    paper = PaperRecord(title="T")

    with pytest.raises(ValidationError):
        paper.title = "Other"


def test_papers_to_json_uses_stable_field_names(sample_paper_dict):
    paper = PaperRecord(**sample_paper_dict)

    payload = json.loads(papers_to_json([paper]))

    assert payload == [sample_paper_dict]


def test_papers_from_json(sample_paper_dict):
    papers = papers_from_json(json.dumps([sample_paper_dict, {"title": "Bare"}]))

    assert papers[0] == PaperRecord(**sample_paper_dict)
    assert papers[1] == PaperRecord(title="Bare")


def test_papers_from_json_rejects_non_list():
    with pytest.raises(ValidationError):
        papers_from_json('{"title": "not a list"}')


def test_search_query_defaults():
    query = SearchQuery(query="graph neural networks")

    assert query.start == 0
    assert query.max_results == 5
    assert query.search_query == "all:graph neural networks"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"query": ""},
        {"query": "x", "max_results": 0},
        {"query": "x", "max_results": 2001},
        {"query": "x", "start": -1},
    ],
)
def test_search_query_validation(kwargs):
    with pytest.raises(ValidationError):
        SearchQuery(**kwargs)
