"""Tests for markdown rendering of findings."""

import pytest

from scanexport.core.output import FindingEvent
from scanexport.core.reporting import MarkdownRenderer, markdown_description


@pytest.fixture
def full_event():
    """Finding with every optional field set."""
    return FindingEvent.model_validate(
        {
            "host": "https://example.com",
            "template-id": "cve-2021-1234",
            "type": "http",
            "matched-at": "https://example.com/admin",
            "matcher-name": "status",
            "extracted-results": ["v1.2.3", "v1.2.4"],
            "ip": "93.184.216.34",
            "request": "GET /admin HTTP/1.1\nHost: example.com",
            "response": "HTTP/1.1 200 OK",
            "curl-command": "curl -X GET https://example.com/admin",
            "timestamp": "2024-01-15T12:34:56Z",
            "info": {
                "name": "Exposed Admin Panel",
                "author": ["alice", "bob"],
                "tags": "panel,exposure",
                "severity": "medium",
                "description": "Admin panel | reachable\nwithout auth",
                "remediation": "Restrict access",
                "reference": ["https://example.org/advisory"],
            },
        }
    )


@pytest.fixture
def renderer():
    return MarkdownRenderer()


def test_render_details_line(renderer, full_event):
    report = renderer.render(full_event)

    assert report.startswith("**Details**: **cve-2021-1234** matched at https://example.com")
    assert "**Protocol**: HTTP" in report
    assert "**Full URL**: https://example.com/admin" in report
    assert "**Timestamp**: 2024-01-15T12:34:56Z" in report


def test_render_template_information(renderer, full_event):
    report = renderer.render(full_event)

    assert "| Key | Value |" in report
    assert "| Name | Exposed Admin Panel |" in report
    assert "| Authors | alice, bob |" in report
    assert "| Tags | panel, exposure |" in report
    assert "| Severity | medium |" in report
    assert "| Remediation | Restrict access |" in report


def test_render_escapes_table_cells(renderer, full_event):
    """Pipes and newlines do not break the table."""
    report = renderer.render(full_event)

    assert "| Description | Admin panel \\| reachable<br>without auth |" in report


def test_render_evidence_sections(renderer, full_event):
    report = renderer.render(full_event)

    assert "**Request**" in report
    assert "GET /admin HTTP/1.1" in report
    assert "**Response**" in report
    assert "**Matcher Name**: status" in report
    assert "**IP**: 93.184.216.34" in report
    assert "- v1.2.3" in report
    assert "curl -X GET https://example.com/admin" in report
    assert "- https://example.org/advisory" in report


def test_render_minimal_event():
    """Optional sections are left out when the event has no data for them."""
    event = FindingEvent(host="example.com", template_id="tech-detect")

    report = markdown_description(event)

    assert "**Details**: **tech-detect** matched at example.com" in report
    assert "**Request**" not in report
    assert "**Extra Information**" not in report
    assert "**References**" not in report
    assert "| Name |" not in report
